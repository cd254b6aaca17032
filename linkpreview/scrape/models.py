"""Data models for the scrape submodule."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ExtractionResult:
    """Title and preview image extracted from a single page, either may be absent."""

    title: str | None = None
    preview_image: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.title is None and self.preview_image is None


@dataclass(frozen=True)
class ScrapeRecord:
    """Final per-URL output: a success record or an error record, never both."""

    url: str
    title: str | None = None
    preview_image: str | None = None
    error: str | None = None

    @classmethod
    def success(cls, url: str, result: ExtractionResult) -> ScrapeRecord:
        return cls(url=url, title=result.title, preview_image=result.preview_image)

    @classmethod
    def failure(cls, url: str, error: str) -> ScrapeRecord:
        return cls(url=url, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the public record shape (``previewImage`` in camelCase)."""
        if self.error is not None:
            return {"url": self.url, "error": self.error}
        return {"url": self.url, "title": self.title, "previewImage": self.preview_image}
