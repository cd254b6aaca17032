"""Exception hierarchy for the extraction pipeline."""

from __future__ import annotations


class ScrapeError(Exception):
    """Base class for all pipeline errors."""


class FetchError(ScrapeError):
    """Static fetch failed: non-2xx status or a transport-level error."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        reason: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason

    @classmethod
    def from_status(cls, status_code: int, reason: str) -> FetchError:
        return cls(f"{status_code} {reason}".strip(), status_code=status_code, reason=reason)


class NavigationError(ScrapeError):
    """Rendered pass failed: navigation timeout or a browser-level failure."""


class InputError(ScrapeError):
    """The URL batch itself is malformed (e.g. empty)."""
