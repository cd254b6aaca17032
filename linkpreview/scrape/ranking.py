"""Preview-image ranking for rendered pages.

The browser only collects raw DOM state (see ``rendered.py``); every
decision about which image wins is made here, so it can be tested
without a browser.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable

_SVG_RE = re.compile(r"\.svg(?:[?#].*)?$", re.IGNORECASE)
_DECORATIVE_RE = re.compile(r"sprite|icon", re.IGNORECASE)


@dataclass(frozen=True)
class ImageCandidate:
    """An ``<img>`` as laid out in the rendered document."""

    src: str
    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height

    @classmethod
    def from_dom(cls, data: dict[str, Any]) -> ImageCandidate:
        return cls(
            src=str(data.get("src") or ""),
            width=float(data.get("width") or 0),
            height=float(data.get("height") or 0),
        )


def is_svg(src: str) -> bool:
    return bool(_SVG_RE.search(src))


def looks_decorative(src: str) -> bool:
    return bool(_DECORATIVE_RE.search(src))


def pick_meta_candidate(values: Iterable[str | None]) -> str | None:
    """Return the first non-empty meta/link value unless it is an SVG or sprite/icon.

    Only the highest-priority value is considered; a rejected value is not
    replaced by a lower-priority one.
    """
    for value in values:
        value = (value or "").strip()
        if not value:
            continue
        if is_svg(value) or looks_decorative(value):
            return None
        return value
    return None


def pick_hero_image(images: Iterable[ImageCandidate], min_size: int = 200) -> str | None:
    """Return the source of the largest non-SVG image at least *min_size* px on both sides."""
    eligible = [
        img
        for img in images
        if img.src
        and img.width >= min_size
        and img.height >= min_size
        and not is_svg(img.src)
    ]
    if not eligible:
        return None
    eligible.sort(key=lambda img: img.area, reverse=True)
    return eligible[0].src


def choose_preview_image(
    meta_values: Iterable[str | None],
    images: Iterable[ImageCandidate],
    min_size: int = 200,
) -> str | None:
    """Meta/link candidate first, then the hero image."""
    return pick_meta_candidate(meta_values) or pick_hero_image(images, min_size=min_size)
