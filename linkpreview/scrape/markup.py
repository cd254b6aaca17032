"""Static-markup extractor: title and preview image from unrendered HTML."""

from __future__ import annotations

import logging
import re
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from .models import ExtractionResult

logger = logging.getLogger(__name__)

_ABSOLUTE_RE = re.compile(r"^https?://", re.IGNORECASE)

# (css selector, attribute) in priority order; first non-empty value wins.
IMAGE_SELECTORS: tuple[tuple[str, str], ...] = (
    ('meta[property="og:image"]', "content"),
    ('meta[name="og:image"]', "content"),
    ('meta[name="twitter:image"]', "content"),
    ('meta[itemprop="image"]', "content"),
    ('link[rel~="image_src"]', "href"),
)


def normalize_title(raw: str | None) -> str | None:
    """Trim a document title and drop everything from the first ``|`` on.

    ``"News | My Site"`` becomes ``"News"``. Blank titles become ``None``.
    """
    if raw is None:
        return None
    title = raw.strip()
    if "|" in title:
        title = title.split("|", 1)[0].strip()
    return title or None


def resolve_url(value: str, base_url: str) -> str:
    """Resolve *value* against *base_url*; on failure return *value* unchanged."""
    if _ABSOLUTE_RE.match(value):
        return value
    try:
        return urljoin(base_url, value)
    except ValueError:
        logger.debug("could not resolve image url", extra={"value": value, "base_url": base_url})
        return value


def _select_image(soup: BeautifulSoup) -> str | None:
    for selector, attr in IMAGE_SELECTORS:
        tag = soup.select_one(selector)
        value = (tag.get(attr) or "").strip() if tag else ""
        if value:
            return value

    # Last resort: first <img>. May well be a logo or spacer, but without
    # rendering there is no size information to do better.
    img = soup.select_one("img[src]")
    src = (img.get("src") or "").strip() if img else ""
    return src or None


def extract_from_markup(html: str, page_url: str) -> ExtractionResult:
    """Parse *html* and pick a title and preview image for *page_url*."""
    soup = BeautifulSoup(html, "html.parser")

    title_tag = soup.find("title")
    title = normalize_title(title_tag.get_text()) if title_tag else None

    image = _select_image(soup)
    if image:
        image = resolve_url(image, page_url)

    logger.debug(
        "markup extracted",
        extra={"url": page_url, "has_title": title is not None, "has_image": image is not None},
    )
    return ExtractionResult(title=title, preview_image=image)
