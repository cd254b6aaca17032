"""Rendered extractor: loads a page in the shared browser and ranks its images."""

from __future__ import annotations

import logging
from typing import Any

from playwright.async_api import Browser
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from .errors import NavigationError
from .markup import normalize_title, resolve_url
from .models import ExtractionResult
from .ranking import ImageCandidate, choose_preview_image

logger = logging.getLogger(__name__)

# Runs inside the rendered document. Collects post-script DOM state only
# (currentSrc of responsive images, laid-out dimensions); ranking happens
# in Python.
COLLECT_PAGE_STATE_JS = """
() => {
  const attr = (selector, name) => {
    const el = document.querySelector(selector);
    return el ? el.getAttribute(name) : null;
  };
  return {
    title: document.title || null,
    location: window.location.href,
    meta: [
      attr('meta[property="og:image:secure_url"]', 'content'),
      attr('meta[property="og:image"]', 'content'),
      attr('meta[name="og:image"]', 'content'),
      attr('meta[name="twitter:image"]', 'content'),
      attr('meta[itemprop="image"]', 'content'),
      attr('link[rel~="image_src"]', 'href'),
    ],
    images: Array.from(document.images).map((img) => ({
      src: img.currentSrc || img.src || '',
      width: img.width || img.naturalWidth || 0,
      height: img.height || img.naturalHeight || 0,
    })),
  };
}
"""


def extract_from_page_state(state: dict[str, Any], url: str, min_image_size: int = 200) -> ExtractionResult:
    """Turn the in-page collection result into an :class:`ExtractionResult`."""
    images = [ImageCandidate.from_dom(item) for item in state.get("images") or []]
    winner = choose_preview_image(state.get("meta") or [], images, min_size=min_image_size)
    if winner:
        winner = resolve_url(winner, state.get("location") or url)
    return ExtractionResult(title=normalize_title(state.get("title")), preview_image=winner)


async def extract_rendered(
    browser: Browser,
    url: str,
    *,
    user_agent: str,
    timeout_ms: int = 30000,
    min_image_size: int = 200,
) -> ExtractionResult:
    """Render *url* on a fresh page of *browser* and extract title and hero image.

    The page is always closed before returning. Navigation timeouts and
    browser failures are raised as :class:`NavigationError`.
    """
    page = None
    try:
        try:
            page = await browser.new_page(user_agent=user_agent)
        except PlaywrightError as exc:
            raise NavigationError(f"Could not open browser page: {exc.message}") from exc

        logger.debug("navigating", extra={"url": url, "timeout_ms": timeout_ms})
        try:
            await page.goto(url, wait_until="networkidle", timeout=timeout_ms)
        except PlaywrightTimeoutError as exc:
            raise NavigationError(f"Navigation timed out after {timeout_ms} ms: {url}") from exc
        except PlaywrightError as exc:
            raise NavigationError(exc.message) from exc

        try:
            state = await page.evaluate(COLLECT_PAGE_STATE_JS)
        except PlaywrightError as exc:
            raise NavigationError(f"In-page extraction failed: {exc.message}") from exc
    finally:
        if page is not None:
            try:
                await page.close()
            except PlaywrightError:
                logger.warning("page close failed", extra={"url": url}, exc_info=True)

    result = extract_from_page_state(state or {}, url, min_image_size=min_image_size)
    logger.debug(
        "rendered extraction complete",
        extra={
            "url": url,
            "image_count": len((state or {}).get("images") or []),
            "has_title": result.title is not None,
            "has_image": result.preview_image is not None,
        },
    )
    return result
