"""Per-URL pipeline: static pass, optional rendered escalation, record building."""

from __future__ import annotations

import logging
from typing import Iterable

import httpx
from playwright.async_api import Error as PlaywrightError

from linkpreview.config import Settings

from .errors import FetchError, InputError, NavigationError
from .fetcher import build_client, fetch_html
from .markup import extract_from_markup
from .models import ExtractionResult, ScrapeRecord
from .rendered import extract_rendered
from .session import BrowserSession

logger = logging.getLogger(__name__)


def validate_targets(urls: Iterable[str]) -> list[str]:
    """Strip each URL and reject an empty batch or blank entries."""
    targets = [(url or "").strip() for url in urls]
    if not targets:
        raise InputError("No URLs given")
    for index, url in enumerate(targets):
        if not url:
            raise InputError(f"URL at position {index} is empty")
    return targets


class ScrapeOrchestrator:
    """Runs a batch of URLs through the two-tier pipeline, strictly in order.

    The orchestrator owns *session* for the length of :meth:`run` and
    releases it exactly once when the batch ends, whichever way it ends.
    """

    def __init__(self, settings: Settings, session: BrowserSession | None = None) -> None:
        self._settings = settings
        self._session = session or BrowserSession(headless=settings.headless)

    async def run(self, urls: Iterable[str]) -> list[ScrapeRecord]:
        """Scrape every URL and return one record per URL, in input order."""
        targets = validate_targets(urls)
        logger.info("scrape batch started", extra={"url_count": len(targets)})

        records: list[ScrapeRecord] = []
        try:
            async with build_client(
                self._settings.user_agent,
                self._settings.accept_language,
                timeout=self._settings.fetch_timeout_seconds,
            ) as client:
                for url in targets:
                    records.append(await self.scrape_one(client, url))
        finally:
            await self._session.release()

        logger.info(
            "scrape batch complete",
            extra={
                "url_count": len(targets),
                "errors": sum(1 for r in records if not r.ok),
                "browser_launches": self._session.launch_count,
            },
        )
        return records

    async def scrape_one(self, client: httpx.AsyncClient, url: str) -> ScrapeRecord:
        """Static pass, escalating to the browser only if it found nothing."""
        try:
            html = await fetch_html(client, url)
        except FetchError as exc:
            return ScrapeRecord.failure(url, str(exc))

        result = extract_from_markup(html, url)
        if not result.is_empty:
            return ScrapeRecord.success(url, result)

        logger.info("static pass empty, escalating to browser", extra={"url": url})
        try:
            result = await self._render(url)
        except NavigationError as exc:
            logger.warning("rendered pass failed", extra={"url": url, "error": str(exc)})
            return ScrapeRecord.failure(url, str(exc))
        return ScrapeRecord.success(url, result)

    async def _render(self, url: str) -> ExtractionResult:
        try:
            browser = await self._session.acquire()
        except PlaywrightError as exc:
            raise NavigationError(f"Browser launch failed: {exc.message}") from exc

        return await extract_rendered(
            browser,
            url,
            user_agent=self._settings.user_agent,
            timeout_ms=self._settings.navigation_timeout_ms,
            min_image_size=self._settings.min_image_size,
        )
