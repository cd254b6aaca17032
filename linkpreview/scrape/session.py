"""Shared headless-browser session, launched lazily and released once."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from playwright.async_api import Browser, Playwright, async_playwright
from playwright.async_api import Error as PlaywrightError

logger = logging.getLogger(__name__)


class BrowserSession:
    """Owns a single Chromium instance for the duration of a batch.

    Launching a browser costs seconds, so the first escalation starts it and
    every later escalation reuses it. ``release()`` is safe to call when
    nothing was launched and safe to call more than once.
    """

    def __init__(self, *, headless: bool = True) -> None:
        self._headless = headless
        self._playwright: Playwright | None = None
        self._browser: Browser | None = None
        self._lock = asyncio.Lock()
        self.launch_count = 0

    @property
    def launched(self) -> bool:
        return self._browser is not None

    async def acquire(self) -> Browser:
        """Return the running browser, launching it on first use.

        A browser that has crashed or disconnected is torn down and replaced.
        """
        async with self._lock:
            if self._browser is not None:
                if self._browser.is_connected():
                    return self._browser
                logger.warning("browser disconnected, relaunching")
                await self._shutdown()

            logger.info("launching browser", extra={"headless": self._headless})
            self._playwright = await async_playwright().start()
            try:
                self._browser = await self._playwright.chromium.launch(headless=self._headless)
            except Exception:
                await self._playwright.stop()
                self._playwright = None
                raise
            self.launch_count += 1
            return self._browser

    async def release(self) -> None:
        """Close the browser and stop Playwright if they were started."""
        async with self._lock:
            await self._shutdown()

    async def _shutdown(self) -> None:
        # Close failures are logged, never raised: Playwright must still stop.
        try:
            if self._browser is not None:
                try:
                    await self._browser.close()
                    logger.info("browser closed")
                except PlaywrightError:
                    logger.warning("browser close failed", exc_info=True)
                finally:
                    self._browser = None
        finally:
            if self._playwright is not None:
                try:
                    await self._playwright.stop()
                except PlaywrightError:
                    logger.warning("playwright stop failed", exc_info=True)
                finally:
                    self._playwright = None

    async def __aenter__(self) -> BrowserSession:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.release()
