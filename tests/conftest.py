"""Fixtures: settings, fake Playwright, fake browser pages."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from linkpreview.config import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="test-secret-key", _env_file=None)


@pytest.fixture
def fake_browser() -> MagicMock:
    """A Playwright ``Browser`` stand-in whose pages need a state to evaluate."""
    browser = MagicMock()
    browser.close = AsyncMock()
    browser.is_connected = MagicMock(return_value=True)
    browser.new_page = AsyncMock()
    return browser


@pytest.fixture
def fake_playwright(fake_browser: MagicMock):
    """Patch ``async_playwright`` in the session module; yields the launcher mock."""
    pw = MagicMock()
    pw.chromium.launch = AsyncMock(return_value=fake_browser)
    pw.stop = AsyncMock()

    with patch("linkpreview.scrape.session.async_playwright") as mock_ap:
        mock_ap.return_value.start = AsyncMock(return_value=pw)
        yield pw


@pytest.fixture
def make_page():
    """Factory for Playwright ``Page`` stand-ins that evaluate to *state*."""

    def _make(state: dict | None = None) -> MagicMock:
        page = MagicMock()
        page.goto = AsyncMock()
        page.evaluate = AsyncMock(return_value=state or {})
        page.close = AsyncMock()
        return page

    return _make
