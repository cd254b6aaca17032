"""Two-tier link preview extraction: static markup first, headless browser on escalation."""

from __future__ import annotations

from .errors import FetchError, InputError, NavigationError, ScrapeError
from .markup import extract_from_markup, normalize_title, resolve_url
from .models import ExtractionResult, ScrapeRecord
from .orchestrator import ScrapeOrchestrator, validate_targets
from .ranking import ImageCandidate, choose_preview_image
from .rendered import extract_rendered
from .session import BrowserSession

__all__ = [
    "BrowserSession",
    "ExtractionResult",
    "FetchError",
    "ImageCandidate",
    "InputError",
    "NavigationError",
    "ScrapeError",
    "ScrapeOrchestrator",
    "ScrapeRecord",
    "choose_preview_image",
    "extract_from_markup",
    "extract_rendered",
    "normalize_title",
    "resolve_url",
    "validate_targets",
]
