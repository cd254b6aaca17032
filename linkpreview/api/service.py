"""Service layer: runs preview batches for the API routes."""

from __future__ import annotations

import logging

from linkpreview.api.schemas import PreviewError, PreviewRecord, PreviewRequest, PreviewResponse
from linkpreview.config import Settings
from linkpreview.scrape import InputError, ScrapeOrchestrator, ScrapeRecord

logger = logging.getLogger(__name__)


def _to_schema(record: ScrapeRecord) -> PreviewRecord | PreviewError:
    if record.error is not None:
        return PreviewError(url=record.url, error=record.error)
    return PreviewRecord(url=record.url, title=record.title, preview_image=record.preview_image)


async def create_previews(settings: Settings, body: PreviewRequest) -> PreviewResponse:
    """Scrape every URL in *body* with a fresh orchestrator and browser session.

    Raises :class:`InputError` for an empty, blank or oversized batch.
    """
    if len(body.urls) > settings.max_batch_size:
        raise InputError(f"At most {settings.max_batch_size} URLs per request")

    logger.info("preview request received", extra={"url_count": len(body.urls)})
    orchestrator = ScrapeOrchestrator(settings)
    records = await orchestrator.run(body.urls)
    return PreviewResponse(results=[_to_schema(record) for record in records])
