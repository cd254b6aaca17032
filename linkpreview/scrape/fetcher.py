"""Static HTML fetcher: a plain HTTP GET that looks like a desktop browser."""

from __future__ import annotations

import logging

import httpx

from .errors import FetchError

logger = logging.getLogger(__name__)


def build_client(
    user_agent: str,
    accept_language: str,
    timeout: float = 5.0,
) -> httpx.AsyncClient:
    """Create the shared client used for every static fetch in a batch.

    Some origins strip meta tags or serve an empty shell to generic
    clients, so both headers are always sent.
    """
    return httpx.AsyncClient(
        follow_redirects=True,
        timeout=timeout,
        headers={
            "user-agent": user_agent,
            "accept-language": accept_language,
        },
    )


async def fetch_html(client: httpx.AsyncClient, url: str) -> str:
    """GET *url* and return the body text, or raise :class:`FetchError`."""
    try:
        resp = await client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.warning("static fetch failed", extra={"url": url, "error": str(exc)})
        raise FetchError(str(exc) or type(exc).__name__) from exc

    if not resp.is_success:
        logger.info(
            "static fetch returned error status",
            extra={"url": url, "status_code": resp.status_code},
        )
        raise FetchError.from_status(resp.status_code, resp.reason_phrase)

    logger.debug(
        "static fetch complete",
        extra={"url": url, "final_url": str(resp.url), "length": len(resp.text)},
    )
    return resp.text
