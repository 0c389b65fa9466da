"""Bounded-time HTML fetching for recipe pages."""

import asyncio
import logging
from typing import Dict, List

import httpx

from recipease.app.core.config import get_settings
from recipease.app.services.url_parsing.errors import FetchFailedError, FetchTimeoutError
from recipease.app.services.url_parsing.models import FetchedPage

logger = logging.getLogger(__name__)

ACCEPT_HEADER = "text/html,application/xhtml+xml"


def build_request_headers() -> Dict[str, str]:
    settings = get_settings()
    return {
        "User-Agent": settings.scraper_user_agent,
        "Accept": ACCEPT_HEADER,
    }


async def _download(url: str, timeout: httpx.Timeout, max_bytes: int) -> FetchedPage:
    async with httpx.AsyncClient(
        timeout=timeout, follow_redirects=True, headers=build_request_headers()
    ) as client:
        async with client.stream("GET", url) as response:
            if not response.is_success:
                logger.warning("Fetch of %s returned status %s", url, response.status_code)
                raise FetchFailedError(response.status_code)

            chunks: List[bytes] = []
            received = 0
            truncated = False
            async for chunk in response.aiter_bytes():
                remaining = max_bytes - received
                if len(chunk) > remaining:
                    chunks.append(chunk[:remaining])
                    received = max_bytes
                    truncated = True
                    break
                chunks.append(chunk)
                received += len(chunk)

            body = b"".join(chunks)
            encoding = response.encoding or "utf-8"
            try:
                text = body.decode(encoding, errors="replace")
            except LookupError:
                text = body.decode("utf-8", errors="replace")

            if truncated:
                logger.info("Fetch of %s truncated at %d bytes", url, max_bytes)
            return FetchedPage(
                final_url=str(response.url),
                html_body=text,
                http_status=response.status_code,
                truncated=truncated,
            )


async def fetch_page(url: str) -> FetchedPage:
    """GET ``url`` once; timeouts and network failures surface as typed errors."""
    settings = get_settings()
    limit = settings.fetch_timeout_seconds
    timeout = httpx.Timeout(limit)
    try:
        page = await asyncio.wait_for(
            _download(url, timeout, settings.fetch_max_bytes), timeout=limit
        )
    except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
        logger.warning("Fetch of %s timed out after %.1fs", url, limit)
        raise FetchTimeoutError() from exc
    except httpx.HTTPError as exc:
        logger.warning("Fetch of %s failed: %s", url, exc)
        raise FetchFailedError() from exc

    logger.info("Fetched %s (%d chars, status=%s)", page.final_url, len(page.html_body), page.http_status)
    return page
