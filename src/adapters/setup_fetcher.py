"""Setup wizard download.

Implementation:
- One GET against the official endpoint, no retries.
- The deadline covers the whole exchange (connect, headers, body); when it
  elapses `asyncio.wait_for` cancels the in-flight request.

Notes:
- 2xx with a non-blank body => script source, returned untouched
- non-2xx => status plus the first 200 characters of the body
"""

from __future__ import annotations

import asyncio

import httpx

from adapters.http_client import build_async_client
from core.config import BODY_EXCERPT_LIMIT
from core.domain.errors import FetchError, FetchErrorKind
from core.logging import get_logger

logger = get_logger(__name__)


async def _download(
    url: str,
    *,
    timeout_seconds: float,
    transport: httpx.AsyncBaseTransport | None,
) -> str:
    async with build_async_client(timeout_seconds=timeout_seconds, transport=transport) as client:
        response = await client.get(url)

    logger.debug("GET %s -> HTTP %s (%d bytes)", url, response.status_code, len(response.content))

    if not response.is_success:
        excerpt = response.text[:BODY_EXCERPT_LIMIT]
        message = f"Setup endpoint returned {response.status_code}"
        if excerpt:
            message = f"{message}: {excerpt}"
        raise FetchError(
            FetchErrorKind.HTTP_STATUS,
            message,
            status=response.status_code,
            body_excerpt=excerpt,
        )

    source = response.text
    if not source.strip():
        raise FetchError(FetchErrorKind.EMPTY_RESPONSE, "Received empty setup script")
    return source


async def fetch_setup_script_async(
    url: str,
    timeout_ms: int,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    timeout_seconds = timeout_ms / 1000
    logger.debug("Fetching %s (timeout=%dms)", url, timeout_ms)
    try:
        return await asyncio.wait_for(
            _download(url, timeout_seconds=timeout_seconds, transport=transport),
            timeout=timeout_seconds,
        )
    except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
        raise FetchError(
            FetchErrorKind.TIMEOUT,
            f"Setup endpoint timed out after {timeout_ms}ms",
        ) from exc
    except httpx.RequestError as exc:
        raise FetchError(
            FetchErrorKind.NETWORK,
            f"Could not reach setup endpoint: {exc}",
        ) from exc


def fetch_setup_script(
    url: str,
    timeout_ms: int,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """Download the setup wizard source or raise `FetchError`."""

    return asyncio.run(fetch_setup_script_async(url, timeout_ms, transport=transport))
