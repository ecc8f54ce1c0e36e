"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts and the identifying User-Agent header.
- Eases testing: a mock transport can be swapped in without touching callers.
"""

from __future__ import annotations

import httpx

from core.config import USER_AGENT


def build_async_client(
    *,
    timeout_seconds: float | None = None,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with installer defaults.

    Why a builder:
    - Every request identifies itself the same way to the setup endpoint.
    - Tests pass `httpx.MockTransport` through `transport`.
    """

    headers: dict[str, str] = {
        "User-Agent": USER_AGENT,
        "Accept": "text/plain, text/x-python, */*;q=0.8",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
