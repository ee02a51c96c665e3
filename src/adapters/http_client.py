"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts and headers for every URL load.
- Makes testing easy: a `transport` (e.g. `httpx.MockTransport`) can be injected.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Build an `httpx.Client` with safe defaults."""

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "text/plain, */*;q=0.8",
    }
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
