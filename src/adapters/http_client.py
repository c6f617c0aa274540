"""httpx wrapper.

Why a wrapper:
- Standardizes timeout, headers and Basic auth for every request.
- Eases testing: a `transport` can be injected (e.g. `httpx.MockTransport`).
"""

from __future__ import annotations

import httpx

from core.config import AppSettings
from core.domain.models import Credentials
from core.errors import HttpClientError


def build_http_client(
    credentials: Credentials,
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Creates one `httpx.Client` carrying the Basic-auth credentials.

    The client is built once per run and reused for every project.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "*/*",
    }
    try:
        return httpx.Client(
            auth=httpx.BasicAuth(*credentials.as_auth()),
            timeout=httpx.Timeout(settings.http_timeout_seconds),
            headers=headers,
            transport=transport,
        )
    except (OSError, ValueError) as exc:
        raise HttpClientError(f"Couldn't create HTTP client: {exc}") from exc
