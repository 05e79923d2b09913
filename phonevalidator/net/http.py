"""
Sync HTTP utilities (httpx).

The validation client opens one `httpx.Client` per request and closes it when
the request completes. Timeouts and the User-Agent live here, at the transport
layer. Redirects are followed; there is no retry or rate limiting.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Mapping

import httpx

DEFAULT_USER_AGENT = "phonevalidator/0.1"


@dataclass(frozen=True, slots=True)
class HttpClientConfig:
    timeout_seconds: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT


@contextmanager
def build_client(
    config: HttpClientConfig,
    *,
    base_url: str,
    headers: Mapping[str, str],
    transport: httpx.BaseTransport | None = None,
) -> Iterator[httpx.Client]:
    timeout = httpx.Timeout(config.timeout_seconds)
    merged = {"User-Agent": config.user_agent, **headers}
    with httpx.Client(
        base_url=base_url,
        timeout=timeout,
        headers=merged,
        transport=transport,
        follow_redirects=True,
    ) as client:
        yield client
