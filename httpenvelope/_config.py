from __future__ import annotations

from dataclasses import dataclass

import httpx

DEFAULT_TIMEOUT = 10.0
DEFAULT_MAX_REDIRECTS = 10


@dataclass(frozen=True)
class ClientSettings:
    """Client configuration for a single invocation.

    ``timeout`` bounds connect, write, read and pool acquisition alike.
    """

    timeout: float = DEFAULT_TIMEOUT
    follow_redirects: bool = True
    max_redirects: int = DEFAULT_MAX_REDIRECTS


def build_client(settings: ClientSettings | None = None) -> httpx.Client:
    if settings is None:
        settings = ClientSettings()
    return httpx.Client(
        timeout=httpx.Timeout(settings.timeout),
        follow_redirects=settings.follow_redirects,
        max_redirects=settings.max_redirects,
    )
