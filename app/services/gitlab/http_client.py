"""
Shared HTTP client for GitLab API operations.

One pooled AsyncClient serves the connect probe, tree listings and raw file
fetches. It carries no credentials: the active connection can change between
requests, so PRIVATE-TOKEN is sent per call.
"""

import logging

import httpx

from app.services.gitlab.constants import (
    CLIENT_TIMEOUT,
    CONNECT_TIMEOUT,
    MAX_CONNECTIONS,
    MAX_KEEPALIVE_CONNECTIONS,
    USER_AGENT,
)

logger = logging.getLogger(__name__)

_client: httpx.AsyncClient | None = None


def _build_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=httpx.Timeout(CLIENT_TIMEOUT, connect=CONNECT_TIMEOUT),
        limits=httpx.Limits(
            max_connections=MAX_CONNECTIONS,
            max_keepalive_connections=MAX_KEEPALIVE_CONNECTIONS,
        ),
        headers={"User-Agent": USER_AGENT},
        http2=True,
    )


def get_gitlab_client() -> httpx.AsyncClient:
    """Return the shared client, creating it on first use or after close."""
    global _client
    if _client is None or _client.is_closed:
        _client = _build_client()
        logger.debug("Created GitLab HTTP client")
    return _client


async def close_gitlab_client() -> None:
    """Close the shared client (app shutdown). Safe to call when none exists."""
    global _client
    if _client is None:
        return
    if not _client.is_closed:
        await _client.aclose()
        logger.debug("Closed GitLab HTTP client")
    _client = None
