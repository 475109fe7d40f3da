"""Shared HTTP client configuration."""

import httpx

from tgbot_sdk._version import __version__

DEFAULT_API_URL = "https://api.telegram.org"
DEFAULT_TIMEOUT = 60.0
DEFAULT_MAX_CONCURRENCY = 10


def create_http_client(
    *,
    timeout: float = DEFAULT_TIMEOUT,
    base_url: str | None = None,
    max_connections: int = DEFAULT_MAX_CONCURRENCY,
) -> httpx.Client:
    """Create configured HTTP client.

    Args:
        timeout: Request timeout in seconds.
        base_url: Optional base URL for all requests.
        max_connections: Upper bound on simultaneously open connections.

    Returns:
        Configured httpx.Client instance.
    """
    return httpx.Client(
        timeout=timeout,
        base_url=base_url or "",
        limits=httpx.Limits(
            max_connections=max_connections,
            max_keepalive_connections=max_connections,
        ),
        headers={"User-Agent": f"tgbot-sdk/{__version__}"},
    )
