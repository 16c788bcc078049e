"""Shared HTTP client configuration."""

import httpx

from player_management_client._version import __version__
from player_management_client.config import ClientConfig

USER_AGENT = f"player-management-client/{__version__}"


def create_http_client(config: ClientConfig) -> httpx.Client:
    """Create a configured HTTP client.

    Args:
        config: Client configuration supplying timeout and TLS settings.

    Returns:
        Configured httpx.Client instance.
    """
    return httpx.Client(
        timeout=config.timeout,
        verify=config.verify_ssl,
        headers={"User-Agent": USER_AGENT},
    )


def create_async_http_client(config: ClientConfig) -> httpx.AsyncClient:
    """Create a configured async HTTP client.

    Args:
        config: Client configuration supplying timeout and TLS settings.

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(
        timeout=config.timeout,
        verify=config.verify_ssl,
        headers={"User-Agent": USER_AGENT},
    )
