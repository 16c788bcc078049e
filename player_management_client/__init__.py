"""Player Management client for Python.

A thin client for the Brightcove Player Management REST API.

Public API:
    PlayerManagementClient - Blocking client
    AsyncPlayerManagementClient - asyncio client
    ClientConfig - Account, credentials and transport settings
    raise_for_status - Opt-in conversion of non-2xx responses to errors
"""

from player_management_client._version import __version__
from player_management_client.client import (
    AsyncPlayerManagementClient,
    PlayerManagementClient,
    get_client,
)
from player_management_client.config import ClientConfig
from player_management_client.exceptions import (
    PlayerManagementAPIError,
    PlayerManagementConfigError,
    PlayerManagementError,
    raise_for_status,
)

__all__ = [
    "__version__",
    "PlayerManagementClient",
    "AsyncPlayerManagementClient",
    "get_client",
    "ClientConfig",
    "PlayerManagementError",
    "PlayerManagementAPIError",
    "PlayerManagementConfigError",
    "raise_for_status",
]
