"""Public exceptions for the Player Management client."""

import httpx


class PlayerManagementError(Exception):
    """Base exception for all Player Management client errors."""


class PlayerManagementAPIError(PlayerManagementError):
    """Non-2xx response from the Player Management API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class PlayerManagementConfigError(PlayerManagementError):
    """Configuration error (missing account, credentials, invalid env vars)."""


def raise_for_status(response: httpx.Response) -> httpx.Response:
    """Raise PlayerManagementAPIError if the response is not a 2xx.

    Operations never classify status codes themselves; call this on the
    returned response when a failed status should become an exception.

    Args:
        response: Response returned by any client operation.

    Returns:
        The same response, when its status is 2xx.
    """
    if 200 <= response.status_code < 300:
        return response
    raise PlayerManagementAPIError(
        f"Player Management API returned status {response.status_code}",
        status_code=response.status_code,
        response=response,
    )
