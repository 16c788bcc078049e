"""Client configuration for the Player Management API."""

import os
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from player_management_client.exceptions import PlayerManagementConfigError

DEFAULT_BASE_URL = "https://players.api.brightcove.com"
DEFAULT_API_VERSION = "v1"
DEFAULT_TIMEOUT = 30.0


class ClientConfig(BaseModel):
    """Immutable settings shared by every request a client issues.

    Either ``access_token`` or ``email`` must be set. When a token is present
    requests use bearer auth; otherwise they use basic auth with
    ``email``/``password``.
    """

    model_config = ConfigDict(frozen=True)

    account_id: str
    access_token: str | None = None
    email: str | None = None
    password: str | None = None
    base_url: str = DEFAULT_BASE_URL
    version: str = DEFAULT_API_VERSION
    headers: dict[str, str] = Field(default_factory=dict)
    timeout: float | None = DEFAULT_TIMEOUT
    verify_ssl: bool = True
    debug: bool = False

    @field_validator("account_id", mode="before")
    @classmethod
    def account_id_as_string(cls, v: Any) -> Any:
        # Account ids are accepted as either 1234 or "1234"
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @model_validator(mode="after")
    def check_account_and_credentials(self) -> "ClientConfig":
        if not self.account_id.strip():
            raise PlayerManagementConfigError("account_id must not be empty")
        if not self.access_token and not self.email:
            raise PlayerManagementConfigError(
                "either access_token or email/password must be configured"
            )
        return self

    @property
    def uses_token(self) -> bool:
        """True when requests authenticate with a bearer token."""
        return bool(self.access_token)

    @property
    def account_url(self) -> str:
        """Absolute URL of the account, e.g. ``{base}/v1/accounts/123``."""
        return f"{self.base_url.rstrip('/')}/{self.version.strip('/')}/accounts/{self.account_id}"

    @classmethod
    def from_env(cls, **overrides: Any) -> "ClientConfig":
        """Create a configuration from environment variables.

        Required environment variables:
            PLAYER_MANAGEMENT_ACCOUNT_ID: The account id.
            PLAYER_MANAGEMENT_ACCESS_TOKEN: OAuth access token (preferred).
            PLAYER_MANAGEMENT_EMAIL: Basic auth user, used when no token is set.

        Optional environment variables:
            PLAYER_MANAGEMENT_PASSWORD: Basic auth password.
            PLAYER_MANAGEMENT_BASE_URL: API base URL.
            PLAYER_MANAGEMENT_API_VERSION: API version segment (default "v1").
            PLAYER_MANAGEMENT_TIMEOUT: Request timeout in seconds.
            PLAYER_MANAGEMENT_VERIFY_SSL: Set to "0" to skip TLS verification.
            PLAYER_MANAGEMENT_DEBUG: Set to "1" to print curl commands and timings.

        Args:
            **overrides: Values that take precedence over the environment.
                ``None`` values are ignored.

        Returns:
            A validated ClientConfig.

        Raises:
            PlayerManagementConfigError: If required values are missing or
                numeric values are malformed.
        """
        values: dict[str, Any] = {
            "account_id": os.environ.get("PLAYER_MANAGEMENT_ACCOUNT_ID"),
            "access_token": os.environ.get("PLAYER_MANAGEMENT_ACCESS_TOKEN"),
            "email": os.environ.get("PLAYER_MANAGEMENT_EMAIL"),
            "password": os.environ.get("PLAYER_MANAGEMENT_PASSWORD"),
            "base_url": os.environ.get("PLAYER_MANAGEMENT_BASE_URL", DEFAULT_BASE_URL),
            "version": os.environ.get("PLAYER_MANAGEMENT_API_VERSION", DEFAULT_API_VERSION),
            "verify_ssl": os.environ.get("PLAYER_MANAGEMENT_VERIFY_SSL", "1") != "0",
            "debug": os.environ.get("PLAYER_MANAGEMENT_DEBUG", "") == "1",
        }

        timeout = os.environ.get("PLAYER_MANAGEMENT_TIMEOUT")
        if timeout:
            try:
                values["timeout"] = float(timeout)
            except ValueError as e:
                raise PlayerManagementConfigError(
                    f"PLAYER_MANAGEMENT_TIMEOUT must be a number, got {timeout!r}"
                ) from e

        values.update({k: v for k, v in overrides.items() if v is not None})
        if not values.get("account_id"):
            raise PlayerManagementConfigError("PLAYER_MANAGEMENT_ACCOUNT_ID is not set")
        return build_config(**values)


def build_config(**values: Any) -> ClientConfig:
    """Validate keyword values into a ClientConfig.

    Raises:
        PlayerManagementConfigError: On any invalid or missing value.
    """
    try:
        return ClientConfig(**values)
    except ValueError as e:
        # pydantic.ValidationError is a ValueError subclass
        raise PlayerManagementConfigError(str(e)) from e
