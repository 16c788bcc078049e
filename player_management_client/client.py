"""Clients for the Player Management API.

Example usage:
    from player_management_client import PlayerManagementClient

    with PlayerManagementClient(account_id=1234, access_token="...") as client:
        response = client.player.config.get(player_id, "preview")
        if response.status_code == 200:
            config = response.json()

    # Callback style: invoked once with (error, response), never both.
    def done(error, response):
        if error:
            ...  # the request never reached the server
        elif response.status_code != 200:
            ...  # a response was returned but it was not successful

    client.players.list(callback=done)

Non-2xx responses are returned like any other response. Use
``raise_for_status`` from ``player_management_client.exceptions`` to turn
them into PlayerManagementAPIError.
"""

import sys
import time
from typing import Any

import httpx

from player_management_client._internal.builder import RequestBuilder, RequestSpec
from player_management_client._internal.curl import format_curl_command
from player_management_client._internal.http import (
    create_async_http_client,
    create_http_client,
)
from player_management_client.config import ClientConfig, build_config
from player_management_client.exceptions import PlayerManagementConfigError
from player_management_client.resources import (
    Callback,
    Embed,
    Embeds,
    Player,
    Players,
)

# Failures that happen before a response exists; delivered as the callback error.
REQUEST_ERRORS = (httpx.RequestError, httpx.InvalidURL)


class BaseClient:
    """Request construction and debug output shared by both clients.

    Subclasses provide ``_dispatch(operation, spec, callback)``, which sends
    the request and delivers the result.
    """

    def __init__(self, config: ClientConfig | None = None, **config_kwargs: Any) -> None:
        """Initialize the client.

        Args:
            config: A ready ClientConfig. Mutually exclusive with keyword settings.
            **config_kwargs: ClientConfig fields (account_id, access_token,
                email, password, base_url, version, headers, timeout,
                verify_ssl, debug).

        Raises:
            PlayerManagementConfigError: If the configuration is invalid.
        """
        if config is None:
            config = build_config(**config_kwargs)
        elif config_kwargs:
            raise PlayerManagementConfigError(
                "pass either a ClientConfig or keyword settings, not both"
            )
        self._config = config
        self._builder = RequestBuilder(config)

        self.players = Players(self)
        self.player = Player(self)
        self.embeds = Embeds(self)
        self.embed = Embed(self)

    @property
    def config(self) -> ClientConfig:
        return self._config

    def add_custom_header(self, key: str, value: str) -> None:
        """Send an additional header on every subsequent request.

        Requests already in flight are not affected.
        """
        self._builder.add_header(key, value)

    def _read(self, operation: str, method: str, path: str, callback: Callback | None) -> Any:
        return self._dispatch(operation, self._builder.read(method, path), callback)

    def _write(
        self,
        operation: str,
        method: str,
        path: str,
        body: Any,
        callback: Callback | None,
    ) -> Any:
        return self._dispatch(operation, self._builder.write(method, path, body), callback)

    def _build_request(self, http: httpx.Client | httpx.AsyncClient, spec: RequestSpec) -> httpx.Request:
        return http.build_request(spec.method, spec.url, headers=spec.headers, json=spec.body)

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._config.debug:
            print(f"[player-management-client] {message}", file=sys.stderr)

    def _log_request(self, operation: str, spec: RequestSpec) -> None:
        if not self._config.debug:
            return
        basic_user = None if self._config.uses_token else self._config.email
        self._log_debug(f"{operation} curl command:")
        self._log_debug(f"> {format_curl_command(spec, basic_user=basic_user)}")

    def _log_result(
        self,
        operation: str,
        started: float,
        response: httpx.Response | None = None,
        error: Exception | None = None,
    ) -> None:
        elapsed_ms = (time.perf_counter() - started) * 1000
        if error is not None:
            self._log_debug(f"{operation} failed after {elapsed_ms:.1f}ms: {error!r}")
        elif response is not None:
            self._log_debug(
                f"{operation} response time: {elapsed_ms:.1f}ms (status {response.status_code})"
            )


class PlayerManagementClient(BaseClient):
    """Blocking client for the Player Management API.

    Each operation issues exactly one HTTP request. Without a callback it
    returns the httpx.Response and lets request errors (connection, DNS,
    TLS, timeout, invalid URL, undecodable body) propagate. With a callback
    it calls ``callback(None, response)`` or ``callback(error, None)`` once
    and returns the callback's result.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        http_client: httpx.Client | None = None,
        **config_kwargs: Any,
    ) -> None:
        """Initialize the client.

        Args:
            config: A ready ClientConfig. Mutually exclusive with keyword settings.
            http_client: Optional httpx.Client to send requests with. Its own
                timeout and TLS settings apply; the config's ``timeout`` and
                ``verify_ssl`` are only used when the client creates one.
                A supplied client is never closed by this client.
            **config_kwargs: ClientConfig fields.
        """
        super().__init__(config, **config_kwargs)
        self._owns_http = http_client is None
        self._http = http_client or create_http_client(self._config)

    @classmethod
    def from_env(cls, **overrides: Any) -> "PlayerManagementClient":
        """Create a client configured from PLAYER_MANAGEMENT_* environment variables."""
        return cls(ClientConfig.from_env(**overrides))

    def close(self) -> None:
        """Close the underlying HTTP client if this client created it."""
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "PlayerManagementClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _dispatch(self, operation: str, spec: RequestSpec, callback: Callback | None) -> Any:
        self._log_request(operation, spec)
        started = time.perf_counter()
        try:
            response = self._http.send(
                self._build_request(self._http, spec), auth=self._builder.auth
            )
        except REQUEST_ERRORS as e:
            self._log_result(operation, started, error=e)
            if callback is None:
                raise
            return callback(e, None)

        self._log_result(operation, started, response=response)
        if callback is None:
            return response
        return callback(None, response)


class AsyncPlayerManagementClient(BaseClient):
    """Asyncio client for the Player Management API.

    Operations are coroutines with the same result and callback semantics
    as PlayerManagementClient. Any number of them may run concurrently; the
    httpx connection pool is the only limit.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        **config_kwargs: Any,
    ) -> None:
        """Initialize the client.

        Args:
            config: A ready ClientConfig. Mutually exclusive with keyword settings.
            http_client: Optional httpx.AsyncClient; as for
                PlayerManagementClient, its own timeout and TLS settings apply
                and it is never closed by this client.
            **config_kwargs: ClientConfig fields.
        """
        super().__init__(config, **config_kwargs)
        self._owns_http = http_client is None
        self._http = http_client or create_async_http_client(self._config)

    @classmethod
    def from_env(cls, **overrides: Any) -> "AsyncPlayerManagementClient":
        """Create a client configured from PLAYER_MANAGEMENT_* environment variables."""
        return cls(ClientConfig.from_env(**overrides))

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this client created it."""
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "AsyncPlayerManagementClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def _dispatch(
        self, operation: str, spec: RequestSpec, callback: Callback | None
    ) -> Any:
        self._log_request(operation, spec)
        started = time.perf_counter()
        try:
            response = await self._http.send(
                self._build_request(self._http, spec), auth=self._builder.auth
            )
        except REQUEST_ERRORS as e:
            self._log_result(operation, started, error=e)
            if callback is None:
                raise
            return callback(e, None)

        self._log_result(operation, started, response=response)
        if callback is None:
            return response
        return callback(None, response)


def get_client() -> PlayerManagementClient:
    """Get a client configured from environment variables.

    Returns:
        A configured PlayerManagementClient instance.

    Raises:
        PlayerManagementConfigError: If required variables are not set.
    """
    return PlayerManagementClient.from_env()
