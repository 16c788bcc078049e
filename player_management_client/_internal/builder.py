"""Request descriptors and the URL/header builder."""

import threading
from typing import Any

import httpx
from pydantic import BaseModel, Field

from player_management_client.config import ClientConfig

JSON_CONTENT_TYPE = "application/json"

Identifier = str | int


class RequestSpec(BaseModel):
    """A fully resolved request, built fresh for every call.

    Fields:
        method: HTTP verb (GET, POST, PUT, PATCH, DELETE).
        url: Absolute URL including the account prefix.
        headers: Custom headers, the bearer auth header and, for writes,
            the JSON content type.
        body: JSON-serializable payload, or None when nothing is sent.
        verify: Whether TLS certificates are verified.
    """

    method: str
    url: str
    headers: dict[str, str] = Field(default_factory=dict)
    body: Any = None
    verify: bool = True


class RequestBuilder:
    """Builds RequestSpec objects from a ClientConfig.

    Holds the only mutable state of a client: the custom header mapping.
    Writes and snapshots are serialized by a lock so a header added while
    another thread builds a request is either fully present or absent.
    """

    def __init__(self, config: ClientConfig) -> None:
        self._config = config
        self._custom_headers: dict[str, str] = {}
        for key, value in config.headers.items():
            set_header(self._custom_headers, key, value)
        self._lock = threading.Lock()

    @property
    def config(self) -> ClientConfig:
        return self._config

    def add_header(self, key: str, value: str) -> None:
        """Register a header sent on every subsequent request (last write wins)."""
        with self._lock:
            set_header(self._custom_headers, key, value)

    def headers_snapshot(self) -> dict[str, str]:
        """Return a copy of the custom headers."""
        with self._lock:
            return dict(self._custom_headers)

    @property
    def auth(self) -> httpx.BasicAuth | None:
        """Basic credentials, used only when no access token is configured."""
        if self._config.uses_token:
            return None
        return httpx.BasicAuth(self._config.email or "", self._config.password or "")

    def read(self, method: str, path: str) -> RequestSpec:
        """Build a request without a body.

        Args:
            method: HTTP verb.
            path: Path relative to the account URL, starting with "/".
        """
        headers = self.headers_snapshot()
        if self._config.uses_token:
            set_header(headers, "Authorization", f"Bearer {self._config.access_token}")
        return RequestSpec(
            method=method,
            url=self._config.account_url + path,
            headers=headers,
            verify=self._config.verify_ssl,
        )

    def write(self, method: str, path: str, body: Any = None) -> RequestSpec:
        """Build a request carrying a JSON content type and optional body."""
        spec = self.read(method, path)
        set_header(spec.headers, "content-type", JSON_CONTENT_TYPE)
        if body is not None:
            spec.body = body
        return spec


def set_header(headers: dict[str, str], key: str, value: str) -> None:
    """Set a header, replacing any existing key that differs only in case."""
    for existing in [k for k in headers if k.lower() == key.lower()]:
        del headers[existing]
    headers[key] = value


def player_path(player_id: Identifier | None = None) -> str:
    """Path of the player collection, or of one player."""
    if player_id is None:
        return "/players"
    return f"/players/{player_id}"


def embed_path(player_id: Identifier, embed_id: Identifier | None = None) -> str:
    """Path of a player's embed collection, or of one embed."""
    path = f"{player_path(player_id)}/embeds"
    if embed_id is None:
        return path
    return f"{path}/{embed_id}"
