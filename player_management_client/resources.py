"""Resource namespaces for players, embeds and their configurations.

Every method returns whatever the owning client's dispatcher returns: an
``httpx.Response`` for PlayerManagementClient, a coroutine resolving to one
for AsyncPlayerManagementClient, or the callback's return value when a
``callback`` is given.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from player_management_client._internal.builder import Identifier, embed_path, player_path

if TYPE_CHECKING:
    from player_management_client.client import BaseClient

Callback = Callable[[Exception | None, Any], Any]


class _Resource:
    def __init__(self, client: "BaseClient") -> None:
        self._client = client


class Players(_Resource):
    """The player collection of the account."""

    def list(self, *, callback: Callback | None = None) -> Any:
        """List all players in the account."""
        return self._client._read("players.list", "GET", player_path(), callback)


class PlayerConfig(_Resource):
    """Configuration of a single player."""

    def get(
        self,
        player_id: Identifier,
        branch: str | None = None,
        *,
        callback: Callback | None = None,
    ) -> Any:
        """Get the player configuration for a branch ("master" or "preview").

        Without a branch the path ends in ``/configuration/``.
        """
        path = f"{player_path(player_id)}/configuration/{branch or ''}"
        return self._client._read("player.config.get", "GET", path, callback)

    def put(
        self, player_id: Identifier, body: Any, *, callback: Callback | None = None
    ) -> Any:
        """Replace the player configuration."""
        path = f"{player_path(player_id)}/configuration"
        return self._client._write("player.config.put", "PUT", path, body, callback)

    def patch(
        self, player_id: Identifier, body: Any, *, callback: Callback | None = None
    ) -> Any:
        """Merge body into the existing player configuration."""
        path = f"{player_path(player_id)}/configuration"
        return self._client._write("player.config.patch", "PATCH", path, body, callback)


class Player(_Resource):
    """A single player."""

    def __init__(self, client: "BaseClient") -> None:
        super().__init__(client)
        self.config = PlayerConfig(client)

    def create(self, body: Any, *, callback: Callback | None = None) -> Any:
        return self._client._write("player.create", "POST", player_path(), body, callback)

    def get(self, player_id: Identifier, *, callback: Callback | None = None) -> Any:
        return self._client._read("player.get", "GET", player_path(player_id), callback)

    def patch(
        self, player_id: Identifier, body: Any, *, callback: Callback | None = None
    ) -> Any:
        return self._client._write(
            "player.patch", "PATCH", player_path(player_id), body, callback
        )

    def delete(self, player_id: Identifier, *, callback: Callback | None = None) -> Any:
        return self._client._read("player.delete", "DELETE", player_path(player_id), callback)

    def publish(
        self,
        player_id: Identifier,
        body: Any = None,
        *,
        callback: Callback | None = None,
    ) -> Any:
        """Publish the player, optionally with a publish comment body."""
        path = f"{player_path(player_id)}/publish"
        return self._client._write("player.publish", "POST", path, body, callback)


class Embeds(_Resource):
    """The embed collection of a player."""

    def list(self, player_id: Identifier, *, callback: Callback | None = None) -> Any:
        return self._client._read("embeds.list", "GET", embed_path(player_id), callback)


class EmbedConfig(_Resource):
    """Configuration of a single embed."""

    def get(
        self,
        player_id: Identifier,
        embed_id: Identifier,
        branch: str | None = None,
        *,
        callback: Callback | None = None,
    ) -> Any:
        path = f"{embed_path(player_id, embed_id)}/configuration"
        if branch:
            path += f"/{branch}"
        return self._client._read("embed.config.get", "GET", path, callback)

    def get_merged(
        self,
        player_id: Identifier,
        player_branch: str,
        embed_id: Identifier,
        embed_branch: str,
        *,
        callback: Callback | None = None,
    ) -> Any:
        """Get the server-side merge of a player branch and an embed branch."""
        path = (
            f"{embed_path(player_id, embed_id)}/configuration/merged"
            f"?playerBranch={player_branch}&embedBranch={embed_branch}"
        )
        return self._client._read("embed.config.get_merged", "GET", path, callback)

    def put(
        self,
        player_id: Identifier,
        embed_id: Identifier,
        body: Any,
        *,
        callback: Callback | None = None,
    ) -> Any:
        path = f"{embed_path(player_id, embed_id)}/configuration"
        return self._client._write("embed.config.put", "PUT", path, body, callback)

    def patch(
        self,
        player_id: Identifier,
        embed_id: Identifier,
        body: Any,
        *,
        callback: Callback | None = None,
    ) -> Any:
        path = f"{embed_path(player_id, embed_id)}/configuration"
        return self._client._write("embed.config.patch", "PATCH", path, body, callback)


class Embed(_Resource):
    """A single embed of a player."""

    def __init__(self, client: "BaseClient") -> None:
        super().__init__(client)
        self.config = EmbedConfig(client)

    def create(
        self, player_id: Identifier, body: Any, *, callback: Callback | None = None
    ) -> Any:
        return self._client._write(
            "embed.create", "POST", embed_path(player_id), body, callback
        )

    def get(
        self,
        player_id: Identifier,
        embed_id: Identifier,
        *,
        callback: Callback | None = None,
    ) -> Any:
        return self._client._read(
            "embed.get", "GET", embed_path(player_id, embed_id), callback
        )

    def delete(
        self,
        player_id: Identifier,
        embed_id: Identifier,
        *,
        callback: Callback | None = None,
    ) -> Any:
        return self._client._read(
            "embed.delete", "DELETE", embed_path(player_id, embed_id), callback
        )

    def publish(
        self,
        player_id: Identifier,
        embed_id: Identifier,
        body: Any = None,
        *,
        callback: Callback | None = None,
    ) -> Any:
        path = f"{embed_path(player_id, embed_id)}/publish"
        return self._client._write("embed.publish", "POST", path, body, callback)
