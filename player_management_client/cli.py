"""Command-line access to the Player Management API."""

import json

import typer

from player_management_client.client import REQUEST_ERRORS, PlayerManagementClient
from player_management_client.config import ClientConfig
from player_management_client.exceptions import PlayerManagementConfigError

app = typer.Typer(name="player-management", help="Brightcove Player Management API client.")
players_app = typer.Typer(help="Players in the account.")
app.add_typer(players_app, name="players")


@players_app.command("list")
def list_players(
        account_id: str = typer.Option(
            ..., "--account-id", "-a", envvar="PLAYER_MANAGEMENT_ACCOUNT_ID", help="Account id."
        ),
        access_token: str = typer.Option(
            ..., "--access-token", "-t", envvar="PLAYER_MANAGEMENT_ACCESS_TOKEN", help="OAuth access token."
        ),
        base_url: str | None = typer.Option(None, "--base-url", help="Override the API base URL."),
        debug: bool = typer.Option(False, "--debug", help="Print curl commands and timings to stderr."),
) -> None:
    """List all players in the account and print them as JSON."""
    try:
        config = ClientConfig.from_env(
            account_id=account_id,
            access_token=access_token,
            base_url=base_url,
            debug=debug or None,
        )
    except PlayerManagementConfigError as e:
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(code=2)

    with PlayerManagementClient(config) as client:
        try:
            response = client.players.list()
        except REQUEST_ERRORS as e:
            typer.echo(f"Request failed: {e}", err=True)
            raise typer.Exit(code=2)

    if not response.is_success:
        typer.echo(f"Player Management API returned status {response.status_code}", err=True)
        raise typer.Exit(code=1)

    players = response.json().get("items", [])
    typer.echo(json.dumps({"players": players}, indent=2))


def main() -> None:
    app()
