"""Tests for the command-line interface."""

import json
import os
from unittest.mock import patch

import httpx
import respx
from typer.testing import CliRunner

from player_management_client.cli import app

BASE = "https://players.api.brightcove.com/v1/accounts/123"

runner = CliRunner()


class TestListPlayers:
    """Tests for `players list`."""

    @respx.mock
    def test_prints_items(self):
        """Should print the items of the response as players."""
        route = respx.get(f"{BASE}/players").mock(
            return_value=httpx.Response(200, json={"items": [{"id": "p1"}], "item_count": 1})
        )
        with patch.dict(os.environ, {}, clear=True):
            result = runner.invoke(app, ["players", "list", "-a", "123", "-t", "tok"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"players": [{"id": "p1"}]}
        assert route.calls.last.request.headers["authorization"] == "Bearer tok"

    @respx.mock
    def test_reads_environment(self):
        """Should take the account id and token from the environment."""
        route = respx.get(f"{BASE}/players").mock(
            return_value=httpx.Response(200, json={"items": []})
        )
        env = {
            "PLAYER_MANAGEMENT_ACCOUNT_ID": "123",
            "PLAYER_MANAGEMENT_ACCESS_TOKEN": "env-token",
        }
        with patch.dict(os.environ, env, clear=True):
            result = runner.invoke(app, ["players", "list"])

        assert result.exit_code == 0
        assert route.calls.last.request.headers["authorization"] == "Bearer env-token"

    @respx.mock
    def test_error_status_exits_1(self):
        """Should exit with code 1 on a non-200 response."""
        respx.get(f"{BASE}/players").mock(return_value=httpx.Response(401))
        with patch.dict(os.environ, {}, clear=True):
            result = runner.invoke(app, ["players", "list", "-a", "123", "-t", "tok"])

        assert result.exit_code == 1
        assert "401" in result.output

    @respx.mock
    def test_transport_error_exits_2(self):
        """Should exit with code 2 when the request fails."""
        respx.get(f"{BASE}/players").mock(side_effect=httpx.ConnectError("connection failed"))
        with patch.dict(os.environ, {}, clear=True):
            result = runner.invoke(app, ["players", "list", "-a", "123", "-t", "tok"])

        assert result.exit_code == 2
        assert "Request failed" in result.output

    def test_missing_options(self):
        """Should fail when neither options nor env vars are given."""
        with patch.dict(os.environ, {}, clear=True):
            result = runner.invoke(app, ["players", "list"])
        assert result.exit_code != 0

    @respx.mock
    def test_any_success_status_prints_items(self):
        """Should treat every 2xx status as success."""
        respx.get(f"{BASE}/players").mock(
            return_value=httpx.Response(203, json={"items": [{"id": "p1"}]})
        )
        with patch.dict(os.environ, {}, clear=True):
            result = runner.invoke(app, ["players", "list", "-a", "123", "-t", "tok"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"players": [{"id": "p1"}]}

    @respx.mock
    def test_undecodable_body_exits_2(self):
        """Should exit with code 2 when the response body cannot be decoded."""
        respx.get(f"{BASE}/players").mock(
            return_value=httpx.Response(
                200,
                headers={"Content-Encoding": "gzip"},
                stream=httpx.ByteStream(b"not gzip"),
            )
        )
        with patch.dict(os.environ, {}, clear=True):
            result = runner.invoke(app, ["players", "list", "-a", "123", "-t", "tok"])

        assert result.exit_code == 2
        assert "Request failed" in result.output
