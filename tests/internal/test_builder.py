"""Tests for RequestBuilder and path helpers."""

import threading

import httpx

from player_management_client._internal.builder import (
    JSON_CONTENT_TYPE,
    RequestBuilder,
    embed_path,
    player_path,
)
from player_management_client.config import ClientConfig

ACCOUNT_URL = "https://players.api.brightcove.com/v1/accounts/123"


def token_builder(**kwargs) -> RequestBuilder:
    return RequestBuilder(ClientConfig(account_id="123", access_token="tok", **kwargs))


def basic_builder() -> RequestBuilder:
    return RequestBuilder(
        ClientConfig(account_id="123", email="user@example.com", password="secret")
    )


class TestPaths:
    """Tests for path helpers."""

    def test_player_paths(self):
        """Should build collection and item paths."""
        assert player_path() == "/players"
        assert player_path("p1") == "/players/p1"
        assert player_path(42) == "/players/42"

    def test_embed_paths(self):
        """Should nest embeds under the player."""
        assert embed_path("p1") == "/players/p1/embeds"
        assert embed_path("p1", "e1") == "/players/p1/embeds/e1"

    def test_identifiers_are_not_escaped(self):
        """Should pass identifiers through verbatim."""
        assert player_path("a/b c") == "/players/a/b c"


class TestRead:
    """Tests for read request specs."""

    def test_url(self):
        """Should append the path to the account URL."""
        spec = token_builder().read("GET", "/players")
        assert spec.method == "GET"
        assert spec.url == f"{ACCOUNT_URL}/players"

    def test_bearer_header(self):
        """Should add the bearer header when a token is configured."""
        builder = token_builder()
        spec = builder.read("GET", "/players")
        assert spec.headers["Authorization"] == "Bearer tok"
        assert builder.auth is None

    def test_basic_credentials(self):
        """Should use basic auth and no bearer header without a token."""
        builder = basic_builder()
        spec = builder.read("GET", "/players")
        assert "Authorization" not in spec.headers
        assert isinstance(builder.auth, httpx.BasicAuth)

    def test_no_content_type(self):
        """Should not add a content type or body."""
        spec = token_builder().read("DELETE", "/players/p1")
        assert "content-type" not in spec.headers
        assert spec.body is None

    def test_verify_follows_config(self):
        """Should carry the TLS verification flag."""
        assert token_builder(verify_ssl=False).read("GET", "/players").verify is False


class TestWrite:
    """Tests for write request specs."""

    def test_content_type_and_body(self):
        """Should add the JSON content type and attach the body."""
        spec = token_builder().write("POST", "/players", {"name": "x"})
        assert spec.headers["content-type"] == JSON_CONTENT_TYPE
        assert spec.body == {"name": "x"}
        assert spec.headers["Authorization"] == "Bearer tok"

    def test_without_body(self):
        """Should keep the content type when no body is given."""
        spec = token_builder().write("POST", "/players/p1/publish")
        assert spec.headers["content-type"] == JSON_CONTENT_TYPE
        assert spec.body is None


class TestCustomHeaders:
    """Tests for custom header handling."""

    def test_initial_headers_from_config(self):
        """Should seed custom headers from the config."""
        spec = token_builder(headers={"X-Trace": "1"}).read("GET", "/players")
        assert spec.headers["X-Trace"] == "1"

    def test_add_header_last_write_wins(self):
        """Should replace a header registered twice."""
        builder = token_builder()
        builder.add_header("X-Env", "a")
        builder.add_header("X-Env", "b")
        assert builder.read("GET", "/players").headers["X-Env"] == "b"

    def test_auth_header_overrides_custom_authorization(self):
        """Should send exactly one auth scheme even if a custom one is set."""
        builder = token_builder()
        builder.add_header("Authorization", "Basic abc")
        assert builder.read("GET", "/players").headers["Authorization"] == "Bearer tok"

    def test_built_spec_is_independent_of_later_headers(self):
        """Should snapshot headers at build time."""
        builder = token_builder()
        spec = builder.read("GET", "/players")
        builder.add_header("X-Late", "1")
        assert "X-Late" not in spec.headers

    def test_snapshot_is_a_copy(self):
        """Should not expose the internal mapping."""
        builder = token_builder()
        builder.headers_snapshot()["X-Leak"] = "1"
        assert "X-Leak" not in builder.headers_snapshot()

    def test_concurrent_adds(self):
        """Should keep every header added from many threads."""
        builder = token_builder()
        threads = [
            threading.Thread(target=builder.add_header, args=(f"X-{i}", str(i)))
            for i in range(50)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(builder.headers_snapshot()) == 50

    def test_lowercase_custom_authorization_is_replaced(self):
        """Should drop a custom authorization header of any case for the bearer one."""
        builder = token_builder()
        builder.add_header("authorization", "Basic abc")
        headers = builder.read("GET", "/players").headers
        assert [k for k in headers if k.lower() == "authorization"] == ["Authorization"]
        assert headers["Authorization"] == "Bearer tok"

    def test_custom_content_type_is_replaced_on_write(self):
        """Should send a single JSON content type whatever the custom header case."""
        builder = token_builder(headers={"Content-Type": "text/plain"})
        headers = builder.write("POST", "/players", {}).headers
        assert [k for k in headers if k.lower() == "content-type"] == ["content-type"]
        assert headers["content-type"] == JSON_CONTENT_TYPE

    def test_add_header_ignores_key_case(self):
        """Should treat header names differing only in case as one header."""
        builder = token_builder()
        builder.add_header("X-Env", "a")
        builder.add_header("x-env", "b")
        assert builder.headers_snapshot() == {"x-env": "b"}
