"""Tests for the Typer command line."""
import httpx
import pytest
from typer.testing import CliRunner

import gqlchat.cli.app as cli_app
from gqlchat.client import GraphQLChatClient
from gqlchat.config import DEFAULT_GRAPHQL_ENDPOINT, ENDPOINT_ENV_VAR

runner = CliRunner()


@pytest.fixture
def stub_server(monkeypatch, clean_env):
    """Route CLI clients to an httpx.MockTransport handler.

    Returns a setter taking the handler; created clients are recorded.
    """
    created: list[GraphQLChatClient] = []
    state = {}

    def _get_client(config, **client_kwargs):
        client = GraphQLChatClient(config.endpoint, transport=httpx.MockTransport(state["handler"]))
        created.append(client)
        return client

    monkeypatch.setattr(cli_app, "get_client", _get_client)

    def _use(handler):
        state["handler"] = handler
        return created

    return _use


class TestSendCommand:
    """Tests for `gqlchat send`."""

    def test_prints_reply(self, stub_server, graphql_body):
        created = stub_server(lambda request: httpx.Response(200, json=graphql_body(content="gm")))

        result = runner.invoke(cli_app.app, ["send", "hello"])

        assert result.exit_code == 0
        assert "Assistant:" in result.output
        assert "gm" in result.output
        assert created[0]._client.is_closed

    def test_failure_exits_nonzero(self, stub_server):
        stub_server(lambda request: httpx.Response(500, json={"errors": [{"message": "boom"}]}))

        result = runner.invoke(cli_app.app, ["send", "hello"])

        assert result.exit_code == 1
        assert "boom" in result.output

    def test_blank_message_exits_nonzero(self, stub_server):
        created = stub_server(lambda request: httpx.Response(200))

        result = runner.invoke(cli_app.app, ["send", "   "])

        assert result.exit_code == 1
        assert "empty" in result.output
        assert created[0]._client.is_closed

    def test_endpoint_option(self, stub_server, graphql_body):
        seen = []

        def _handler(request):
            seen.append(str(request.url))
            return httpx.Response(200, json=graphql_body())

        stub_server(_handler)

        runner.invoke(cli_app.app, ["send", "hello", "--endpoint", "https://flag.example.test/graphql"])

        assert seen == ["https://flag.example.test/graphql"]


class TestChatCommand:
    """Tests for `gqlchat chat`."""

    def test_conversation_until_exit(self, stub_server, graphql_body):
        stub_server(lambda request: httpx.Response(200, json=graphql_body(content="pong")))

        result = runner.invoke(cli_app.app, ["chat"], input="ping\n\nquit\n")

        assert result.exit_code == 0
        assert "pong" in result.output
        assert "Goodbye" in result.output

    def test_eof_ends_chat(self, stub_server):
        stub_server(lambda request: httpx.Response(200))

        result = runner.invoke(cli_app.app, ["chat"], input="")

        assert result.exit_code == 0
        assert "Goodbye" in result.output


class TestEndpointCommand:
    """Tests for `gqlchat endpoint`."""

    def test_default(self, clean_env):
        result = runner.invoke(cli_app.app, ["endpoint"])

        assert result.exit_code == 0
        assert DEFAULT_GRAPHQL_ENDPOINT in result.output

    def test_from_environment(self, clean_env):
        clean_env.setenv(ENDPOINT_ENV_VAR, "https://env.example.test/graphql")

        result = runner.invoke(cli_app.app, ["endpoint"])

        assert "https://env.example.test/graphql" in result.output
