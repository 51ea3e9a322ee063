"""Pytest configuration and shared fixtures."""
import json
import os

import httpx
import pytest

from gqlchat.client import ChatMessage, GraphQLChatClient
from gqlchat.config import ENDPOINT_ENV_VAR, LOG_LEVEL_ENV_VAR

from .stubs import StubClient

TEST_ENDPOINT = "https://chat.example.test/api/graphql"


@pytest.fixture
def assistant_reply():
    """Return the canonical assistant reply."""
    return ChatMessage(id="m1", role="assistant", content="hi")


@pytest.fixture
def make_stub_client(assistant_reply):
    """Return a factory for StubClient instances."""
    def _make(outcome=None, gated: bool = False) -> StubClient:
        return StubClient(assistant_reply if outcome is None else outcome, gated=gated)
    return _make


@pytest.fixture
def graphql_body():
    """Return a factory for successful GraphQL response bodies."""
    def _body(message_id="m1", role="assistant", content="hi"):
        return {
            "data": {
                "sendMessage": {
                    "message": {"id": message_id, "role": role, "content": content}
                }
            }
        }
    return _body


@pytest.fixture
def make_graphql_client():
    """Return a factory for GraphQLChatClient backed by httpx.MockTransport.

    The handler receives the httpx.Request; every request seen is recorded
    on the returned client's ``requests`` attribute.
    """
    def _make(handler) -> GraphQLChatClient:
        requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        client = GraphQLChatClient(TEST_ENDPOINT, transport=httpx.MockTransport(_record))
        client.requests = requests
        return client
    return _make


@pytest.fixture
def json_response():
    """Return a factory for canned JSON responses."""
    def _respond(status_code: int, payload) -> httpx.Response:
        return httpx.Response(status_code, content=json.dumps(payload).encode("utf-8"))
    return _respond


@pytest.fixture
def clean_env(monkeypatch):
    """Remove gqlchat variables from the environment.

    Each variable is registered with monkeypatch first, so values a .env
    file loads during the test are dropped again at teardown.
    """
    for name in (ENDPOINT_ENV_VAR, LOG_LEVEL_ENV_VAR):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


@pytest.fixture(scope="session")
def live_endpoint():
    """Return a real endpoint for integration tests, if configured."""
    return os.getenv("GQLCHAT_TEST_ENDPOINT")
