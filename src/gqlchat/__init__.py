"""
gqlchat: a terminal chat client for an assistant behind a GraphQL endpoint.

Each module hides one design decision: the client hides the wire format,
the session hides the turn lifecycle, the UI hides rendering.
"""

__version__ = "0.1.0"

from .client import (
    ChatClient,
    ChatMessage,
    GraphQLChatClient,
    RequestError,
    Role,
    TransportError,
    create_chat_client,
)
from .config import DEFAULT_GRAPHQL_ENDPOINT, ChatConfig, endpoint_label
from .session import ChatSession

__all__ = [
    "ChatClient",
    "ChatConfig",
    "ChatMessage",
    "ChatSession",
    "DEFAULT_GRAPHQL_ENDPOINT",
    "GraphQLChatClient",
    "RequestError",
    "Role",
    "TransportError",
    "create_chat_client",
    "endpoint_label",
]
