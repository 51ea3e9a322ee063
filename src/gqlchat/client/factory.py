from typing import Any

from .base import ChatClient
from .graphql import GraphQLChatClient


def create_chat_client(kind: str = "graphql", **config: Any) -> ChatClient:
    """Create a chat client instance.

    This factory function hides the instantiation logic for different backends.

    Args:
        kind: Client type (currently only 'graphql')
        **config: Client-specific configuration
            For GraphQL:
                - endpoint: str (required)
                - headers: dict[str, str] | None
                - transport: httpx.AsyncBaseTransport | None

    Returns:
        Initialized chat client instance

    Raises:
        ValueError: If client type is not supported
        TypeError: If required configuration is missing

    Examples:
        >>> client = create_chat_client(
        ...     "graphql",
        ...     endpoint="https://example.com/api/graphql"
        ... )
    """
    kind_lower = kind.lower()

    if kind_lower == "graphql":
        if "endpoint" not in config:
            raise TypeError("GraphQL client requires 'endpoint' in config")
        return GraphQLChatClient(**config)

    raise ValueError(
        f"Unsupported chat client: {kind}. "
        f"Supported clients: 'graphql'"
    )
