"""Provider factory functions for CLI.

Centralizes creation of configuration and chat clients from the environment.
Hides configuration details from command implementations.
"""

from typing import Any

from rich.console import Console
from rich.markup import escape

from ..client import ChatClient, create_chat_client
from ..config import ChatConfig

# Default console for output
_console = Console()


def get_config(endpoint: str | None = None, log_level: str | None = None) -> ChatConfig:
    """Resolve configuration for a command.

    Args:
        endpoint: --endpoint override
        log_level: --log-level override

    Environment variables:
        GQLCHAT_GRAPHQL_ENDPOINT: GraphQL endpoint URL
        GQLCHAT_LOG_LEVEL: Log panel level
    """
    return ChatConfig.from_env(endpoint=endpoint, log_level=log_level)


def get_client(config: ChatConfig, **client_kwargs: Any) -> ChatClient:
    """Create the GraphQL chat client for a resolved configuration."""
    return create_chat_client("graphql", endpoint=config.endpoint, **client_kwargs)


def console_debug_callback(console: Console | None = None) -> Any:
    """Build a debug callback that prints trace lines to a Rich console.

    Args:
        console: Optional Rich console for output

    Returns:
        Callable(level: str, component: str, message: str)
    """
    con = console or _console
    colors = {"debug": "dim", "info": "cyan", "warning": "yellow", "error": "red"}

    def _callback(level: str, component: str, message: str) -> None:
        color = colors.get(level, "white")
        con.print(
            f"[{color}]{level.upper():<7}[/{color}] [bold]{component}[/bold] {escape(message)}",
            highlight=False,
        )

    return _callback
