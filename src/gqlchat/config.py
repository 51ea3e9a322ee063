"""Runtime configuration.

Centralizes where the GraphQL endpoint and other settings come from so the
rest of the package receives them as explicit values.

Environment variables:
    GQLCHAT_GRAPHQL_ENDPOINT: GraphQL endpoint URL (blank counts as unset)
    GQLCHAT_LOG_LEVEL: Initial log panel level (debug/info/warning/error)
"""

import os
from urllib.parse import urlsplit

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from .session import DEFAULT_WELCOME_MESSAGE

DEFAULT_GRAPHQL_ENDPOINT = "https://cloudflare-ai-worker.303062086.workers.dev/api/graphql"
ENDPOINT_ENV_VAR = "GQLCHAT_GRAPHQL_ENDPOINT"
LOG_LEVEL_ENV_VAR = "GQLCHAT_LOG_LEVEL"


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


class ChatConfig(BaseModel):
    """Settings injected into the client and the view at startup."""

    model_config = ConfigDict(frozen=True)

    endpoint: str = Field(default=DEFAULT_GRAPHQL_ENDPOINT, description="GraphQL endpoint URL")
    log_level: str | None = Field(default=None, description="Log panel level, None hides the panel")
    welcome_message: str = Field(default=DEFAULT_WELCOME_MESSAGE)

    @classmethod
    def from_env(
        cls,
        endpoint: str | None = None,
        log_level: str | None = None,
        load_env_file: bool = True,
    ) -> "ChatConfig":
        """Resolve configuration from overrides, the environment and .env.

        Args:
            endpoint: Explicit endpoint, wins over the environment
            log_level: Explicit log level, wins over the environment
            load_env_file: Whether to read a .env file first

        Returns:
            Resolved configuration
        """
        if load_env_file:
            load_dotenv(find_dotenv(usecwd=True))

        resolved_endpoint = (
            _clean(endpoint)
            or _clean(os.getenv(ENDPOINT_ENV_VAR))
            or DEFAULT_GRAPHQL_ENDPOINT
        )
        resolved_level = _clean(log_level) or _clean(os.getenv(LOG_LEVEL_ENV_VAR))
        return cls(endpoint=resolved_endpoint, log_level=resolved_level)

    @property
    def endpoint_label(self) -> str:
        return endpoint_label(self.endpoint)


def endpoint_label(url: str) -> str:
    """Short display form of an endpoint: origin plus path.

    Falls back to the raw string when it is not an absolute URL.
    """
    try:
        parts = urlsplit(url)
    except ValueError:
        return url
    if not parts.scheme or not parts.netloc:
        return url
    # Credentials never show up in the label
    host = parts.netloc.rpartition("@")[2]
    return f"{parts.scheme}://{host}{parts.path}"
