import json
from typing import Any

import httpx
from pydantic import ValidationError

from .base import ChatClient
from .errors import RequestError, TransportError
from .models import ChatMessage, build_request_body

NO_REPLY_MESSAGE = "The endpoint did not return an assistant reply."
GRAPHQL_ERROR_MESSAGE = "GraphQL returned an error"


def _parse_body(raw: str) -> Any:
    """Parse a response body best-effort; empty or malformed JSON is None."""
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        return None


def _first_error_message(payload: Any) -> str | None:
    if not isinstance(payload, dict):
        return None
    errors = payload.get("errors")
    if not isinstance(errors, list) or not errors:
        return None
    first = errors[0]
    if isinstance(first, dict):
        message = first.get("message")
        if isinstance(message, str) and message:
            return message
    return None


def _dig(payload: Any, *keys: str) -> Any:
    node = payload
    for key in keys:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


class GraphQLChatClient(ChatClient):
    """Chat client that talks to a GraphQL endpoint over HTTP.

    Hidden design decisions:
    - The SendMessage mutation document and variable layout
    - HTTP client setup (httpx, no timeout)
    - How status codes, GraphQL error lists and missing data map onto
      RequestError messages
    """

    def __init__(
        self,
        endpoint: str,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        **client_kwargs: Any
    ):
        """Initialize GraphQL client.

        Args:
            endpoint: Full URL of the GraphQL endpoint
            headers: Extra headers sent with every request
            transport: Custom httpx transport (used by tests to stub the server)
            **client_kwargs: Additional kwargs for httpx.AsyncClient
        """
        self._endpoint = endpoint
        self._headers = {"Content-Type": "application/json", **(headers or {})}
        # A turn waits for its response unconditionally
        client_kwargs.setdefault("timeout", None)
        self._client = httpx.AsyncClient(transport=transport, **client_kwargs)
        self._debug_callback: Any | None = None

    @property
    def endpoint(self) -> str:
        """Get the endpoint URL."""
        return self._endpoint

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback for request tracing.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, "GraphQL", message)

    async def send_message(self, text: str) -> ChatMessage:
        """Send a SendMessage mutation and return the assistant reply.

        Args:
            text: Message forwarded as variables.input.message

        Returns:
            The assistant message from data.sendMessage.message

        Raises:
            TransportError: If the request could not be completed
            RequestError: On a non-success status, a GraphQL error list,
                or a missing/malformed reply
        """
        self._debug("info", f"POST {self._endpoint} ({len(text)} chars)")

        try:
            response = await self._client.post(
                self._endpoint,
                json=build_request_body(text),
                headers=self._headers,
            )
        except httpx.HTTPError as e:
            detail = str(e) or type(e).__name__
            self._debug("error", f"Transport failure: {detail}")
            raise TransportError(f"Could not reach the GraphQL endpoint: {detail}") from e

        self._debug("debug", f"HTTP {response.status_code}, {len(response.content)} bytes")
        payload = _parse_body(response.text)
        if payload is None and response.content:
            self._debug("warning", "Response body is not valid JSON")

        return self._reconcile(response.status_code, response.is_success, payload)

    def _reconcile(self, status_code: int, ok: bool, payload: Any) -> ChatMessage:
        if not ok:
            top_level = payload.get("message") if isinstance(payload, dict) else None
            message = (
                _first_error_message(payload)
                or (top_level if isinstance(top_level, str) and top_level else None)
                or f"GraphQL request failed ({status_code})"
            )
            raise RequestError(message, status_code=status_code, payload=payload)

        errors = payload.get("errors") if isinstance(payload, dict) else None
        if isinstance(errors, list) and errors:
            message = _first_error_message(payload) or GRAPHQL_ERROR_MESSAGE
            raise RequestError(message, status_code=status_code, payload=payload)

        reply = _dig(payload, "data", "sendMessage", "message")
        if not reply:
            raise RequestError(NO_REPLY_MESSAGE, status_code=status_code, payload=payload)

        try:
            message = ChatMessage.model_validate(reply)
        except ValidationError as e:
            self._debug("warning", f"Malformed reply: {e.error_count()} validation error(s)")
            raise RequestError(NO_REPLY_MESSAGE, status_code=status_code, payload=payload) from e

        self._debug("info", f"Reply {message.id} received ({len(message.content)} chars)")
        return message

    async def close(self) -> None:
        """Close the underlying httpx client."""
        await self._client.aclose()
