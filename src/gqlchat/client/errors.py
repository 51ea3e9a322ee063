"""Errors raised by chat clients.

Every failure of a chat turn surfaces as a RequestError so the session can
turn it into a readable transcript entry.
"""

from typing import Any


class RequestError(Exception):
    """A chat request failed.

    Attributes:
        message: Human-readable failure text shown to the user
        status_code: HTTP status of the response, None if no response arrived
        payload: Parsed response body, None if absent or unparsable
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload


class TransportError(RequestError):
    """The request could not be completed (connection, DNS, protocol)."""
