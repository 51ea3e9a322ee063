"""Conversation state and the lifecycle of a chat turn.

Hides:
- How the transcript is stored (append-only, welcome message first)
- The at-most-one-request-in-flight gate
- How failures become transcript entries and the last-error banner text
"""

import time
from typing import Any
from uuid import uuid4

from ..client import ChatClient, ChatMessage, RequestError, Role
from .models import IDLE, SENDING, Errored, SessionState, Sending

WELCOME_MESSAGE_ID = "welcome"
DEFAULT_WELCOME_MESSAGE = (
    "Hi, I'm your DeFi teaching assistant. Tell me what you'd like to discuss "
    "with DeepSeek and I'll relay it over GraphQL."
)
FALLBACK_ERROR_MESSAGE = "Sending failed. Try again later or check the GraphQL service."


def new_local_id() -> str:
    """Generate an id for a locally created message."""
    return uuid4().hex


class ChatSession:
    """One conversation with a chat backend.

    All mutation happens on the caller's event loop; the only suspension
    point is the client call inside finish_turn.

    Example:
        session = ChatSession(client)
        await session.submit("What is impermanent loss?")
        print(session.messages[-1].content)
    """

    def __init__(
        self,
        client: ChatClient,
        welcome_message: str = DEFAULT_WELCOME_MESSAGE,
    ) -> None:
        self._client = client
        self._messages: list[ChatMessage] = [
            ChatMessage(id=WELCOME_MESSAGE_ID, role=Role.ASSISTANT, content=welcome_message)
        ]
        self._pending_input = ""
        self._state: SessionState = IDLE
        self._in_flight: str | None = None
        self._last_latency: float | None = None
        self._change_callback: Any | None = None
        self._debug_callback: Any | None = None

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        """Transcript in creation order."""
        return tuple(self._messages)

    @property
    def pending_input(self) -> str:
        """Uncommitted input text."""
        return self._pending_input

    @pending_input.setter
    def pending_input(self, value: str) -> None:
        self._pending_input = value

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_sending(self) -> bool:
        return isinstance(self._state, Sending)

    @property
    def last_error(self) -> str | None:
        if isinstance(self._state, Errored):
            return self._state.message
        return None

    @property
    def can_submit(self) -> bool:
        """Whether the current pending input would start a turn."""
        return not self.is_sending and bool(self._pending_input.strip())

    @property
    def last_latency(self) -> float | None:
        """Round-trip time of the most recent turn in seconds."""
        return self._last_latency

    def set_change_callback(self, callback: Any) -> None:
        """Set the callback invoked after every state change.

        Args:
            callback: Callable(session: ChatSession) -> None
        """
        self._change_callback = callback

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback for detailed logging.

        Args:
            callback: Callable(level: str, component: str, message: str)
                      level: 'debug', 'info', 'warning', 'error'
        """
        self._debug_callback = callback
        if hasattr(self._client, "set_debug_callback"):
            self._client.set_debug_callback(callback)

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, "Session", message)

    def _changed(self) -> None:
        if self._change_callback:
            self._change_callback(self)

    def start_turn(self, text: str) -> ChatMessage | None:
        """Begin a turn: append the user message and enter the sending state.

        Args:
            text: Raw user input; surrounding whitespace is dropped

        Returns:
            The appended user message, or None if the input was empty or a
            request is already in flight
        """
        trimmed = text.strip()
        if not trimmed:
            self._debug("debug", "Ignoring empty submission")
            return None
        if self.is_sending:
            self._debug("debug", "Ignoring submission while a request is in flight")
            return None

        user_message = ChatMessage(id=new_local_id(), role=Role.USER, content=trimmed)
        self._messages.append(user_message)
        self._pending_input = ""
        self._state = SENDING
        self._in_flight = trimmed
        self._debug("info", f"Turn started ({len(trimmed)} chars)")
        self._changed()
        return user_message

    async def finish_turn(self) -> ChatMessage:
        """Send the in-flight message and append the reply or a fallback.

        Returns:
            The appended assistant message

        Raises:
            RuntimeError: If no turn was started
        """
        if not self.is_sending or self._in_flight is None:
            raise RuntimeError("finish_turn() called without a started turn")

        text = self._in_flight
        start = time.monotonic()
        try:
            reply = await self._client.send_message(text)
            self._messages.append(reply)
            self._state = IDLE
            self._debug("info", f"Reply appended ({len(reply.content)} chars)")
        except RequestError as e:
            reply = self._append_failure(e.message or FALLBACK_ERROR_MESSAGE)
        except Exception as e:
            self._debug("error", f"Unexpected failure: {type(e).__name__}: {e}")
            reply = self._append_failure(FALLBACK_ERROR_MESSAGE)
        finally:
            self._in_flight = None
            self._last_latency = time.monotonic() - start
            if self.is_sending:
                self._state = IDLE
            self._changed()
        return reply

    def _append_failure(self, message: str) -> ChatMessage:
        fallback = ChatMessage(id=new_local_id(), role=Role.ASSISTANT, content=message)
        self._messages.append(fallback)
        self._state = Errored(message)
        self._debug("warning", f"Turn failed: {message}")
        return fallback

    async def submit(self, text: str | None = None) -> ChatMessage | None:
        """Run one complete turn.

        Args:
            text: Message to send; defaults to the pending input

        Returns:
            The appended assistant message, or None if nothing was sent
        """
        if self.start_turn(self._pending_input if text is None else text) is None:
            return None
        return await self.finish_turn()
