from abc import ABC, abstractmethod
from typing import Any

from .models import ChatMessage


class ChatClient(ABC):
    """Abstract base class for chat backends.

    This module hides the design decision of how a user message reaches the
    assistant. Implementations must handle:
    - Transport setup
    - Request/response format conversion
    - Mapping every failure onto RequestError

    Supports async context manager protocol for proper resource cleanup:
        async with client:
            reply = await client.send_message("hello")
        # Automatically cleaned up
    """

    @abstractmethod
    async def send_message(self, text: str) -> ChatMessage:
        """Send one user message and return the assistant reply.

        Exactly one network attempt is made; there are no retries.

        Args:
            text: Trimmed, non-empty user message

        Returns:
            The assistant message as provided by the backend

        Raises:
            RequestError: If the request failed or no reply was returned
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""
        pass

    async def __aenter__(self) -> "ChatClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
