"""Chat session module for gqlchat.

Owns the conversation transcript and the request lifecycle of a single
outstanding chat turn, independent of any UI.
"""

from .chat_session import (
    DEFAULT_WELCOME_MESSAGE,
    FALLBACK_ERROR_MESSAGE,
    WELCOME_MESSAGE_ID,
    ChatSession,
    new_local_id,
)
from .models import Errored, Idle, Sending, SessionState

__all__ = [
    "ChatSession",
    "DEFAULT_WELCOME_MESSAGE",
    "Errored",
    "FALLBACK_ERROR_MESSAGE",
    "Idle",
    "Sending",
    "SessionState",
    "WELCOME_MESSAGE_ID",
    "new_local_id",
]
