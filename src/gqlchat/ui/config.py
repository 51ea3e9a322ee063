"""UI configuration constants.

Centralizes magic numbers and user-facing strings for the UI module.
"""

from enum import IntEnum


class LogLevel(IntEnum):
    """Log panel threshold; a lower value lets more entries through."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    @classmethod
    def parse(cls, value: str) -> "LogLevel":
        """Level for a name such as 'info'. Unknown names mean DEBUG."""
        return cls.__members__.get(value.strip().upper(), cls.DEBUG)


# Input history configuration
INPUT_HISTORY_MAX_SIZE = 100  # Maximum entries in input history

# Log panel configuration
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
LOG_MAX_MESSAGE_LENGTH = 500  # Characters before truncating log messages

# Chat display strings
USER_LABEL = "You"
ASSISTANT_LABEL = "Assistant"
TYPING_PLACEHOLDER = "Fetching reply over GraphQL..."
INPUT_PLACEHOLDER = "Ask about DeFi or Cloudflare Workers. Enter sends, Shift+Enter adds a new line."
SEND_LABEL = "Send"
SENDING_LABEL = "Sending..."
