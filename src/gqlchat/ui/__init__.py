"""Terminal UI module for gqlchat.

Provides a Textual-based chat view over a ChatSession.

Module structure (each module hides a design decision):
- widgets.py: Custom widgets (transcript, input bar, status, error banner, log)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palette
- formatting.py: Reply text cleanup
- config.py: Log levels and display strings
- app.py: Application orchestration (user interaction flow)
"""

from .app import GraphChatApp, run_textual_tui
from .config import LogLevel
from .widgets import (
    ChatHistoryWidget,
    ChatInputBar,
    DebugPanel,
    ErrorBanner,
    PromptArea,
    StatusPanel,
    TypingIndicator,
)

__all__ = [
    "ChatHistoryWidget",
    "ChatInputBar",
    "DebugPanel",
    "ErrorBanner",
    "GraphChatApp",
    "LogLevel",
    "PromptArea",
    "StatusPanel",
    "TypingIndicator",
    "run_textual_tui",
]
