"""Main Textual TUI application.

Wires the chat session to the widgets: every session change re-syncs the
transcript, status line, error banner and input bar.
"""

import asyncio
import contextlib

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header, TextArea

from ..client import ChatClient, Role
from ..config import ChatConfig
from ..session import ChatSession
from .config import LogLevel
from .styles import APP_CSS
from .themes import GQLCHAT_MOCHA, THEME_NAME
from .widgets import (
    ChatHistoryWidget,
    ChatInputBar,
    DebugPanel,
    ErrorBanner,
    StatusPanel,
)


class GraphChatApp(App):
    """Textual TUI for chatting with a GraphQL assistant endpoint."""

    CSS = APP_CSS
    TITLE = "GraphQL Chat"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", priority=True),
        Binding("ctrl+l", "clear_log", "Clear Log", priority=True),
        Binding("ctrl+r", "copy_last_response", "Copy Response", priority=True),
        Binding("ctrl+d", "toggle_debug", "Log", priority=True),
    ]

    def __init__(self, client: ChatClient, config: ChatConfig | None = None) -> None:
        super().__init__()
        self._config = config or ChatConfig()
        self._client = client
        self._session = ChatSession(client, welcome_message=self._config.welcome_message)

    @property
    def session(self) -> ChatSession:
        return self._session

    @property
    def client(self) -> ChatClient:
        return self._client

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield ChatHistoryWidget(id="chat-history")
        yield DebugPanel(id="debug-panel")

        with Vertical(id="bottom-bar"):
            yield StatusPanel(id="status")
            yield ErrorBanner(id="error-banner")
            yield ChatInputBar(id="chat-input-bar")

        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(GQLCHAT_MOCHA)
        self.theme = THEME_NAME
        self.sub_title = self._config.endpoint_label

        if self._config.log_level is not None:
            log_panel = self.query_one("#debug-panel", DebugPanel)
            log_panel.threshold = LogLevel.parse(self._config.log_level)
            log_panel.set_visible(True)
            log_panel.add_entry("TUI", f"Log panel enabled at {log_panel.threshold.name}", LogLevel.INFO)

        self._session.set_debug_callback(self._route_debug)
        self._session.set_change_callback(self._on_session_changed)
        self._refresh_view()
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def _route_debug(self, level: str, component: str, message: str) -> None:
        """Route trace messages to the log panel."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        log_panel.add_entry(component, message, LogLevel.parse(level))

    def _on_session_changed(self, session: ChatSession) -> None:
        self._refresh_view()

    def _refresh_view(self) -> None:
        session = self._session
        self.query_one("#chat-history", ChatHistoryWidget).sync(
            session.messages, session.is_sending
        )
        self.query_one("#status", StatusPanel).update_status(
            sending=session.is_sending,
            errored=session.last_error is not None,
            message_count=len(session.messages),
            latency=session.last_latency,
        )
        self.query_one("#error-banner", ErrorBanner).show_error(session.last_error)
        self.query_one("#chat-input-bar", ChatInputBar).set_state(
            sending=session.is_sending,
            can_submit=session.can_submit,
        )

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        """Mirror the input text into the session's pending input."""
        self._session.pending_input = event.text_area.text
        self.query_one("#chat-input-bar", ChatInputBar).set_state(
            sending=self._session.is_sending,
            can_submit=self._session.can_submit,
        )

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Handle user input submission."""
        user_message = self._session.start_turn(event.value)
        if user_message is None:
            return

        self.query_one("#chat-input-bar", ChatInputBar).commit(user_message.content)
        self._send_turn()

    @work(group="chat-turn")
    async def _send_turn(self) -> None:
        """Await the in-flight turn as a background async worker."""
        await self._session.finish_turn()
        if self._session.last_error is not None:
            self.notify(self._session.last_error[:80], severity="error", timeout=5)

    def action_clear_log(self) -> None:
        """Clear the log panel."""
        self.query_one("#debug-panel", DebugPanel).clear()
        self.notify("Log cleared", timeout=2)

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)

    def action_copy_last_response(self) -> None:
        """Copy last assistant response to clipboard."""
        for message in reversed(self._session.messages):
            if message.role == Role.ASSISTANT:
                self.copy_to_clipboard(message.content)
                self.notify("Response copied")
                return
        self.notify("No response to copy", severity="warning")


async def run_textual_tui(client: ChatClient, config: ChatConfig) -> None:
    """Run the Textual TUI and close the client afterwards.

    Args:
        client: Chat client the session sends through
        config: Resolved configuration
    """
    app = GraphChatApp(client=client, config=config)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
    finally:
        with contextlib.suppress(RuntimeError):
            await client.close()
