"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Transcript rendering, typing placeholder and scrolling
- Enter/Shift+Enter handling and input history
- Status line and error banner formatting
- Log rendering with level filtering
"""

from collections.abc import Sequence
from datetime import datetime

from rich.text import Text
from textual import events
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click
from textual.message import Message
from textual.widgets import Button, Markdown, RichLog, Static, TextArea

from ..client import ChatMessage, Role
from .config import (
    ASSISTANT_LABEL,
    INPUT_HISTORY_MAX_SIZE,
    INPUT_PLACEHOLDER,
    LOG_MAX_MESSAGE_LENGTH,
    LOG_TIMESTAMP_FORMAT,
    SEND_LABEL,
    SENDING_LABEL,
    TYPING_PLACEHOLDER,
    USER_LABEL,
    LogLevel,
)
from .formatting import clean_latex, looks_like_code, truncate


class ClickableMessage(Vertical):
    """A chat message container that copies content when clicked."""

    def __init__(self, content: str, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._content = content

    def on_click(self, event: Click) -> None:
        """Copy message content to the clipboard (OSC 52)."""
        event.stop()
        self.app.copy_to_clipboard(self._content)
        self.app.notify("Copied to clipboard", timeout=2)


class TypingIndicator(Vertical):
    """Placeholder shown after the last message while a reply is pending.

    Never part of the conversation state.
    """

    def compose(self):
        yield Static(f"< {ASSISTANT_LABEL}", classes="message-header")
        yield Static(TYPING_PLACEHOLDER, classes="message-content")


class ChatHistoryWidget(VerticalScroll):
    """Scrollable transcript mirroring the session's messages."""

    BORDER_TITLE = "Chat"
    BORDER_SUBTITLE = "Conversation history"
    ALLOW_SELECT = True

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._rendered = 0
        self._typing: TypingIndicator | None = None

    def on_mount(self) -> None:
        # Stay pinned to the newest message while content grows
        self.anchor()

    @property
    def rendered_count(self) -> int:
        """Number of real messages mounted."""
        return self._rendered

    @property
    def is_typing(self) -> bool:
        return self._typing is not None

    def sync(self, messages: Sequence[ChatMessage], sending: bool) -> None:
        """Bring the display in line with the transcript.

        The transcript is append-only, so only the tail past what is already
        mounted gets rendered.
        """
        if self._typing is not None and not sending:
            self._typing.remove()
            self._typing = None

        for msg in messages[self._rendered:]:
            self.mount(self._build_message(msg), before=self._typing)
        self._rendered = len(messages)

        if sending and self._typing is None:
            self._typing = TypingIndicator(classes="chat-message assistant-message typing-indicator")
            self.mount(self._typing)

        self.border_subtitle = f"{self._rendered} messages"
        self.call_after_refresh(self.scroll_end, animate=False)

    def _build_message(self, msg: ChatMessage) -> ClickableMessage:
        if msg.role == Role.USER:
            header_text = f"> {USER_LABEL}"
            border_class = "user-message"
        else:
            header_text = f"< {ASSISTANT_LABEL}"
            border_class = "assistant-message"

        container = ClickableMessage(content=msg.content, classes=f"chat-message {border_class}")
        container.compose_add_child(Static(header_text, classes="message-header"))

        if msg.role == Role.ASSISTANT:
            cleaned = clean_latex(msg.content)
            if looks_like_code(cleaned):
                cleaned = f"```\n{cleaned.strip()}\n```"
            container.compose_add_child(Markdown(cleaned, classes="message-content"))
        else:
            # User text is shown verbatim, never parsed as markup
            container.compose_add_child(Static(Text(msg.content), classes="message-content"))
        return container


class PromptArea(TextArea):
    """Multi-line input where Enter submits.

    Shift+Enter inserts a newline. Terminals that cannot report Shift+Enter
    send Ctrl+J for the same purpose. Up at the start and Down at the end of
    the text walk through previously submitted messages.
    """

    class SubmitRequested(Message):
        """Posted when Enter is pressed without a modifier."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._input_history: list[str] = []
        self._recall_index: int = -1

    def _on_key(self, event: events.Key) -> None:
        if event.key == "enter":
            event.prevent_default()
            event.stop()
            self.post_message(self.SubmitRequested())
        elif event.key in ("shift+enter", "ctrl+j"):
            event.prevent_default()
            event.stop()
            self.insert("\n")
        elif event.key == "up" and self.cursor_location == (0, 0) and self._input_history:
            event.prevent_default()
            event.stop()
            self.recall(-1)
        elif event.key == "down" and self._is_cursor_at_end() and self._recall_index != -1:
            event.prevent_default()
            event.stop()
            self.recall(1)

    def _is_cursor_at_end(self) -> bool:
        lines = self.text.split("\n")
        return self.cursor_location == (len(lines) - 1, len(lines[-1]))

    @property
    def input_history(self) -> list[str]:
        return list(self._input_history)

    def add_to_history(self, value: str) -> None:
        """Remember a submitted message, skipping immediate repeats."""
        if value and (not self._input_history or self._input_history[-1] != value):
            self._input_history.append(value)
            del self._input_history[:-INPUT_HISTORY_MAX_SIZE]
        self._recall_index = -1

    def recall(self, direction: int) -> None:
        """Step through history; -1 is older, 1 is newer."""
        if not self._input_history:
            return
        if direction < 0:
            if self._recall_index == -1:
                self._recall_index = len(self._input_history) - 1
            elif self._recall_index > 0:
                self._recall_index -= 1
        else:
            if self._recall_index == -1:
                return
            if self._recall_index < len(self._input_history) - 1:
                self._recall_index += 1
            else:
                self._recall_index = -1
                self.text = ""
                return
        self.text = self._input_history[self._recall_index]
        self.move_cursor(self.document.end)


class ChatInputBar(Horizontal):
    """Chat input bar with PromptArea and Send button."""

    class Submitted(Message):
        """Message sent when user submits input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def compose(self):
        text_area = PromptArea(
            id="chat-input",
            show_line_numbers=False,
            placeholder=INPUT_PLACEHOLDER,
        )
        text_area.cursor_blink = False
        yield text_area
        yield Button(SEND_LABEL, id="send-btn", variant="success", disabled=True).with_tooltip(
            "Send message (Enter)"
        )

    def on_mount(self) -> None:
        text_area = self.query_one("#chat-input", PromptArea)
        text_area.highlight_cursor_line = False

    @property
    def text(self) -> str:
        return self.query_one("#chat-input", PromptArea).text

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self._submit()

    def on_prompt_area_submit_requested(self, event: PromptArea.SubmitRequested) -> None:
        event.stop()
        self._submit()

    def _submit(self) -> None:
        self.post_message(self.Submitted(self.text))

    def commit(self, value: str) -> None:
        """Record an accepted submission and clear the input."""
        text_area = self.query_one("#chat-input", PromptArea)
        text_area.add_to_history(value)
        text_area.text = ""

    def set_state(self, sending: bool, can_submit: bool) -> None:
        """Update enabled state of the input and the send button."""
        text_area = self.query_one("#chat-input", PromptArea)
        button = self.query_one("#send-btn", Button)
        was_disabled = text_area.disabled
        text_area.disabled = sending
        button.disabled = sending or not can_submit
        button.label = SENDING_LABEL if sending else SEND_LABEL
        if was_disabled and not sending:
            text_area.focus()

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", PromptArea).focus()


class StatusPanel(Static):
    """One-line status: request state, transcript size, last round trip."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._sending = False
        self._errored = False
        self._message_count = 0
        self._latency: float | None = None

    def on_mount(self) -> None:
        self._update_display()

    def update_status(
        self,
        sending: bool,
        errored: bool,
        message_count: int,
        latency: float | None = None,
    ) -> None:
        """Update the status display.

        Args:
            sending: A request is in flight
            errored: The last request failed
            message_count: Messages in the transcript
            latency: Round-trip time of the last turn in seconds
        """
        self._sending = sending
        self._errored = errored
        self._message_count = message_count
        self._latency = latency
        self._update_display()

    @property
    def state_label(self) -> str:
        if self._sending:
            return "sending"
        if self._errored:
            return "error"
        return "idle"

    def _update_display(self) -> None:
        color = {"sending": "yellow", "error": "red"}.get(self.state_label, "green")
        parts = [
            f"[bold {color}]●[/] {self.state_label}",
            f"[bold cyan]Messages:[/] {self._message_count}",
        ]
        if self._latency is not None:
            parts.append(f"[bold magenta]Last reply:[/] {self._latency:.2f}s")
        self.update("  ".join(parts))


class ErrorBanner(Static):
    """Banner carrying the last request failure; hidden when there is none."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._message: str | None = None

    def on_mount(self) -> None:
        self.display = self._message is not None

    @property
    def message(self) -> str | None:
        return self._message

    def show_error(self, message: str | None) -> None:
        """Show message, or hide the banner for None."""
        self._message = message
        if message is None:
            self.update("")
            self.display = False
        else:
            self.update(Text(f"⚠ {message}"))
            self.display = True


class DebugPanel(RichLog):
    """Trace log for the session, the GraphQL client and the TUI.

    Entries below the threshold are dropped. Hidden until --log-level is
    given or Ctrl+D is pressed.
    """

    BORDER_TITLE = "Log"

    LEVEL_STYLES = {
        LogLevel.DEBUG: "dim white",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    COMPONENT_STYLES = {
        "TUI": "cyan",
        "Session": "bright_green",
        "GraphQL": "magenta",
    }

    def __init__(self, *args, threshold: LogLevel = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(*args, markup=False, highlight=False, auto_scroll=True, wrap=False, **kwargs)
        self.threshold = threshold
        self._entry_count = 0

    @property
    def entry_count(self) -> int:
        """Entries written since the last clear."""
        return self._entry_count

    def on_mount(self) -> None:
        self.set_visible(False)

    def add_entry(self, component: str, message: str, level: LogLevel = LogLevel.DEBUG) -> None:
        """Write one timestamped line if level passes the threshold."""
        if level < self.threshold:
            return

        self.write(
            Text.assemble(
                (datetime.now().strftime(LOG_TIMESTAMP_FORMAT), "dim"),
                " ",
                (f"{level.name:<7}", self.LEVEL_STYLES[level]),
                (f"[{component}]", self.COMPONENT_STYLES.get(component, "white")),
                " ",
                truncate(message, LOG_MAX_MESSAGE_LENGTH),
            )
        )
        self._entry_count += 1

    def clear(self) -> "DebugPanel":
        super().clear()
        self._entry_count = 0
        return self

    def set_visible(self, visible: bool) -> None:
        self.display = visible
        self.border_subtitle = f"Level: {self.threshold.name}" if visible else "Hidden"

    def toggle(self) -> bool:
        """Flip visibility and return the new state."""
        self.set_visible(not self.display)
        return self.display
