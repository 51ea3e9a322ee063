"""Headless tests for the Textual chat view."""
import pytest
from textual.widgets import Button

from gqlchat.client import RequestError
from gqlchat.config import ChatConfig
from gqlchat.ui import (
    ChatHistoryWidget,
    DebugPanel,
    ErrorBanner,
    GraphChatApp,
    LogLevel,
    PromptArea,
    StatusPanel,
)
from gqlchat.ui.formatting import clean_latex, looks_like_code, truncate

CONFIG = ChatConfig(endpoint="https://chat.example.test/api/graphql?v=1")


async def _type(pilot, text: str) -> None:
    for char in text:
        await pilot.press("space" if char == " " else char)


class TestInitialRender:
    """Tests for the view before any submission."""

    @pytest.mark.asyncio
    async def test_welcome_message_and_disabled_send(self, make_stub_client):
        app = GraphChatApp(client=make_stub_client(), config=CONFIG)

        async with app.run_test() as pilot:
            await pilot.pause()

            history = app.query_one("#chat-history", ChatHistoryWidget)
            assert history.rendered_count == 1
            assert len(app.query(".assistant-message")) == 1
            assert not history.is_typing
            assert app.query_one("#send-btn", Button).disabled
            assert not app.query_one("#error-banner", ErrorBanner).display
            assert app.sub_title == "https://chat.example.test/api/graphql"

    @pytest.mark.asyncio
    async def test_log_panel_hidden_without_level(self, make_stub_client):
        app = GraphChatApp(client=make_stub_client(), config=CONFIG)

        async with app.run_test() as pilot:
            await pilot.pause()
            assert not app.query_one("#debug-panel", DebugPanel).display

    @pytest.mark.asyncio
    async def test_log_panel_shown_with_level(self, make_stub_client):
        config = ChatConfig(endpoint=CONFIG.endpoint, log_level="info")
        app = GraphChatApp(client=make_stub_client(), config=config)

        async with app.run_test() as pilot:
            await pilot.pause()
            panel = app.query_one("#debug-panel", DebugPanel)
            assert panel.display
            assert panel.entry_count == 1
            assert panel.border_subtitle == "Level: INFO"

            panel.add_entry("Session", "noise", LogLevel.DEBUG)
            panel.add_entry("GraphQL", "HTTP 500", LogLevel.WARNING)
            assert panel.entry_count == 2

            await pilot.press("ctrl+d")
            await pilot.pause()
            assert not panel.display
            assert panel.border_subtitle == "Hidden"

    def test_log_level_parse(self):
        assert LogLevel.parse("warning") is LogLevel.WARNING
        assert LogLevel.parse(" ERROR ") is LogLevel.ERROR
        assert LogLevel.parse("verbose") is LogLevel.DEBUG


class TestInput:
    """Tests for the keyboard contract and send button state."""

    @pytest.mark.asyncio
    async def test_typing_enables_send(self, make_stub_client):
        app = GraphChatApp(client=make_stub_client(), config=CONFIG)

        async with app.run_test() as pilot:
            await _type(pilot, "gm")
            await pilot.pause()

            assert app.session.pending_input == "gm"
            assert not app.query_one("#send-btn", Button).disabled

    @pytest.mark.asyncio
    async def test_whitespace_keeps_send_disabled(self, make_stub_client):
        client = make_stub_client()
        app = GraphChatApp(client=client, config=CONFIG)

        async with app.run_test() as pilot:
            await _type(pilot, "   ")
            await pilot.press("enter")
            await pilot.pause()

            assert app.query_one("#send-btn", Button).disabled
            assert len(app.session.messages) == 1
            assert client.calls == []

    @pytest.mark.asyncio
    async def test_shift_enter_inserts_newline(self, make_stub_client):
        client = make_stub_client()
        app = GraphChatApp(client=client, config=CONFIG)

        async with app.run_test() as pilot:
            await pilot.press("a", "shift+enter", "b")
            await pilot.pause()

            assert app.query_one("#chat-input", PromptArea).text == "a\nb"
            assert app.session.pending_input == "a\nb"
            assert len(app.session.messages) == 1
            assert client.calls == []

    @pytest.mark.asyncio
    async def test_ctrl_j_inserts_newline(self, make_stub_client):
        client = make_stub_client()
        app = GraphChatApp(client=client, config=CONFIG)

        async with app.run_test() as pilot:
            await pilot.press("a", "ctrl+j", "b")
            await pilot.pause()

            assert app.query_one("#chat-input", PromptArea).text == "a\nb"
            assert len(app.session.messages) == 1
            assert client.calls == []


class TestTurn:
    """Tests for a full chat turn through the view."""

    @pytest.mark.asyncio
    async def test_enter_submits_and_shows_typing(self, make_stub_client):
        client = make_stub_client(gated=True)
        app = GraphChatApp(client=client, config=CONFIG)

        async with app.run_test() as pilot:
            await _type(pilot, "hi")
            await pilot.press("enter")
            await pilot.pause()

            history = app.query_one("#chat-history", ChatHistoryWidget)
            assert app.session.is_sending
            assert len(app.session.messages) == 2
            assert history.is_typing
            assert len(app.query(".typing-indicator")) == 1
            assert app.query_one("#chat-input", PromptArea).text == ""
            assert app.query_one("#chat-input", PromptArea).disabled
            assert app.query_one("#send-btn", Button).disabled
            assert app.query_one("#status", StatusPanel).state_label == "sending"

            client.release()
            await app.workers.wait_for_complete()
            await pilot.pause()

            assert client.calls == ["hi"]
            assert len(app.session.messages) == 3
            assert not history.is_typing
            assert len(app.query(".typing-indicator")) == 0
            assert history.rendered_count == 3
            assert len(app.query(".user-message")) == 1
            assert app.query_one("#status", StatusPanel).state_label == "idle"
            assert not app.query_one("#chat-input", PromptArea).disabled

    @pytest.mark.asyncio
    async def test_transcript_follows_latest_message(self, make_stub_client):
        client = make_stub_client(gated=True)
        app = GraphChatApp(client=client, config=CONFIG)
        tall_question = "\n".join(f"line {i}" for i in range(60))

        async with app.run_test() as pilot:
            await pilot.pause()
            history = app.query_one("#chat-history", ChatHistoryWidget)

            app.query_one("#chat-input", PromptArea).text = tall_question
            await pilot.pause()
            await pilot.press("enter")
            await pilot.pause()
            await pilot.pause()

            assert history.is_typing
            assert history.max_scroll_y > 0
            assert history.scroll_y == history.max_scroll_y

            client.release()
            await app.workers.wait_for_complete()
            await pilot.pause()
            await pilot.pause()

            assert not history.is_typing
            assert history.scroll_y == history.max_scroll_y

    @pytest.mark.asyncio
    async def test_send_button_submits(self, make_stub_client):
        client = make_stub_client()
        app = GraphChatApp(client=client, config=CONFIG)

        async with app.run_test() as pilot:
            await _type(pilot, "hello there")
            await pilot.pause()
            await pilot.click("#send-btn")
            await app.workers.wait_for_complete()
            await pilot.pause()

            assert client.calls == ["hello there"]
            assert len(app.session.messages) == 3

    @pytest.mark.asyncio
    async def test_failure_shows_banner_and_transcript_entry(self, make_stub_client):
        client = make_stub_client(RequestError("boom", status_code=500))
        app = GraphChatApp(client=client, config=CONFIG)

        async with app.run_test() as pilot:
            await _type(pilot, "hi")
            await pilot.press("enter")
            await app.workers.wait_for_complete()
            await pilot.pause()

            banner = app.query_one("#error-banner", ErrorBanner)
            assert banner.display
            assert banner.message == "boom"
            assert app.session.messages[-1].content == "boom"
            assert app.query_one("#status", StatusPanel).state_label == "error"
            assert not app.session.is_sending

    @pytest.mark.asyncio
    async def test_submitted_text_joins_input_history(self, make_stub_client):
        app = GraphChatApp(client=make_stub_client(), config=CONFIG)

        async with app.run_test() as pilot:
            await _type(pilot, "first")
            await pilot.press("enter")
            await app.workers.wait_for_complete()
            await pilot.pause()

            prompt = app.query_one("#chat-input", PromptArea)
            assert prompt.input_history == ["first"]

            prompt.recall(-1)
            assert prompt.text == "first"
            prompt.recall(1)
            assert prompt.text == ""


class TestFormatting:
    """Tests for reply formatting helpers."""

    def test_clean_latex(self):
        assert clean_latex(r"\(x \times y\)") == "x x y"
        assert clean_latex(r"$\frac{a}{b}$") == "(a)/(b)"

    def test_clean_latex_keeps_prices(self):
        assert clean_latex("Swap fee is $5 and gas is $10.") == "Swap fee is $5 and gas is $10."
        assert clean_latex("Pool holds $1,200 and $3.5k in fees") == "Pool holds $1,200 and $3.5k in fees"
        assert clean_latex("Costs $5, where $x$ is the fee") == "Costs $5, where x is the fee"

    def test_looks_like_code(self):
        assert looks_like_code("def f():\n    return 1")
        assert not looks_like_code("def f(): return 1")
        assert not looks_like_code("```python\ndef f():\n    pass\n```")

    def test_truncate(self):
        assert truncate("abc", 5) == "abc"
        assert truncate("abcdef", 3) == "abc..."
