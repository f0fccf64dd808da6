"""Tests for the Socket Mode listener."""

import asyncio
import os
import threading
from unittest.mock import AsyncMock, Mock, patch

import pytest

from gh_summary.slack.config import SlackConfig
from gh_summary.slack.listener import SlackTriggerListener

TOKENS = {"SLACK_BOT_TOKEN": "xoxb-1", "SLACK_APP_TOKEN": "xapp-1"}


@pytest.fixture
def handler() -> Mock:
    handler = Mock()
    handler.handle = AsyncMock(return_value=1)
    return handler


def make_listener(handler: Mock, **env: str) -> SlackTriggerListener:
    with patch.dict(os.environ, {**TOKENS, **env}, clear=True):
        config = SlackConfig()
    return SlackTriggerListener(config, handler)


class TestSlackTriggerListener:
    """Test SlackTriggerListener."""

    def test_requires_tokens(self, handler) -> None:
        """Construction fails without Socket Mode credentials."""
        with patch.dict(os.environ, {}, clear=True):
            config = SlackConfig()
        with pytest.raises(ValueError, match="SLACK_APP_TOKEN"):
            SlackTriggerListener(config, handler)

    @pytest.mark.parametrize(
        "event",
        [
            {"text": "flows summarize", "bot_id": "B1", "channel": "C1"},
            {"text": "flows summarize", "subtype": "message_changed", "channel": "C1"},
            {"text": "", "channel": "C1"},
            {"channel": "C1"},
        ],
    )
    def test_ignored_events(self, handler, event) -> None:
        """Bot posts, edits and empty messages are skipped."""
        listener = make_listener(handler)
        assert not listener.should_handle(event)

        listener.on_message(event)
        handler.handle.assert_not_called()

    def test_channel_filter(self, handler) -> None:
        """With a channel id set, other channels are ignored."""
        listener = make_listener(handler, SLACK_CHANNEL_ID="C1")
        assert listener.should_handle({"text": "hi", "channel": "C1"})
        assert not listener.should_handle({"text": "hi", "channel": "C2"})

    def test_message_forwarded_to_handler(self, handler) -> None:
        """User messages are handled with their channel."""
        listener = make_listener(handler)

        listener.on_message({"text": "flows summarize octo/widgets", "channel": "C9"})

        handler.handle.assert_awaited_once_with("flows summarize octo/widgets", "C9")

    def test_handler_failure_is_contained(self, handler) -> None:
        """A failing invocation does not break the event loop of the listener."""
        handler.handle.side_effect = RuntimeError("boom")
        listener = make_listener(handler)

        listener.on_message({"text": "flows summarize", "channel": "C1"})

        handler.handle.assert_awaited_once()

    def test_invocations_run_one_at_a_time(self, handler) -> None:
        """Messages delivered on parallel threads are handled sequentially."""
        active = 0
        peak = 0
        guard = threading.Lock()

        async def slow_handle(text, channel):
            nonlocal active, peak
            with guard:
                active += 1
                peak = max(peak, active)
            await asyncio.sleep(0.05)
            with guard:
                active -= 1
            return 1

        handler.handle.side_effect = slow_handle
        listener = make_listener(handler)
        threads = [
            threading.Thread(
                target=listener.on_message,
                args=({"text": f"flows summarize octo/r{n}", "channel": "C1"},),
            )
            for n in range(4)
        ]

        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert handler.handle.await_count == 4
        assert peak == 1

    @patch("gh_summary.slack.listener.SocketModeHandler")
    @patch("gh_summary.slack.listener.App")
    def test_start_and_stop(self, mock_app, mock_socket_handler, handler) -> None:
        """Start connects with the app token and stop closes the socket."""
        listener = make_listener(handler)

        listener.start()
        mock_app.assert_called_once_with(token="xoxb-1")
        mock_socket_handler.assert_called_once_with(mock_app.return_value, "xapp-1")
        mock_socket_handler.return_value.start.assert_called_once()

        listener.stop()
        mock_socket_handler.return_value.close.assert_called_once()

    def test_stop_before_start(self, handler) -> None:
        """Stopping an idle listener is a no-op."""
        make_listener(handler).stop()
