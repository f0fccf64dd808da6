"""Slack Socket Mode listener that feeds channel messages to the trigger handler."""

import asyncio
import logging
import threading
from typing import Any

from slack_bolt import App
from slack_bolt.adapter.socket_mode import SocketModeHandler

from .config import SlackConfig
from .handler import TriggerHandler

logger = logging.getLogger(__name__)


class SlackTriggerListener:
    """Listens for channel messages via Slack Bolt's Socket Mode.

    Bolt dispatches message events on a thread pool, so handlers can be
    called concurrently. Trigger invocations share the completion client's
    conversation state and are therefore run one at a time.
    """

    def __init__(self, config: SlackConfig, handler: TriggerHandler) -> None:
        """Initialize the listener.

        Args:
            config: Slack credentials and channel settings
            handler: Runs a trigger invocation for each message
        """
        config.validate_listener()
        self.config = config
        self.handler = handler
        self._socket_handler: SocketModeHandler | None = None
        self._run_lock = threading.Lock()

    def should_handle(self, event: dict[str, Any]) -> bool:
        """Decide whether an incoming message event is a candidate trigger."""
        # Bot posts (including our own summaries) and edits are ignored
        if event.get("bot_id") or event.get("subtype"):
            return False
        if self.config.channel_id and event.get("channel") != self.config.channel_id:
            return False
        return bool(event.get("text"))

    def on_message(self, event: dict[str, Any]) -> None:
        if not self.should_handle(event):
            return
        channel = event.get("channel")
        try:
            with self._run_lock:
                asyncio.run(self.handler.handle(event["text"], channel))
        except Exception as e:
            logger.error(f"Trigger handling failed for message in {channel}: {e}")

    def build_app(self) -> App:
        app = App(token=self.config.bot_token)

        @app.event("message")
        def handle_message(event: dict[str, Any]) -> None:
            self.on_message(event)

        return app

    def start(self) -> None:
        """Connect and block until the process is stopped."""
        self._socket_handler = SocketModeHandler(self.build_app(), self.config.app_token)
        logger.info("Listening for Slack messages via Socket Mode")
        self._socket_handler.start()

    def stop(self) -> None:
        if self._socket_handler is not None:
            self._socket_handler.close()
