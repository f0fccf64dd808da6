"""Slack credentials and channel settings."""

import os
from typing import Optional

DEFAULT_CHANNEL = "#test-flow"


class SlackConfig:
    """Slack settings read from the environment.

    ``SLACK_BOT_TOKEN`` posts messages, ``SLACK_APP_TOKEN`` opens the Socket
    Mode connection, ``SLACK_CHANNEL`` is where replies go when no channel
    is given and ``SLACK_CHANNEL_ID`` restricts which channel is listened to.
    """

    def __init__(self) -> None:
        self.bot_token: Optional[str] = os.getenv("SLACK_BOT_TOKEN")
        self.app_token: Optional[str] = os.getenv("SLACK_APP_TOKEN")
        self.channel: str = os.getenv("SLACK_CHANNEL", DEFAULT_CHANNEL)
        self.channel_id: Optional[str] = os.getenv("SLACK_CHANNEL_ID") or None

    def validate(self) -> None:
        """Raise ValueError unless messages can be posted."""
        if not self.bot_token:
            raise ValueError(
                "SLACK_BOT_TOKEN environment variable is required for Slack messages"
            )

    def validate_listener(self) -> None:
        """Raise ValueError unless Socket Mode events can be received."""
        missing = [
            name
            for name, value in (
                ("SLACK_BOT_TOKEN", self.bot_token),
                ("SLACK_APP_TOKEN", self.app_token),
            )
            if not value
        ]
        if missing:
            raise ValueError(
                f"Environment variables required for the Slack listener: {', '.join(missing)}"
            )
