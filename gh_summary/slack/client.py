"""Posting of summary messages to Slack."""

import logging
from typing import Optional

from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError

from .config import SlackConfig

logger = logging.getLogger(__name__)


class SlackClient:
    """Sends plain-text bot messages to a channel."""

    def __init__(self, config: Optional[SlackConfig] = None) -> None:
        self.config = config or SlackConfig()
        self._web_client: Optional[WebClient] = None

    @property
    def web_client(self) -> WebClient:
        """WebClient authenticated with the bot token, created on first use."""
        if self._web_client is None:
            self.config.validate()
            self._web_client = WebClient(token=self.config.bot_token)
        return self._web_client

    def send_message(self, text: str, channel: Optional[str] = None) -> bool:
        """
        Post a message to a channel.

        Delivery failures are logged and reported through the return value so
        that one lost message never stops the ones after it.

        Args:
            text: Message text
            channel: Channel name or ID (defaults to the configured channel)

        Returns:
            Whether Slack accepted the message
        """
        target = channel or self.config.channel
        try:
            response = self.web_client.chat_postMessage(channel=target, text=text)
        except SlackApiError as e:
            logger.error(f"Slack rejected message for {target}: {e}")
            return False
        except Exception as e:
            logger.error(f"Could not reach Slack to post to {target}: {e}")
            return False

        logger.debug(f"Posted {len(text)} characters to {target}")
        return bool(response["ok"])
