"""Slack integration: trigger intake and summary delivery."""

from .client import SlackClient
from .config import SlackConfig
from .emitter import ResultEmitter
from .handler import TriggerHandler
from .trigger import TriggerRequest, parse_trigger

__all__ = [
    "SlackClient",
    "SlackConfig",
    "ResultEmitter",
    "TriggerHandler",
    "TriggerRequest",
    "parse_trigger",
]
