"""Slack bot that posts map-reduce summaries of recently active GitHub issues."""

__version__ = "0.1.0"
