"""CLI commands that run the summary bot."""

import asyncio
import logging
from collections.abc import Callable
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel

from ..ai.completion import AgentCompletionClient
from ..ai.config import SummaryConfig
from ..ai.summarizer import IssueSummarizer
from ..ai.tokenizer import measurer_factory
from ..github_client.client import GitHubClient
from ..slack.client import SlackClient
from ..slack.config import SlackConfig
from ..slack.handler import TriggerHandler
from ..slack.trigger import TriggerRequest
from .options import (
    CHANNEL_OPTION,
    LAST_DAYS_OPTION,
    MODEL_OPTION,
    ORG_OPTION,
    POST_OPTION,
    REPO_OPTION,
    TOKEN_BUDGET_OPTION,
    TOKEN_OPTION,
    VERBOSE_OPTION,
)

console = Console()


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(name)s - %(levelname)s - %(message)s",
        force=True,
    )


def build_handler(
    config: SummaryConfig,
    send: Callable[[str, Optional[str]], object],
    token: Optional[str] = None,
) -> TriggerHandler:
    """Wire the GitHub, tokenizer and model clients into a trigger handler."""
    github = GitHubClient(token=token)
    summarizer = IssueSummarizer(
        completion=AgentCompletionClient(max_retries=config.max_retries),
        measurer_factory=measurer_factory(config.tokenizer),
        config=config,
    )
    return TriggerHandler(config=config, github=github, summarizer=summarizer, send=send)


def listen(
    token: Optional[str] = TOKEN_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Listen to Slack and summarize issues on request.

    Messages of the form "<trigger word> owner/repo [days]" post a summary
    of each open issue updated in the last N days.
    """
    from ..slack.listener import SlackTriggerListener

    configure_logging(verbose)
    slack_config = SlackConfig()
    try:
        config = SummaryConfig.from_env()
        slack = SlackClient(slack_config)
        handler = build_handler(config, slack.send_message, token=token)
        listener = SlackTriggerListener(slack_config, handler)
    except ValueError as e:
        console.print(f"❌ {e}")
        raise typer.Exit(1)

    console.print(
        f"👂 Listening for '[cyan]{config.trigger_word}[/cyan] owner/repo \\[days]'"
    )
    try:
        listener.start()
    except KeyboardInterrupt:
        listener.stop()
        console.print("Stopped.")


def summarize(
    org: str = ORG_OPTION,
    repo: str = REPO_OPTION,
    last_days: Optional[int] = LAST_DAYS_OPTION,
    post: bool = POST_OPTION,
    channel: Optional[str] = CHANNEL_OPTION,
    model: Optional[str] = MODEL_OPTION,
    token_budget: Optional[int] = TOKEN_BUDGET_OPTION,
    token: Optional[str] = TOKEN_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Summarize recently updated open issues of one repository.

    Examples:
        gh-summary summarize --org octo --repo hello --last-days 3
        gh-summary summarize -o octo -r hello --post --channel "#triage"
    """
    configure_logging(verbose)

    if last_days is not None and last_days <= 0:
        console.print("❌ --last-days must be a positive integer")
        raise typer.Exit(1)

    try:
        config = SummaryConfig.from_env(model=model, token_budget=token_budget)
        if post:
            slack = SlackClient(SlackConfig())
            slack.config.validate()
            send = slack.send_message
        else:

            def send(message: str, channel: Optional[str] = None) -> None:
                console.print(Panel(message))

        handler = build_handler(config, send, token=token)
    except ValueError as e:
        console.print(f"❌ {e}")
        raise typer.Exit(1)

    request = TriggerRequest(
        owner=org, repo=repo, days=last_days or config.default_days
    )
    console.print(
        f"🔍 Summarizing issues in {request.full_name} "
        f"updated in the last {request.days} day(s)"
    )
    emitted = asyncio.run(handler.run(request, channel=channel))
    console.print(f"✅ Posted {emitted} summary(ies)")
