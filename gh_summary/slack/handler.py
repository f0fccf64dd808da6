"""One trigger invocation: parse the message, search, summarize, post."""

import logging
from collections.abc import Callable, Iterator
from datetime import datetime
from typing import Optional, Protocol

from ..ai.config import SummaryConfig
from ..ai.summarizer import IssueSummarizer, SummaryResult
from ..github_client.client import GitHubSearchError
from ..github_client.models import CommentRecord, GitHubIssue, IssueContext
from ..utils.date_parser import relative_date_to_absolute
from .emitter import ResultEmitter
from .trigger import TriggerRequest, parse_trigger

logger = logging.getLogger(__name__)

CORRECTION_MESSAGE = (
    "Please double check if there are errors in the owner and repo names "
    "provided in your message:\n{text}\n"
    "if yes, please correct the spelling and resend your instruction."
)

DEFAULTS_MESSAGE = "Summarizing {full_name} for the last {days} days (defaulted: {defaults})."


class IssueSource(Protocol):
    """Issue search and comment listing, as provided by GitHubClient."""

    def search_recent_issues(
        self, owner: str, repo: str, updated_after: datetime
    ) -> Iterator[GitHubIssue]: ...

    def list_comments(
        self, owner: str, repo: str, issue_number: int
    ) -> list[CommentRecord]: ...


class TriggerHandler:
    """Handles chat messages that may ask for issue summaries."""

    def __init__(
        self,
        config: SummaryConfig,
        github: IssueSource,
        summarizer: IssueSummarizer,
        send: Callable[[str, Optional[str]], object],
    ) -> None:
        self.config = config
        self.github = github
        self.summarizer = summarizer
        self.send = send

    async def summarize_issue(self, issue: IssueContext) -> SummaryResult:
        """Fetch an issue's comments and summarize the thread."""
        comments = self.github.list_comments(
            issue.owner, issue.repo, issue.issue_number
        )
        return await self.summarizer.summarize(issue, comments)

    async def handle(self, text: str, channel: Optional[str] = None) -> int:
        """Run one trigger invocation for a message.

        Args:
            text: Message text
            channel: Channel replies go to (defaults to the sender's default)

        Returns:
            Number of issue summaries posted
        """
        request = parse_trigger(
            text,
            trigger_word=self.config.trigger_word,
            default_owner=self.config.default_owner,
            default_repo=self.config.default_repo,
            default_days=self.config.default_days,
        )
        if request is None:
            return 0
        return await self.run(request, channel=channel, source_text=text)

    async def run(
        self,
        request: TriggerRequest,
        channel: Optional[str] = None,
        source_text: Optional[str] = None,
    ) -> int:
        """Search the requested repository and post summaries.

        Args:
            request: Parsed owner, repo and lookback
            channel: Channel replies go to
            source_text: Original message, quoted back if the search fails

        Returns:
            Number of issue summaries posted
        """

        def post(message: str) -> None:
            self.send(message, channel)

        logger.info(f"Trigger for {request.full_name}, last {request.days} day(s)")
        if request.applied_defaults:
            post(
                DEFAULTS_MESSAGE.format(
                    full_name=request.full_name,
                    days=request.days,
                    defaults=", ".join(request.applied_defaults),
                )
            )

        since = relative_date_to_absolute(request.days)
        try:
            found = self.github.search_recent_issues(
                request.owner, request.repo, since
            )
        except GitHubSearchError as e:
            logger.warning(f"Issue search failed: {e}")
            post(CORRECTION_MESSAGE.format(text=source_text or request.full_name))
            return 0

        issues = (
            IssueContext.from_issue(request.owner, request.repo, issue)
            for issue in found
        )
        emitter = ResultEmitter(
            send=post,
            summarize=self.summarize_issue,
            quota=self.config.issue_quota,
            cooldown_minutes=self.config.cooldown_minutes,
        )
        return await emitter.emit_all(issues)
