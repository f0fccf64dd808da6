"""Per-invocation quota and ordered posting of issue summaries."""

import logging
from collections.abc import Awaitable, Callable, Iterable

from ..ai.summarizer import SummaryResult
from ..github_client.models import IssueContext

logger = logging.getLogger(__name__)

LIMIT_NOTICE = (
    "You've reached your limit of {quota} issues. "
    "Please wait {cooldown} minutes before running the command again."
)


class ResultEmitter:
    """Summarize and post issues in order until the quota runs out.

    Once the quota reaches zero a limit notice is posted and processing
    stops, whether or not further issues remain.
    """

    def __init__(
        self,
        send: Callable[[str], object],
        summarize: Callable[[IssueContext], Awaitable[SummaryResult]],
        quota: int = 10,
        cooldown_minutes: int = 10,
    ) -> None:
        """Initialize the emitter.

        Args:
            send: Delivers one message; its return value is ignored
            summarize: Produces the summary for one issue
            quota: Maximum summaries per invocation
            cooldown_minutes: Wait time quoted in the limit notice
        """
        if quota <= 0:
            raise ValueError(f"Issue quota must be positive, got {quota}")
        self.send = send
        self.summarize = summarize
        self.quota = quota
        self.cooldown_minutes = cooldown_minutes

    @property
    def limit_notice(self) -> str:
        return LIMIT_NOTICE.format(quota=self.quota, cooldown=self.cooldown_minutes)

    async def emit_all(self, issues: Iterable[IssueContext]) -> int:
        """Post a summary for each issue, honouring the quota.

        Returns:
            Number of summaries posted
        """
        remaining = self.quota
        emitted = 0
        for issue in issues:
            result = await self.summarize(issue)
            self.send(result.message)
            emitted += 1
            remaining -= 1
            logger.info(
                f"Posted summary for {issue.conversation_id} "
                f"({remaining} remaining in this run)"
            )

            if remaining <= 0:
                self.send(self.limit_notice)
                break

        return emitted
