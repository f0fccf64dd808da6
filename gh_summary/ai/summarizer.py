"""Map-reduce summarization of a single GitHub issue thread."""

import logging
from collections.abc import Callable, Iterable

from pydantic import BaseModel, ConfigDict

from ..github_client.models import CommentRecord, IssueContext
from .chunking import Chunk, plan
from .completion import ChatOptions, CompletionClient
from .config import SummaryConfig
from .corpus import assemble
from .prompts import DIRECT_PROMPT, MAP_PROMPT, REDUCE_PROMPT, SYSTEM_PROMPT
from .tokenizer import TextMeasurer

logger = logging.getLogger(__name__)

INTERIM_SEPARATOR = "\n\n"


class SummaryOutcome(BaseModel):
    """Text from one summarization request, or the reason there is none."""

    model_config = ConfigDict(frozen=True)

    text: str = ""
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failed(cls, reason: str) -> "SummaryOutcome":
        return cls(text="", error=reason)


class SummaryResult(BaseModel):
    """Final summary of one issue, ready to post."""

    model_config = ConfigDict(frozen=True)

    issue_url: str
    summary_text: str

    @property
    def message(self) -> str:
        return f"Issue Summary:\n{self.summary_text}\n{self.issue_url}"


class IssueSummarizer:
    """Token-budgeted map-reduce summarizer.

    A corpus that fits ``config.token_budget`` goes straight to a single
    summary request. A larger one is cut into token windows that are each
    summarized (map) and the interim summaries are then folded into one
    final summary (reduce). Request failures degrade to missing text and
    are logged; ``summarize`` never raises for them.
    """

    def __init__(
        self,
        completion: CompletionClient,
        measurer_factory: Callable[[], TextMeasurer],
        config: SummaryConfig | None = None,
    ) -> None:
        self.completion = completion
        self.measurer_factory = measurer_factory
        self.config = config or SummaryConfig()
        self.options = ChatOptions(
            model=self.config.model,
            system_prompt=SYSTEM_PROMPT,
            restart=self.config.restart_conversation,
        )

    async def _request(self, conversation_id: str, prompt: str) -> SummaryOutcome:
        try:
            text = await self.completion.complete(conversation_id, prompt, self.options)
        except Exception as e:
            return SummaryOutcome.failed(f"{type(e).__name__}: {e}")
        return SummaryOutcome(text=text)

    async def map_chunk(
        self, issue_title: str, chunk_text: str, conversation_id: str
    ) -> SummaryOutcome:
        """Summarize one chunk of the corpus into an interim summary."""
        prompt = MAP_PROMPT.format(title=issue_title, chunk_text=chunk_text)
        return await self._request(conversation_id, prompt)

    async def map_chunks(
        self, issue: IssueContext, chunks: list[Chunk], measurer: TextMeasurer
    ) -> str:
        """Run the map stage over every chunk in order.

        Returns:
            Interim summaries of the chunks that succeeded, in chunk order
        """
        interim = []
        for chunk in chunks:
            chunk_text = measurer.decode(list(chunk.tokens))
            outcome = await self.map_chunk(
                issue.title, chunk_text, issue.conversation_id
            )
            if not outcome.ok:
                logger.warning(
                    f"Skipping chunk {chunk.index + 1}/{len(chunks)} of "
                    f"{issue.conversation_id}: {outcome.error}"
                )
                continue
            interim.append(outcome.text)
        return INTERIM_SEPARATOR.join(interim)

    async def reduce(
        self, issue: IssueContext, text: str, split: bool
    ) -> SummaryOutcome:
        """Produce the final summary.

        Args:
            issue: Issue being summarized
            text: Joined interim summaries when ``split``, else the decoded corpus
            split: Whether the corpus went through the map stage
        """
        if split:
            prompt = REDUCE_PROMPT.format(
                creator_login=issue.creator_login,
                creator_role=issue.creator_role,
                title=issue.title,
                labels=", ".join(issue.labels),
                interim=text,
            )
        else:
            prompt = DIRECT_PROMPT.format(corpus=text)

        outcome = await self._request(issue.conversation_id, prompt)
        if not outcome.ok:
            logger.warning(
                f"Final summary for {issue.conversation_id} failed: {outcome.error}"
            )
        return outcome

    async def summarize(
        self, issue: IssueContext, comments: Iterable[CommentRecord]
    ) -> SummaryResult:
        """Summarize an issue and its comments.

        Each call tokenizes with its own measurer and forgets the model-side
        conversation afterwards, so nothing carries over to the next issue.
        """
        measurer = self.measurer_factory()
        stream = assemble(issue, comments, measurer)
        chunks = plan(stream, self.config.token_budget)
        split = len(chunks) > 1
        logger.info(
            f"{issue.conversation_id}: {len(stream)} tokens in {len(chunks)} chunk(s)"
        )

        try:
            if split:
                text = await self.map_chunks(issue, chunks, measurer)
            else:
                text = measurer.decode(list(chunks[0].tokens))
            outcome = await self.reduce(issue, text, split=split)
        finally:
            self.completion.forget(issue.conversation_id)

        return SummaryResult(issue_url=issue.html_url, summary_text=outcome.text)
