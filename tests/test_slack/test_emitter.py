"""Tests for the rate-limited result emitter."""

import pytest

from gh_summary.ai.summarizer import SummaryResult
from gh_summary.github_client.models import IssueContext
from gh_summary.slack.emitter import ResultEmitter

LIMIT_NOTICE = (
    "You've reached your limit of 10 issues. "
    "Please wait 10 minutes before running the command again."
)


class Recorder:
    """Collects sent messages and summarized issue numbers."""

    def __init__(self, delivered: bool = True) -> None:
        self.sent: list[str] = []
        self.summarized: list[int] = []
        self.delivered = delivered

    def send(self, text: str) -> bool:
        self.sent.append(text)
        return self.delivered

    async def summarize(self, issue: IssueContext) -> SummaryResult:
        self.summarized.append(issue.issue_number)
        return SummaryResult(
            issue_url=issue.html_url, summary_text=f"about #{issue.issue_number}"
        )


@pytest.fixture
def issues(issue_factory):
    def build(count: int) -> list[IssueContext]:
        return [
            issue_factory(
                issue_number=n, html_url=f"https://github.com/o/r/issues/{n}"
            )
            for n in range(1, count + 1)
        ]

    return build


class TestResultEmitter:
    """Test ResultEmitter."""

    def test_default_limit_notice(self) -> None:
        """The default notice names 10 issues and 10 minutes."""
        recorder = Recorder()
        emitter = ResultEmitter(recorder.send, recorder.summarize)
        assert emitter.limit_notice == LIMIT_NOTICE

    @pytest.mark.asyncio
    async def test_eleven_issues_capped_at_ten(self, issues) -> None:
        """Eleven matches give ten summaries, one notice and no eleventh attempt."""
        recorder = Recorder()
        emitter = ResultEmitter(recorder.send, recorder.summarize)

        emitted = await emitter.emit_all(issues(11))

        assert emitted == 10
        assert recorder.summarized == list(range(1, 11))
        assert len(recorder.sent) == 11
        assert recorder.sent[-1] == LIMIT_NOTICE
        assert recorder.sent[0] == (
            "Issue Summary:\nabout #1\nhttps://github.com/o/r/issues/1"
        )

    @pytest.mark.asyncio
    async def test_fewer_issues_than_quota(self, issues) -> None:
        """Below the quota every issue is posted and no notice is sent."""
        recorder = Recorder()
        emitter = ResultEmitter(recorder.send, recorder.summarize)

        emitted = await emitter.emit_all(issues(3))

        assert emitted == 3
        assert LIMIT_NOTICE not in recorder.sent
        assert len(recorder.sent) == 3

    @pytest.mark.asyncio
    async def test_quota_reached_exactly(self, issues) -> None:
        """Reaching the quota sends the notice even with nothing left."""
        recorder = Recorder()
        emitter = ResultEmitter(recorder.send, recorder.summarize, quota=2)

        emitted = await emitter.emit_all(issues(2))

        assert emitted == 2
        assert recorder.sent[-1].startswith("You've reached your limit of 2 issues.")

    @pytest.mark.asyncio
    async def test_no_issues(self) -> None:
        """No matches give no messages at all."""
        recorder = Recorder()
        emitter = ResultEmitter(recorder.send, recorder.summarize)

        assert await emitter.emit_all([]) == 0
        assert recorder.sent == []

    @pytest.mark.asyncio
    async def test_stops_consuming_iterator(self, issues) -> None:
        """Issues past the quota are never pulled from the search results."""
        recorder = Recorder()
        pulled = []

        def lazy():
            for issue in issues(5):
                pulled.append(issue.issue_number)
                yield issue

        emitter = ResultEmitter(recorder.send, recorder.summarize, quota=2)
        await emitter.emit_all(lazy())

        assert pulled == [1, 2]

    @pytest.mark.asyncio
    async def test_failed_delivery_does_not_block(self, issues) -> None:
        """Undelivered messages do not stop later ones."""
        recorder = Recorder(delivered=False)
        emitter = ResultEmitter(recorder.send, recorder.summarize)

        assert await emitter.emit_all(issues(3)) == 3
        assert len(recorder.sent) == 3

    def test_custom_cooldown(self) -> None:
        """The notice quotes the configured quota and cooldown."""
        recorder = Recorder()
        emitter = ResultEmitter(
            recorder.send, recorder.summarize, quota=5, cooldown_minutes=30
        )
        assert emitter.limit_notice == (
            "You've reached your limit of 5 issues. "
            "Please wait 30 minutes before running the command again."
        )

    def test_rejects_non_positive_quota(self) -> None:
        """The quota must allow at least one summary."""
        recorder = Recorder()
        with pytest.raises(ValueError, match="quota must be positive"):
            ResultEmitter(recorder.send, recorder.summarize, quota=0)
