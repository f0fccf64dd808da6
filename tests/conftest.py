"""Test configuration and fixtures."""

from typing import Any, Callable

import pytest

from gh_summary.ai.completion import ChatOptions
from gh_summary.github_client.models import IssueContext


class CharMeasurer:
    """One token per character; makes corpus sizes easy to control."""

    def encode(self, text: str) -> list[int]:
        return [ord(ch) for ch in text]

    def decode(self, tokens: list[int]) -> str:
        return "".join(chr(token) for token in tokens)

    def count(self, text: str) -> int:
        return len(text)


class FakeCompletion:
    """Records completion requests and answers them from a callable."""

    def __init__(
        self,
        reply: Callable[[str], str] | None = None,
        fail_on: set[int] | None = None,
    ) -> None:
        self.reply = reply or (lambda prompt: f"summary #{len(self.calls)}")
        self.fail_on = fail_on or set()
        self.calls: list[tuple[str, str, ChatOptions]] = []
        self.forgotten: list[str] = []

    async def complete(
        self, conversation_id: str, prompt: str, options: ChatOptions
    ) -> str:
        self.calls.append((conversation_id, prompt, options))
        if len(self.calls) in self.fail_on:
            raise RuntimeError(f"backend unavailable on call {len(self.calls)}")
        return self.reply(prompt)

    def forget(self, conversation_id: str) -> None:
        self.forgotten.append(conversation_id)

    @property
    def prompts(self) -> list[str]:
        return [prompt for _, prompt, _ in self.calls]


@pytest.fixture
def char_measurer() -> CharMeasurer:
    return CharMeasurer()


@pytest.fixture
def measurer_factory() -> Callable[[], CharMeasurer]:
    """Builder the summarizer calls once per issue."""
    return CharMeasurer


@pytest.fixture
def fake_completion() -> FakeCompletion:
    return FakeCompletion()


def make_issue(**overrides: Any) -> IssueContext:
    values: dict[str, Any] = {
        "owner": "octo-org",
        "repo": "widgets",
        "issue_number": 42,
        "title": "Crash when saving widgets",
        "creator_login": "alice",
        "creator_role": "CONTRIBUTOR",
        "labels": ("bug", "needs-triage"),
        "body": "Saving a widget with an empty name crashes the editor.",
        "html_url": "https://github.com/octo-org/widgets/issues/42",
    }
    values.update(overrides)
    return IssueContext(**values)


@pytest.fixture
def sample_issue() -> IssueContext:
    """Sample issue context for testing."""
    return make_issue()


@pytest.fixture
def issue_factory() -> Callable[..., IssueContext]:
    """Build issue contexts with selected fields overridden."""
    return make_issue


@pytest.fixture
def completion_factory() -> type[FakeCompletion]:
    return FakeCompletion
