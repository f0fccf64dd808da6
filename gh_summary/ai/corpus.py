"""Corpus assembly: render an issue thread as sentences and tokenize it."""

from collections.abc import Iterable, Iterator

from ..github_client.models import CommentRecord, IssueContext
from .prompts import COMMENT_SENTENCE, ISSUE_SENTENCE
from .tokenizer import TextMeasurer


class TokenStream:
    """Ordered token ids for one issue's corpus."""

    def __init__(self, tokens: Iterable[int] = ()) -> None:
        self._tokens: list[int] = list(tokens)

    def extend(self, tokens: Iterable[int]) -> None:
        self._tokens.extend(tokens)

    def slice(self, start: int, stop: int) -> list[int]:
        return self._tokens[start:stop]

    @property
    def tokens(self) -> list[int]:
        return list(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[int]:
        return iter(self._tokens)

    def __repr__(self) -> str:
        return f"TokenStream(len={len(self._tokens)})"


def render_issue(issue: IssueContext) -> str:
    """Render the opening post and its metadata as one sentence."""
    return ISSUE_SENTENCE.format(
        creator_login=issue.creator_login,
        creator_role=issue.creator_role,
        title=issue.title,
        labels=", ".join(issue.labels),
        body=issue.body or "",
    )


def render_comment(comment: CommentRecord) -> str:
    """Render one comment as "<author> commented: <body>"."""
    return COMMENT_SENTENCE.format(
        author=comment.author_login or "", body=comment.body or ""
    )


def assemble(
    issue: IssueContext, comments: Iterable[CommentRecord], measurer: TextMeasurer
) -> TokenStream:
    """Build the token stream for an issue and its comments.

    Every sentence is encoded on its own and appended in encounter order,
    issue first.
    """
    stream = TokenStream(measurer.encode(render_issue(issue)))
    for comment in comments:
        stream.extend(measurer.encode(render_comment(comment)))
    return stream
