"""Text measurers used for token accounting.

A measurer turns text into integer token ids and back. The summary pipeline
only needs the ids to count and slice; it never interprets them.
"""

import re
from collections.abc import Callable
from functools import partial
from typing import Protocol

import tiktoken


class TextMeasurer(Protocol):
    """Encode/decode capability the pipeline measures chunk budgets with."""

    def encode(self, text: str) -> list[int]: ...

    def decode(self, tokens: list[int]) -> str: ...

    def count(self, text: str) -> int: ...


class TiktokenMeasurer:
    """Measurer backed by a tiktoken BPE encoding."""

    def __init__(self, encoding_name: str = "cl100k_base") -> None:
        self.encoding_name = encoding_name
        self._encoding: tiktoken.Encoding | None = None

    @property
    def encoding(self) -> tiktoken.Encoding:
        """Lazy-loaded encoding (the first load may download BPE ranks)."""
        if self._encoding is None:
            self._encoding = tiktoken.get_encoding(self.encoding_name)
        return self._encoding

    def encode(self, text: str) -> list[int]:
        # Issue text is untrusted: special-token markers are plain text here
        return self.encoding.encode_ordinary(text)

    def decode(self, tokens: list[int]) -> str:
        return self.encoding.decode(tokens)

    def count(self, text: str) -> int:
        return len(self.encode(text))


_PIECE_RE = re.compile(r"\S+|\s+")


class WhitespaceMeasurer:
    """Deterministic, model-free measurer.

    Each run of non-whitespace and each run of whitespace is one token, so
    "a b" is three tokens. Ids come from a vocabulary private to the
    instance, which makes decode(encode(text)) exact for any text.
    """

    def __init__(self) -> None:
        self._ids: dict[str, int] = {}
        self._pieces: list[str] = []

    def encode(self, text: str) -> list[int]:
        tokens = []
        for piece in _PIECE_RE.findall(text):
            token = self._ids.get(piece)
            if token is None:
                token = len(self._pieces)
                self._ids[piece] = token
                self._pieces.append(piece)
            tokens.append(token)
        return tokens

    def decode(self, tokens: list[int]) -> str:
        return "".join(self._pieces[token] for token in tokens)

    def count(self, text: str) -> int:
        return len(_PIECE_RE.findall(text))

    @property
    def vocabulary_size(self) -> int:
        return len(self._pieces)


def _check_name(name: str) -> None:
    if name == "whitespace":
        return
    if name not in tiktoken.list_encoding_names():
        raise ValueError(
            f"Unknown tokenizer '{name}'. Use 'whitespace' or one of: "
            f"{', '.join(tiktoken.list_encoding_names())}"
        )


def build_measurer(name: str) -> TextMeasurer:
    """Create the measurer for a configured tokenizer name.

    Args:
        name: "whitespace" or a tiktoken encoding name such as "cl100k_base"

    Raises:
        ValueError: If the name is neither "whitespace" nor a known encoding
    """
    _check_name(name)
    if name == "whitespace":
        return WhitespaceMeasurer()
    return TiktokenMeasurer(name)


def measurer_factory(name: str) -> Callable[[], TextMeasurer]:
    """Validate a tokenizer name and return a builder for fresh measurers.

    The summarizer calls the builder once per issue.

    Raises:
        ValueError: If the name is neither "whitespace" nor a known encoding
    """
    _check_name(name)
    return partial(build_measurer, name)
