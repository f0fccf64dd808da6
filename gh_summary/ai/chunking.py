"""Token-budget chunk planning."""

from pydantic import BaseModel, ConfigDict

from .corpus import TokenStream

DEFAULT_TOKEN_BUDGET = 2800


class Chunk(BaseModel):
    """Contiguous token range [start, stop) of a TokenStream."""

    model_config = ConfigDict(frozen=True)

    index: int
    start: int
    stop: int
    tokens: tuple[int, ...]

    def __len__(self) -> int:
        return self.stop - self.start


def plan(stream: TokenStream, budget: int = DEFAULT_TOKEN_BUDGET) -> list[Chunk]:
    """Split a token stream into budget-sized windows.

    A stream that fits the budget comes back as a single chunk covering all
    of it (including the empty stream, which yields one empty chunk).
    Otherwise windows of ``budget`` tokens are taken from the front until
    the stream is exhausted, so only the last chunk may be shorter.

    Args:
        stream: Assembled corpus tokens
        budget: Maximum tokens per chunk

    Returns:
        Chunks in stream order; never empty

    Raises:
        ValueError: If budget is not positive
    """
    if budget <= 0:
        raise ValueError(f"Token budget must be positive, got {budget}")

    total = len(stream)
    if total <= budget:
        return [Chunk(index=0, start=0, stop=total, tokens=tuple(stream))]

    chunks = []
    start = 0
    while start < total:
        stop = start + min(total - start, budget)
        chunks.append(
            Chunk(
                index=len(chunks),
                start=start,
                stop=stop,
                tokens=tuple(stream.slice(start, stop)),
            )
        )
        start = stop
    return chunks
