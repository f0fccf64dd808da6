"""AI summarization module for GitHub issue threads."""

from .chunking import Chunk, plan
from .completion import (
    AgentCompletionClient,
    ChatOptions,
    CompletionClient,
    CompletionError,
)
from .config import SummaryConfig, validate_model_string
from .corpus import TokenStream, assemble
from .summarizer import IssueSummarizer, SummaryOutcome, SummaryResult
from .tokenizer import (
    TextMeasurer,
    TiktokenMeasurer,
    WhitespaceMeasurer,
    build_measurer,
    measurer_factory,
)

__all__ = [
    # Configuration
    "SummaryConfig",
    "validate_model_string",
    # Token accounting
    "TextMeasurer",
    "TiktokenMeasurer",
    "WhitespaceMeasurer",
    "build_measurer",
    "measurer_factory",
    "TokenStream",
    "assemble",
    "Chunk",
    "plan",
    # Model calls
    "AgentCompletionClient",
    "ChatOptions",
    "CompletionClient",
    "CompletionError",
    # Pipeline
    "IssueSummarizer",
    "SummaryOutcome",
    "SummaryResult",
]
