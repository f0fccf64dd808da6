"""Parsing of chat messages that ask for issue summaries."""

import re

from pydantic import BaseModel, Field

from ..utils.date_parser import parse_day_count

_NAME_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


class TriggerRequest(BaseModel):
    """What a trigger message asked for, after defaults were filled in."""

    owner: str
    repo: str
    days: int
    applied_defaults: list[str] = Field(
        default_factory=list,
        description="Human-readable description of each default used",
    )

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


def _valid_name(value: str | None) -> str | None:
    if value and _NAME_RE.match(value):
        return value
    return None


def parse_trigger(
    text: str,
    trigger_word: str,
    default_owner: str,
    default_repo: str,
    default_days: int = 7,
) -> TriggerRequest | None:
    """Parse a message of the form ``<trigger word> owner/repo [days]``.

    Args:
        text: Raw message text
        trigger_word: Phrase the message must start with (case-insensitive)
        default_owner: Owner used when the message names none
        default_repo: Repository used when the message names none
        default_days: Lookback used when no positive day count ends the message

    Returns:
        The parsed request, or None if the message is not a trigger

    Example:
        >>> parse_trigger("flows summarize octo/hello 3", "flows summarize", "a", "b").days
        3
    """
    stripped = text.strip()
    if not stripped.lower().startswith(trigger_word.lower()):
        return None
    rest = stripped[len(trigger_word) :]
    if rest and not rest[0].isspace():
        return None

    tokens = rest.split()
    applied_defaults = []

    days = parse_day_count(tokens[-1]) if tokens else None
    if days is not None:
        tokens = tokens[:-1]
    else:
        days = default_days
        applied_defaults.append(f"lookback of {default_days} days")

    owner = repo = None
    target = next((token for token in tokens if "/" in token), None)
    if target is not None:
        parts = target.strip("/").split("/")
        owner = _valid_name(parts[0])
        repo = _valid_name(parts[1]) if len(parts) > 1 else None
    elif tokens:
        owner = _valid_name(tokens[0])

    if owner is None:
        owner = default_owner
        applied_defaults.append(f"owner '{default_owner}'")
    if repo is None:
        repo = default_repo
        applied_defaults.append(f"repository '{default_repo}'")

    return TriggerRequest(
        owner=owner, repo=repo, days=days, applied_defaults=applied_defaults
    )
