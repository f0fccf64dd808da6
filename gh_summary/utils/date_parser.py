"""Date helpers for GitHub issue search windows."""

from datetime import datetime, timedelta, timezone


def parse_day_count(value: str | None) -> int | None:
    """Parse a positive day count, returning None when it is not one.

    Args:
        value: Raw text such as "14"

    Returns:
        The integer value, or None for missing, non-numeric or non-positive input
    """
    if value is None:
        return None
    try:
        days = int(value.strip())
    except ValueError:
        return None
    return days if days > 0 else None


def relative_date_to_absolute(days: int, now: datetime | None = None) -> datetime:
    """Convert a lookback window in days to the datetime it starts at.

    Args:
        days: Number of days ago
        now: Reference time (defaults to the current UTC time, the clock
            GitHub evaluates search qualifiers in)

    Returns:
        Datetime object representing the calculated past date

    Raises:
        ValueError: If days is not a positive integer
    """
    if days <= 0:
        raise ValueError("Days must be a positive integer")

    now = now or datetime.now(timezone.utc)
    return now - timedelta(days=days)


def format_datetime_for_github(dt: datetime) -> str:
    """Format datetime for GitHub API search queries.

    Args:
        dt: Datetime to format

    Returns:
        ISO formatted date string for GitHub API
    """
    return dt.strftime("%Y-%m-%d")
