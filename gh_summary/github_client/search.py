"""GitHub search query building."""


def build_github_query(
    org: str,
    repo: str,
    state: str = "open",
    labels: list[str] | None = None,
    updated_after: str | None = None,
    updated_before: str | None = None,
) -> str:
    """Build a GitHub issue search query string.

    Args:
        org: Organization or user that owns the repository
        repo: Repository name
        state: Issue state (open, closed, all)
        labels: List of label names to filter by
        updated_after: ISO date string; issues updated on or after this date
        updated_before: ISO date string; issues updated before this date

    Returns:
        GitHub search query string

    Example:
        >>> build_github_query("test-org", "test-repo", updated_after="2024-01-01")
        'repo:test-org/test-repo is:issue state:open updated:>=2024-01-01'
    """
    query_parts = [f"repo:{org}/{repo}", "is:issue"]

    if state != "all":
        query_parts.append(f"state:{state}")

    if labels:
        for label in labels:
            query_parts.append(f"label:{label}")

    if updated_after:
        query_parts.append(f"updated:>={updated_after}")
    if updated_before:
        query_parts.append(f"updated:<{updated_before}")

    return " ".join(query_parts)
