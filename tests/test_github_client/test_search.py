"""Tests for GitHub search query building."""

from gh_summary.github_client.search import build_github_query


class TestBuildGitHubQuery:
    """Test build_github_query."""

    def test_basic_query(self) -> None:
        """Repository and issue qualifiers come first."""
        assert (
            build_github_query("octo", "hello")
            == "repo:octo/hello is:issue state:open"
        )

    def test_updated_after_is_inclusive(self) -> None:
        """Issues updated on the start date are included."""
        query = build_github_query("octo", "hello", updated_after="2024-03-01")
        assert query == "repo:octo/hello is:issue state:open updated:>=2024-03-01"

    def test_all_states(self) -> None:
        """The state qualifier is dropped for 'all'."""
        assert "state:" not in build_github_query("octo", "hello", state="all")

    def test_labels_and_range(self) -> None:
        """Labels and an upper bound are appended in order."""
        query = build_github_query(
            "octo",
            "hello",
            labels=["bug", "p1"],
            updated_after="2024-01-01",
            updated_before="2024-02-01",
        )
        assert query == (
            "repo:octo/hello is:issue state:open label:bug label:p1 "
            "updated:>=2024-01-01 updated:<2024-02-01"
        )
