"""GitHub API client using PyGitHub."""

import logging
import os
import time
from collections.abc import Iterator
from datetime import datetime

from github import Github
from github.GithubException import RateLimitExceededException
from github.Issue import Issue
from github.IssueComment import IssueComment
from github.Label import Label
from github.NamedUser import NamedUser
from github.PaginatedList import PaginatedList

from ..utils.date_parser import format_datetime_for_github
from .models import CommentRecord, GitHubComment, GitHubIssue, GitHubLabel, GitHubUser
from .search import build_github_query

logger = logging.getLogger(__name__)

RATE_LIMIT_SLEEP_SECONDS = 60


class GitHubSearchError(Exception):
    """Raised when an issue search cannot be run (bad repo name, API error)."""


class GitHubClient:
    """GitHub API client with rate limiting and authentication."""

    def __init__(self, token: str | None = None):
        """Initialize GitHub client with authentication.

        Args:
            token: GitHub personal access token. If None, reads from
                GITHUB_TOKEN env var.
        """
        self.token = token or os.getenv("GITHUB_TOKEN")
        if not self.token:
            raise ValueError(
                "GitHub token is required. Set GITHUB_TOKEN environment variable."
            )

        self.github = Github(self.token)

    def _check_rate_limit(self) -> None:
        """Check rate limit and sleep if necessary."""
        try:
            rate_limit = self.github.get_rate_limit()
            remaining = rate_limit.rate.remaining
            logger.debug(f"GitHub API rate limit: {remaining} requests remaining")

            if remaining < 10:
                reset_time = rate_limit.rate.reset.timestamp()
                sleep_time = max(reset_time - time.time() + 1, 0)
                logger.info(f"Rate limit low, sleeping for {sleep_time:.1f} seconds...")
                time.sleep(sleep_time)

        except Exception as e:
            # Not critical: the request itself will surface real failures
            logger.debug(f"Rate limit check failed: {e}")

    def _convert_user(self, github_user: NamedUser) -> GitHubUser:
        """Convert PyGitHub user to our model."""
        return GitHubUser(login=github_user.login, id=github_user.id)

    def _convert_label(self, github_label: Label) -> GitHubLabel:
        """Convert PyGitHub label to our model."""
        return GitHubLabel(
            name=github_label.name,
            color=github_label.color,
            description=github_label.description,
        )

    def _convert_comment(self, github_comment: IssueComment) -> GitHubComment:
        """Convert PyGitHub comment to our model."""
        user = github_comment.user
        return GitHubComment(
            id=github_comment.id,
            user=self._convert_user(user) if user is not None else None,
            body=github_comment.body,
            created_at=github_comment.created_at,
        )

    def _convert_issue(self, github_issue: Issue) -> GitHubIssue:
        """Convert PyGitHub issue to our model."""
        return GitHubIssue(
            number=github_issue.number,
            title=github_issue.title,
            body=github_issue.body,
            state=github_issue.state,
            html_url=github_issue.html_url,
            labels=[self._convert_label(label) for label in github_issue.labels],
            user=self._convert_user(github_issue.user),
            author_association=getattr(github_issue, "author_association", None)
            or "NONE",
            created_at=github_issue.created_at,
            updated_at=github_issue.updated_at,
        )

    def search_recent_issues(
        self, owner: str, repo: str, updated_after: datetime
    ) -> Iterator[GitHubIssue]:
        """Search open issues in a repository updated on or after a date.

        The first page is requested eagerly so that an unknown repository or
        malformed query raises here rather than part way through iteration.

        Args:
            owner: Repository owner (user or organization)
            repo: Repository name
            updated_after: Earliest update time of interest

        Returns:
            Lazy iterator of GitHubIssue objects in API order

        Raises:
            GitHubSearchError: If the search request fails
        """
        self._check_rate_limit()

        query = build_github_query(
            org=owner,
            repo=repo,
            state="open",
            updated_after=format_datetime_for_github(updated_after),
        )
        logger.info(f"Searching with query: {query}")

        try:
            results, total = self._first_page(query)
        except RateLimitExceededException:
            logger.warning("Rate limit exceeded, waiting...")
            time.sleep(RATE_LIMIT_SLEEP_SECONDS)
            try:
                results, total = self._first_page(query)
            except Exception as e:
                raise GitHubSearchError(f"Search failed for {owner}/{repo}: {e}") from e
        except Exception as e:
            # GithubException as well as transport errors from requests
            raise GitHubSearchError(f"Search failed for {owner}/{repo}: {e}") from e

        logger.info(f"Search matched {total} issue(s) in {owner}/{repo}")
        return self._iter_issues(results)

    def _first_page(self, query: str) -> tuple[PaginatedList[Issue], int]:
        results = self.github.search_issues(query)
        return results, results.totalCount

    def _iter_issues(self, results: PaginatedList[Issue]) -> Iterator[GitHubIssue]:
        try:
            for github_issue in results:
                try:
                    yield self._convert_issue(github_issue)
                except Exception as e:
                    logger.error(
                        f"Error processing issue #{github_issue.number}: {e}"
                    )
                    continue
        except Exception as e:
            logger.error(f"Error fetching further search results: {e}")

    def list_comments(
        self, owner: str, repo: str, issue_number: int
    ) -> list[CommentRecord]:
        """List comments on an issue in creation order.

        A failed request yields an empty list so the issue can still be
        summarized from its body alone.
        """
        try:
            repository = self.github.get_repo(f"{owner}/{repo}")
            github_issue = repository.get_issue(issue_number)
            return [
                CommentRecord.from_comment(self._convert_comment(comment))
                for comment in github_issue.get_comments()
            ]
        except Exception as e:
            logger.warning(
                f"Could not fetch comments for {owner}/{repo}#{issue_number}: {e}"
            )
            return []
