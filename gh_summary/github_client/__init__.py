"""GitHub client package for API interaction."""

from .client import GitHubClient, GitHubSearchError
from .models import (
    CommentRecord,
    GitHubComment,
    GitHubIssue,
    GitHubLabel,
    GitHubUser,
    IssueContext,
)
from .search import build_github_query

__all__ = [
    "GitHubClient",
    "GitHubSearchError",
    "GitHubUser",
    "GitHubLabel",
    "GitHubComment",
    "GitHubIssue",
    "CommentRecord",
    "IssueContext",
    "build_github_query",
]
