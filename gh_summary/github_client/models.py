"""Pydantic models for GitHub data structures.

These models map onto the subset of GitHub's REST API v3 issue payloads the
summary bot reads. API Reference: https://docs.github.com/en/rest/issues
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class GitHubUser(BaseModel):
    """GitHub user model representing a user account.

    Maps to GitHub REST API User object.
    API Reference: https://docs.github.com/en/rest/users/users
    """

    login: str = Field(..., description="GitHub username/login (string)")
    id: int = Field(..., description="Unique user identifier (integer)")


class GitHubLabel(BaseModel):
    """GitHub label model representing repository labels.

    Maps to GitHub REST API Label object.
    API Reference: https://docs.github.com/en/rest/issues/labels
    """

    name: str = Field(..., description="Name of the label (string)")
    color: str = Field(
        ..., description="Hexadecimal color code without leading # (string)"
    )
    description: str | None = Field(
        None, description="Short description of the label (string, max 100 characters)"
    )


class GitHubComment(BaseModel):
    """GitHub comment model representing issue comments.

    Maps to GitHub REST API Issue Comment object.
    API Reference: https://docs.github.com/en/rest/issues/comments
    """

    id: int = Field(..., description="Unique comment identifier (integer)")
    user: GitHubUser | None = Field(
        None, description="Comment author details (absent for deleted accounts)"
    )
    body: str | None = Field(None, description="Text content of the comment")
    created_at: datetime = Field(
        ..., description="Timestamp of comment creation (ISO 8601)"
    )


class GitHubIssue(BaseModel):
    """GitHub issue model as returned by the issue search API.

    Maps to GitHub REST API Issue object.
    API Reference: https://docs.github.com/en/rest/search/search#search-issues-and-pull-requests
    """

    number: int = Field(..., description="Issue number within the repository (integer)")
    title: str = Field(..., description="Short description/title of the issue (string)")
    body: str | None = Field(
        None, description="Detailed description of the issue in markdown (string)"
    )
    state: str = Field(..., description="Current state: 'open', 'closed' (string)")
    html_url: str = Field(..., description="Browser URL of the issue")
    labels: list[GitHubLabel] = Field(
        default_factory=list, description="Array of labels attached to the issue"
    )
    user: GitHubUser = Field(..., description="Creator/author of the issue")
    author_association: str = Field(
        "NONE",
        description="Creator's relationship to the repository "
        "(OWNER, MEMBER, CONTRIBUTOR, NONE, ...)",
    )
    created_at: datetime = Field(
        ..., description="Timestamp of issue creation (ISO 8601)"
    )
    updated_at: datetime = Field(
        ..., description="Timestamp of last issue update (ISO 8601)"
    )


class CommentRecord(BaseModel):
    """One comment as fed into the summarization corpus."""

    model_config = ConfigDict(frozen=True)

    author_login: str = ""
    body: str = ""

    @classmethod
    def from_comment(cls, comment: GitHubComment) -> "CommentRecord":
        return cls(
            author_login=comment.user.login if comment.user else "",
            body=comment.body or "",
        )


class IssueContext(BaseModel):
    """Read-only view of one issue for the lifetime of its summary run."""

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str
    issue_number: int
    title: str
    creator_login: str
    creator_role: str
    labels: tuple[str, ...] = ()
    body: str = ""
    html_url: str

    @property
    def conversation_id(self) -> str:
        """Key for model-side context shared by every call about this issue."""
        return f"{self.owner}/{self.repo}#{self.issue_number}"

    @classmethod
    def from_issue(cls, owner: str, repo: str, issue: GitHubIssue) -> "IssueContext":
        """Build the summary context for a fetched issue."""
        return cls(
            owner=owner,
            repo=repo,
            issue_number=issue.number,
            title=issue.title,
            creator_login=issue.user.login,
            creator_role=issue.author_association,
            labels=tuple(label.name for label in issue.labels),
            body=issue.body or "",
            html_url=issue.html_url,
        )
