"""Pydantic models for GitHub data structures.

These models map onto the subset of the GitHub REST API v3 issue object the
monitor consumes.
API Reference: https://docs.github.com/en/rest/issues
"""

from datetime import datetime

from pydantic import BaseModel, Field


class GitHubUser(BaseModel):
    """GitHub user model representing the issue author.

    API Reference: https://docs.github.com/en/rest/users/users
    """

    login: str = Field(..., description="GitHub username/login (string)")


class GitHubLabel(BaseModel):
    """GitHub label model representing repository labels.

    API Reference: https://docs.github.com/en/rest/issues/labels
    """

    name: str = Field(..., description="Name of the label (string)")


class GitHubIssue(BaseModel):
    """GitHub issue model representing a newly opened repository issue.

    API Reference: https://docs.github.com/en/rest/issues/issues
    """

    number: int = Field(..., description="Issue number within the repository (integer)")
    title: str = Field(..., description="Short description/title of the issue (string)")
    body: str | None = Field(
        None, description="Detailed description of the issue in markdown (string)"
    )
    labels: list[GitHubLabel] = Field(
        default_factory=list, description="Array of labels attached to the issue"
    )
    user: GitHubUser = Field(..., description="Creator/author of the issue")
    created_at: datetime = Field(
        ..., description="Timestamp of issue creation (ISO 8601)"
    )
    html_url: str = Field(..., description="Web URL of the issue")

    @property
    def label_names(self) -> list[str]:
        return [label.name for label in self.labels]
