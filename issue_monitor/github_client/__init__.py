"""GitHub client package for API interaction."""

from .client import GitHubClient, filter_recent_issues
from .models import GitHubIssue, GitHubLabel, GitHubUser

__all__ = [
    "GitHubClient",
    "GitHubIssue",
    "GitHubLabel",
    "GitHubUser",
    "filter_recent_issues",
]
