"""GitHub API client using PyGitHub."""

import logging
from collections.abc import Callable, Iterable
from datetime import datetime, timedelta

from github import Auth, Github
from github.GithubException import UnknownObjectException
from github.Issue import Issue
from github.Label import Label
from github.NamedUser import NamedUser
from github.Repository import Repository

from ..utils.time_window import is_within_window, utc_now, window_start
from .models import GitHubIssue, GitHubLabel, GitHubUser

logger = logging.getLogger(__name__)

PAGE_SIZE = 100


def filter_recent_issues(
    issues: Iterable[Issue], now: datetime, window: timedelta
) -> list[Issue]:
    """Keep issues created inside the trailing window, dropping pull requests.

    The list endpoint's ``since`` parameter filters on update time, so issues
    that were merely edited inside the window must be removed here.

    Args:
        issues: Raw PyGitHub issues in API order
        now: End of the window
        window: Length of the window

    Returns:
        Matching issues in their original order
    """
    return [
        issue
        for issue in issues
        if issue.pull_request is None
        and is_within_window(issue.created_at, now, window)
    ]


class GitHubClient:
    """GitHub API client for listing newly created repository issues."""

    def __init__(
        self,
        token: str | None,
        clock: Callable[[], datetime] = utc_now,
    ):
        """Initialize GitHub client with authentication.

        Args:
            token: GitHub personal access token
            clock: Source of the current time, replaceable in tests
        """
        if not token:
            raise ValueError(
                "GitHub token is required. Set GITHUB_TOKEN environment variable."
            )

        self.token = token
        self.clock = clock
        self.github = Github(auth=Auth.Token(token), per_page=PAGE_SIZE)

    def _convert_user(self, github_user: NamedUser) -> GitHubUser:
        """Convert PyGitHub user to our model."""
        return GitHubUser(login=github_user.login)

    def _convert_label(self, github_label: Label) -> GitHubLabel:
        """Convert PyGitHub label to our model."""
        return GitHubLabel(name=github_label.name)

    def _convert_issue(self, github_issue: Issue) -> GitHubIssue:
        """Convert PyGitHub issue to our model."""
        return GitHubIssue(
            number=github_issue.number,
            title=github_issue.title,
            body=github_issue.body,
            labels=[self._convert_label(label) for label in github_issue.labels],
            user=self._convert_user(github_issue.user),
            created_at=github_issue.created_at,
            html_url=github_issue.html_url,
        )

    def get_repository(self, owner: str, repo: str) -> Repository:
        """Get repository object."""
        if not owner or not repo:
            raise ValueError("Repository owner and name must be non-empty")
        try:
            return self.github.get_repo(f"{owner}/{repo}")
        except UnknownObjectException:
            raise ValueError(f"Repository {owner}/{repo} not found")

    def list_recent_issues(
        self, owner: str, repo: str, window: timedelta = timedelta(hours=24)
    ) -> list[GitHubIssue]:
        """List open issues created within the trailing window.

        Requests a single page of up to 100 open issues updated since the
        window start, then re-filters on creation time and drops pull
        requests.

        Args:
            owner: Repository owner (user or organization)
            repo: Repository name
            window: Length of the trailing window

        Returns:
            List of GitHubIssue objects in API order

        Raises:
            ValueError: If the repository does not exist
            GithubException: For any other API error
        """
        now = self.clock()
        since = window_start(now, window)

        repository = self.get_repository(owner, repo)
        logger.debug(f"Listing open issues in {owner}/{repo} updated since {since}")
        candidates = repository.get_issues(state="open", since=since).get_page(0)

        recent = filter_recent_issues(candidates, now, window)
        logger.info(
            f"{len(recent)} of {len(candidates)} open issue(s) in {owner}/{repo} "
            f"were created in the last {window}"
        )
        return [self._convert_issue(issue) for issue in recent]
