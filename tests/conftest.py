"""Test configuration and fixtures."""

from collections.abc import Callable
from datetime import datetime, timezone

import pytest

from issue_monitor.ai.models import AnalyzedIssue, IssueAnalysis
from issue_monitor.config import MonitorConfig
from issue_monitor.github_client.models import GitHubIssue, GitHubLabel, GitHubUser

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def config() -> MonitorConfig:
    """Fully configured monitor settings."""
    return MonitorConfig(
        repo_owner="octocat",
        repo_name="hello-world",
        github_token="gh_token",
        slack_webhook_url="https://hooks.slack.com/services/T000/B000/XXXX",
        sendgrid_api_key="SG.test",
        notify_email="team@example.com",
    )


@pytest.fixture
def make_issue() -> Callable[..., GitHubIssue]:
    """Factory for GitHubIssue models."""

    def _factory(
        number: int = 1,
        title: str = "App crashes on startup",
        body: str | None = "Stack trace attached",
        labels: list[str] | None = None,
        author: str = "reporter",
    ) -> GitHubIssue:
        return GitHubIssue(
            number=number,
            title=title,
            body=body,
            labels=[GitHubLabel(name=name) for name in labels or []],
            user=GitHubUser(login=author),
            created_at=NOW,
            html_url=f"https://github.com/octocat/hello-world/issues/{number}",
        )

    return _factory


@pytest.fixture
def two_analyzed_issues(
    make_issue: Callable[..., GitHubIssue],
) -> list[AnalyzedIssue]:
    """Critical then High, in fetch order."""
    return [
        AnalyzedIssue(
            issue=make_issue(number=7, title="Data loss on save"),
            analysis=IssueAnalysis(
                priority="Critical",
                category="Bug",
                summary="Saving drops unsaved edits.",
                suggestedAction="Reproduce and hotfix",
                estimatedEffort="Medium",
            ),
        ),
        AnalyzedIssue(
            issue=make_issue(number=8, title="Add dark mode"),
            analysis=IssueAnalysis(
                priority="High",
                category="Feature Request",
                summary="Users want a dark theme.",
                suggestedAction="Add to roadmap",
                estimatedEffort="Large",
            ),
        ),
    ]
