"""End-to-end monitor run: fetch, analyze, notify."""

import asyncio
import logging
from datetime import timedelta

from .ai.analysis import IssueAnalyzer
from .ai.inference import InferenceClient
from .ai.models import AnalyzedIssue
from .config import MonitorConfig
from .github_client.client import GitHubClient
from .github_client.models import GitHubIssue
from .mail.client import EmailNotifier
from .slack.client import SlackNotifier

logger = logging.getLogger(__name__)


class IssueMonitor:
    """Runs one monitoring pass over the configured repository."""

    def __init__(
        self,
        config: MonitorConfig,
        github: GitHubClient | None = None,
        analyzer: IssueAnalyzer | None = None,
        slack: SlackNotifier | None = None,
        mailer: EmailNotifier | None = None,
    ):
        """Initialize the monitor.

        Args:
            config: Monitor configuration shared by every component
            github: Issue source, built from config when omitted
            analyzer: Issue analyzer, built from config when omitted
            slack: Slack notifier, built from config when omitted
            mailer: Email notifier, built from config when omitted
        """
        self.config = config
        self.github = github or GitHubClient(config.github_token)
        self.analyzer = analyzer or IssueAnalyzer(InferenceClient(config))
        self.slack = slack or SlackNotifier(config)
        self.mailer = mailer or EmailNotifier(config)

    async def analyze_all(self, issues: list[GitHubIssue]) -> list[AnalyzedIssue]:
        """Analyze issues one at a time, preserving order."""
        analyzed = []
        for issue in issues:
            logger.info(f"Analyzing issue #{issue.number}: {issue.title}")
            analysis = await self.analyzer.analyze(issue)
            analyzed.append(AnalyzedIssue(issue=issue, analysis=analysis))
        return analyzed

    async def notify(self, analyzed: list[AnalyzedIssue]) -> None:
        """Dispatch both notifiers concurrently.

        Both are started before either is awaited; the first failure is
        re-raised, and a delivery that already succeeded is not undone.
        """
        logger.info("Sending notifications...")
        await asyncio.gather(
            asyncio.to_thread(self.slack.send, analyzed),
            asyncio.to_thread(self.mailer.send, analyzed),
        )

    async def run(self, dry_run: bool = False) -> list[AnalyzedIssue]:
        """Run fetch, sequential analysis, and notification.

        Args:
            dry_run: Analyze issues but skip both notifiers

        Returns:
            Analyzed issues in fetch order (empty if nothing new was found)
        """
        owner, repo = self.config.repo_owner, self.config.repo_name
        logger.info(f"Checking for new issues in {owner}/{repo}...")

        window = timedelta(hours=self.config.lookback_hours)
        issues = self.github.list_recent_issues(owner, repo, window=window)
        logger.info(
            f"Found {len(issues)} new issue(s) in the last "
            f"{self.config.lookback_hours} hours"
        )

        if not issues:
            logger.info("No new issues to report")
            return []

        analyzed = await self.analyze_all(issues)

        if dry_run:
            logger.info("Dry run, skipping notifications")
        else:
            await self.notify(analyzed)

        logger.info("Done!")
        return analyzed
