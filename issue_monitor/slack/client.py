"""Slack webhook notifier for newly analyzed GitHub issues."""

import logging
from typing import Any, Dict, List, Optional, Sequence

from slack_sdk.webhook import WebhookClient

from ..ai.models import AnalyzedIssue
from ..config import MonitorConfig
from ..errors import SlackNotificationError

logger = logging.getLogger(__name__)

PRIORITY_EMOJIS = {
    "Critical": ":red_circle:",
    "High": ":large_orange_circle:",
    "Medium": ":large_yellow_circle:",
    "Low": ":large_green_circle:",
}
DEFAULT_EMOJI = ":white_circle:"


def priority_emoji(priority: str) -> str:
    """Get the Slack emoji shortcode for a priority."""
    return PRIORITY_EMOJIS.get(priority, DEFAULT_EMOJI)


def _escape(text: str) -> str:
    # Slack reserves these three characters in mrkdwn
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


class SlackNotifier:
    """Posts a single summary message to a Slack incoming webhook."""

    def __init__(
        self, config: MonitorConfig, client: Optional[WebhookClient] = None
    ) -> None:
        """Initialize Slack notifier with configuration."""
        self.config = config
        self._client = client

    @property
    def client(self) -> WebhookClient:
        """Get or create the webhook client."""
        if self._client is None:
            if not self.config.slack_webhook_url:
                raise ValueError(
                    "SLACK_WEBHOOK_URL environment variable is required for Slack "
                    "notifications"
                )
            self._client = WebhookClient(
                self.config.slack_webhook_url,
                timeout=self.config.request_timeout,
            )
        return self._client

    def format_issue_blocks(
        self, analyzed_issues: Sequence[AnalyzedIssue]
    ) -> List[Dict[str, Any]]:
        """
        Format analyzed issues into Slack Block Kit format.

        Args:
            analyzed_issues: Issues with their analyses, in fetch order

        Returns:
            List of Slack Block Kit blocks
        """
        blocks: List[Dict[str, Any]] = [
            {
                "type": "header",
                "text": {
                    "type": "plain_text",
                    "text": f"New Issues: {self.config.repository}",
                    "emoji": True,
                },
            },
            {
                "type": "context",
                "elements": [
                    {
                        "type": "mrkdwn",
                        "text": f"*{len(analyzed_issues)} new issue(s)* found in "
                        f"the last {self.config.lookback_hours} hours",
                    }
                ],
            },
            {"type": "divider"},
        ]

        for item in analyzed_issues:
            issue, analysis = item.issue, item.analysis
            text = (
                f"{priority_emoji(analysis.priority)} "
                f"*<{issue.html_url}|#{issue.number}: {_escape(issue.title)}>*\n"
                f"*Priority:* {analysis.priority} | "
                f"*Category:* {analysis.category} | "
                f"*Effort:* {analysis.estimated_effort}\n"
                f"*Summary:* {_escape(analysis.summary)}\n"
                f"*Suggested Action:* {_escape(analysis.suggested_action)}"
            )
            blocks.append({"type": "section", "text": {"type": "mrkdwn", "text": text}})
            blocks.append({"type": "divider"})

        return blocks

    def send(self, analyzed_issues: Sequence[AnalyzedIssue]) -> bool:
        """
        Send the summary message.

        Returns:
            True if a message was delivered, False if Slack is not configured

        Raises:
            SlackNotificationError: If the webhook responds with a non-200 status
        """
        if not self.config.slack_configured():
            logger.info("Slack webhook not configured, skipping Slack notification")
            return False

        response = self.client.send(
            text=f"{len(analyzed_issues)} new issue(s) in {self.config.repository}",
            blocks=self.format_issue_blocks(analyzed_issues),
        )

        if response.status_code != 200:
            raise SlackNotificationError(
                f"Slack notification failed: {response.status_code} {response.body}",
                status_code=response.status_code,
            )

        logger.info("Slack notification sent successfully")
        return True
