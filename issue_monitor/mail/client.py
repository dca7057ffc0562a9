"""SendGrid email notifier for newly analyzed GitHub issues."""

import logging
from collections.abc import Sequence
from html import escape

from python_http_client.exceptions import HTTPError
from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from ..ai.models import AnalyzedIssue
from ..config import MonitorConfig
from ..errors import EmailNotificationError

logger = logging.getLogger(__name__)

PRIORITY_COLORS = {
    "Critical": "#dc3545",
    "High": "#fd7e14",
    "Medium": "#ffc107",
    "Low": "#28a745",
}
DEFAULT_COLOR = "#6c757d"

FOOTER = "This email was generated by the GitHub Issue Monitor AI Agent."


def priority_color(priority: str) -> str:
    """Get the dot color for a priority."""
    return PRIORITY_COLORS.get(priority, DEFAULT_COLOR)


def format_issue_rows(analyzed_issues: Sequence[AnalyzedIssue]) -> str:
    """Render two table rows per issue."""
    rows = []
    for item in analyzed_issues:
        issue, analysis = item.issue, item.analysis
        rows.append(
            f"""
    <tr>
      <td style="padding: 12px; border-bottom: 1px solid #eee;">
        <span style="display: inline-block; width: 12px; height: 12px; border-radius: 50%; background-color: {priority_color(analysis.priority)}; margin-right: 8px;"></span>
        <a href="{escape(issue.html_url)}" style="color: #0366d6; text-decoration: none; font-weight: 600;">#{issue.number}: {escape(issue.title)}</a>
      </td>
    </tr>
    <tr>
      <td style="padding: 0 12px 12px 32px; border-bottom: 1px solid #eee; color: #586069;">
        <strong>Priority:</strong> {escape(analysis.priority)} |
        <strong>Category:</strong> {escape(analysis.category)} |
        <strong>Effort:</strong> {escape(analysis.estimated_effort)}<br>
        <strong>Summary:</strong> {escape(analysis.summary)}<br>
        <strong>Suggested Action:</strong> {escape(analysis.suggested_action)}
      </td>
    </tr>"""
        )
    return "".join(rows)


def format_email_html(
    repository: str, analyzed_issues: Sequence[AnalyzedIssue], lookback_hours: int = 24
) -> str:
    """Render the notification email body."""
    return f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
</head>
<body style="font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Helvetica, Arial, sans-serif; line-height: 1.5; color: #24292e; max-width: 600px; margin: 0 auto; padding: 20px;">
  <h1 style="font-size: 24px; border-bottom: 1px solid #eee; padding-bottom: 10px;">
    New Issues: {escape(repository)}
  </h1>
  <p style="color: #586069;">
    <strong>{len(analyzed_issues)} new issue(s)</strong> found in the last {lookback_hours} hours
  </p>
  <table style="width: 100%; border-collapse: collapse; margin-top: 20px;">{format_issue_rows(analyzed_issues)}
  </table>
  <p style="margin-top: 30px; padding-top: 20px; border-top: 1px solid #eee; color: #586069; font-size: 12px;">
    {FOOTER}
  </p>
</body>
</html>
"""


def format_subject(repository: str, issue_count: int) -> str:
    return f"[{repository}] {issue_count} New Issue(s) - AI Analysis"


class EmailNotifier:
    """Sends a single HTML summary email through SendGrid."""

    def __init__(
        self, config: MonitorConfig, client: SendGridAPIClient | None = None
    ):
        self.config = config
        self._client = client

    @property
    def client(self) -> SendGridAPIClient:
        """Get or create the SendGrid client."""
        if self._client is None:
            self._client = SendGridAPIClient(self.config.sendgrid_api_key)
        return self._client

    def build_message(self, analyzed_issues: Sequence[AnalyzedIssue]) -> Mail:
        """Build the SendGrid mail object."""
        return Mail(
            from_email=self.config.sender_email,
            to_emails=self.config.notify_email,
            subject=format_subject(self.config.repository, len(analyzed_issues)),
            html_content=format_email_html(
                self.config.repository, analyzed_issues, self.config.lookback_hours
            ),
        )

    def send(self, analyzed_issues: Sequence[AnalyzedIssue]) -> bool:
        """Send the summary email.

        Returns:
            True if the email was accepted, False if SendGrid is not configured

        Raises:
            EmailNotificationError: If SendGrid rejects the request
        """
        if not self.config.email_configured():
            logger.info("SendGrid not configured, skipping email notification")
            return False

        message = self.build_message(analyzed_issues)
        try:
            response = self.client.send(message)
        except HTTPError as e:
            raise EmailNotificationError(
                f"Email notification failed: {e.status_code} {e.body!r}",
                status_code=e.status_code,
            ) from e

        if not 200 <= response.status_code < 300:
            raise EmailNotificationError(
                f"Email notification failed: {response.status_code}",
                status_code=response.status_code,
            )

        logger.info("Email notification sent successfully")
        return True
