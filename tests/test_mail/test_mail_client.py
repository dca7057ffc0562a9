"""Tests for email notifier."""

from unittest.mock import Mock, patch

import pytest
from python_http_client.exceptions import HTTPError

from issue_monitor.ai.models import AnalyzedIssue, IssueAnalysis
from issue_monitor.config import MonitorConfig
from issue_monitor.errors import EmailNotificationError
from issue_monitor.mail.client import (
    EmailNotifier,
    format_email_html,
    format_subject,
    priority_color,
)


class TestFormatting:
    """Test subject and HTML rendering."""

    @pytest.mark.parametrize(
        ("priority", "color"),
        [
            ("Critical", "#dc3545"),
            ("High", "#fd7e14"),
            ("Medium", "#ffc107"),
            ("Low", "#28a745"),
            ("Whatever", "#6c757d"),
        ],
    )
    def test_priority_color(self, priority: str, color: str) -> None:
        assert priority_color(priority) == color

    def test_subject(self) -> None:
        assert (
            format_subject("octocat/hello-world", 2)
            == "[octocat/hello-world] 2 New Issue(s) - AI Analysis"
        )

    def test_two_issue_document(
        self, two_analyzed_issues: list[AnalyzedIssue]
    ) -> None:
        """Test two rows per issue with matching dot colors in order."""
        html = format_email_html("octocat/hello-world", two_analyzed_issues)

        assert "New Issues: octocat/hello-world" in html
        assert "<strong>2 new issue(s)</strong>" in html
        assert html.count("<tr>") == 4
        assert html.index("#dc3545") < html.index("#fd7e14")
        assert html.index("#7: Data loss on save") < html.index("#8: Add dark mode")
        assert 'href="https://github.com/octocat/hello-world/issues/7"' in html
        assert "<strong>Priority:</strong> Critical |" in html
        assert "<strong>Suggested Action:</strong> Add to roadmap" in html
        assert "generated by the GitHub Issue Monitor AI Agent" in html

    def test_escapes_issue_text(self, make_issue) -> None:
        issue = make_issue(title="<script>alert(1)</script>")
        item = AnalyzedIssue(issue=issue, analysis=IssueAnalysis.default_for(issue))

        html = format_email_html("octocat/hello-world", [item])

        assert "<script>" not in html
        assert "&lt;script&gt;" in html


class TestSend:
    """Test SendGrid delivery."""

    @pytest.mark.parametrize("missing", ["sendgrid_api_key", "notify_email"])
    def test_skips_when_not_configured(
        self,
        missing: str,
        config: MonitorConfig,
        two_analyzed_issues: list[AnalyzedIssue],
    ) -> None:
        """Test that a missing key or recipient means no network call."""
        config = config.model_copy(update={missing: None})

        with patch("issue_monitor.mail.client.SendGridAPIClient") as mock_sendgrid:
            assert EmailNotifier(config).send(two_analyzed_issues) is False
            mock_sendgrid.assert_not_called()

    def test_builds_message(
        self, config: MonitorConfig, two_analyzed_issues: list[AnalyzedIssue]
    ) -> None:
        with patch("issue_monitor.mail.client.Mail") as mock_mail:
            EmailNotifier(config).build_message(two_analyzed_issues)

        kwargs = mock_mail.call_args.kwargs
        assert kwargs["from_email"] == "noreply@github-issue-monitor.com"
        assert kwargs["to_emails"] == "team@example.com"
        assert kwargs["subject"] == (
            "[octocat/hello-world] 2 New Issue(s) - AI Analysis"
        )
        assert "#dc3545" in kwargs["html_content"]

    def test_uses_configured_sender(
        self, config: MonitorConfig, two_analyzed_issues: list[AnalyzedIssue]
    ) -> None:
        config = config.model_copy(update={"sender_email": "bot@example.com"})

        with patch("issue_monitor.mail.client.Mail") as mock_mail:
            EmailNotifier(config).build_message(two_analyzed_issues)

        assert mock_mail.call_args.kwargs["from_email"] == "bot@example.com"

    def test_sends_message(
        self, config: MonitorConfig, two_analyzed_issues: list[AnalyzedIssue]
    ) -> None:
        client = Mock()
        client.send.return_value = Mock(status_code=202)

        assert EmailNotifier(config, client=client).send(two_analyzed_issues) is True
        client.send.assert_called_once()

    def test_builds_client_from_api_key(
        self, config: MonitorConfig, two_analyzed_issues: list[AnalyzedIssue]
    ) -> None:
        with patch("issue_monitor.mail.client.SendGridAPIClient") as mock_sendgrid:
            mock_sendgrid.return_value.send.return_value = Mock(status_code=202)
            EmailNotifier(config).send(two_analyzed_issues)

        mock_sendgrid.assert_called_once_with("SG.test")

    def test_wraps_http_errors(
        self, config: MonitorConfig, two_analyzed_issues: list[AnalyzedIssue]
    ) -> None:
        error = HTTPError(401, "Unauthorized", b'{"errors": []}', {})
        client = Mock()
        client.send.side_effect = error

        with pytest.raises(EmailNotificationError, match="401") as exc_info:
            EmailNotifier(config, client=client).send(two_analyzed_issues)
        assert exc_info.value.status_code == 401
        assert exc_info.value.__cause__ is error

    def test_raises_on_unexpected_status(
        self, config: MonitorConfig, two_analyzed_issues: list[AnalyzedIssue]
    ) -> None:
        client = Mock()
        client.send.return_value = Mock(status_code=500)

        with pytest.raises(EmailNotificationError):
            EmailNotifier(config, client=client).send(two_analyzed_issues)
