"""Email integration module for new issue notifications."""

from .client import EmailNotifier, format_email_html, format_subject, priority_color

__all__ = ["EmailNotifier", "format_email_html", "format_subject", "priority_color"]
