"""Exceptions raised by the issue monitor's outbound calls."""


class IssueMonitorError(Exception):
    """Base class for delivery and inference failures."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class InferenceError(IssueMonitorError):
    """The chat-completions endpoint returned a non-success response."""


class SlackNotificationError(IssueMonitorError):
    """The Slack webhook rejected the notification."""


class EmailNotificationError(IssueMonitorError):
    """SendGrid rejected the notification email."""
