"""GitHub issue monitor with AI triage and Slack/email notifications."""

__version__ = "0.1.0"
