"""Slack integration module for new issue notifications."""

from .client import SlackNotifier, priority_emoji

__all__ = ["SlackNotifier", "priority_emoji"]
