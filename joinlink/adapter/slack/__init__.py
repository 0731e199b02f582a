"""Slack adapter."""

from .webhook import MockSlackNotifier, SlackNotifier, WebhookSlackNotifier

__all__ = ["SlackNotifier", "WebhookSlackNotifier", "MockSlackNotifier"]
