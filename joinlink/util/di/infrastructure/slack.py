"""Slack infrastructure providers."""

from dishka import Scope, provide

from joinlink.adapter.slack import WebhookSlackNotifier
from joinlink.config import Settings
from joinlink.domain.service import Notifier
from joinlink.util.di.base import ProviderBase


class SlackProvider(ProviderBase):
    """Slack component base."""

    __mock_component__ = "slack"


class ProdSlackProvider(SlackProvider):
    """Production Slack provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_notifier(self, settings: Settings) -> Notifier:
        """Provide Slack webhook notifier.

        Args:
            settings: Application settings

        Returns:
            Notifier posting to the configured webhook
        """
        return WebhookSlackNotifier(
            webhook_url=settings.slack.webhook_url,
            timeout=settings.slack.timeout_seconds,
        )
