"""Mock Slack providers for testing."""

from dishka import Scope, provide

from joinlink.adapter.slack import MockSlackNotifier
from joinlink.domain.service import Notifier
from joinlink.util.di.infrastructure.slack import SlackProvider


class MockSlackProvider(SlackProvider):
    """Mock Slack provider recording notifications."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_notifier(self) -> Notifier:
        """Provide mock Slack notifier."""
        return MockSlackNotifier()
