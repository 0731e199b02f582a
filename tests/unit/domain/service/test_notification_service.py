"""Unit tests for NotificationService."""

import pytest

from joinlink.adapter.slack import MockSlackNotifier
from joinlink.domain.service import NotificationService
from joinlink.domain.service.notification_service import (
    LINK_EXPIRED_MESSAGE,
    LINK_INVALID_MESSAGE,
    LINK_UPDATED_MESSAGE,
)
from tests.factories import OTHER_URL, VALID_URL


@pytest.fixture
def notifier():
    return MockSlackNotifier()


@pytest.fixture
def notifications(notifier):
    return NotificationService(notifier)


class TestNotificationService:
    """Tests for the canned notifications."""

    @pytest.mark.asyncio
    async def test_link_expired(self, notifications, notifier):
        sent = await notifications.link_expired(VALID_URL, 3)

        assert sent is True
        message, fields = notifier.sent[0]
        assert message == LINK_EXPIRED_MESSAGE
        assert fields["Link"] == VALID_URL
        assert fields["Days Left"] == "3"
        assert "Admin Panel" in fields["Action"]

    @pytest.mark.asyncio
    async def test_link_invalid(self, notifications, notifier):
        await notifications.link_invalid(VALID_URL)

        message, fields = notifier.sent[0]
        assert message == LINK_INVALID_MESSAGE
        assert fields["Link"] == VALID_URL
        assert fields["Status"] == "Link is no longer accessible"

    @pytest.mark.asyncio
    async def test_link_updated_truncates_long_links(self, notifications, notifier):
        long_url = "https://join.slack.com/t/" + "a" * 80

        await notifications.link_updated(long_url, OTHER_URL)

        message, fields = notifier.sent[0]
        assert message == LINK_UPDATED_MESSAGE
        assert fields["Old Link"] == long_url[:50] + "..."
        assert fields["New Link"] == OTHER_URL[:50] + "..."
        assert fields["Updated By"] == "Admin Panel"

    @pytest.mark.asyncio
    async def test_link_updated_keeps_short_links(self, notifications, notifier):
        await notifications.link_updated("https://join.slack.com/a", "https://join.slack.com/b")

        _, fields = notifier.sent[0]
        assert fields["Old Link"] == "https://join.slack.com/a"
        assert fields["New Link"] == "https://join.slack.com/b"
