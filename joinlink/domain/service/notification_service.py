"""Invitation notifications."""

from abc import ABC, abstractmethod

import logfire

from .base import Service

LINK_EXPIRED_MESSAGE = ":rotating_light: *Slack Invite Link Expiring Soon*"
LINK_INVALID_MESSAGE = ":x: *Slack Invite Link is Invalid*"
LINK_UPDATED_MESSAGE = ":white_check_mark: *Slack Invite Link Updated*"

# Links are shortened in update notifications
TRUNCATE_AT = 50


class Notifier(ABC):
    """Abstract message sink (a chat webhook)."""

    @abstractmethod
    async def send(self, message: str, fields: dict[str, str] | None = None) -> bool:
        """Send a message with optional key/value fields.

        Implementations must never raise.

        Args:
            message: Message text
            fields: Optional details rendered as key/value pairs

        Returns:
            True if the sink accepted the message
        """
        pass


def _truncate(url: str, limit: int = TRUNCATE_AT) -> str:
    if len(url) <= limit:
        return url
    return url[:limit] + "..."


class NotificationService(Service):
    """Canned invitation events.

    Notifications are best-effort telemetry. The return values only tell
    whether the message went out; no caller may depend on them.
    """

    def __init__(self, notifier: Notifier) -> None:
        """Initialize notification service.

        Args:
            notifier: Message sink
        """
        self.notifier = notifier

    async def link_expired(self, url: str, days_left: int) -> bool:
        """Warn that the link expires soon (days_left > 0) or has expired (0)."""
        logfire.info("Sending link expired notification", url=url, days_left=days_left)
        return await self.notifier.send(
            LINK_EXPIRED_MESSAGE,
            {
                "Link": url,
                "Days Left": str(days_left),
                "Action": "Please update the invite link in the Admin Panel",
            },
        )

    async def link_invalid(self, url: str) -> bool:
        """Report that the link no longer resolves."""
        logfire.info("Sending link invalid notification", url=url)
        return await self.notifier.send(
            LINK_INVALID_MESSAGE,
            {
                "Link": url,
                "Status": "Link is no longer accessible",
                "Action": "Please update the invite link immediately in the Admin Panel",
            },
        )

    async def link_updated(self, old_url: str, new_url: str) -> bool:
        """Report that an admin replaced the link."""
        logfire.info("Sending link updated notification", old_url=old_url, new_url=new_url)
        return await self.notifier.send(
            LINK_UPDATED_MESSAGE,
            {
                "Old Link": _truncate(old_url),
                "New Link": _truncate(new_url),
                "Updated By": "Admin Panel",
            },
        )
