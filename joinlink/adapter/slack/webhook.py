"""Slack incoming webhook notifier."""

from typing import Any

import httpx
import logfire

from joinlink.domain.service.notification_service import Notifier


class SlackNotifier(Notifier):
    """Base class for Slack notifiers.

    Provides type distinction for dependency injection.
    """

    pass


def build_payload(message: str, fields: dict[str, str] | None = None) -> dict[str, Any]:
    """Build a Slack webhook payload.

    Args:
        message: Message text (Slack mrkdwn)
        fields: Optional details rendered as a fields section

    Returns:
        Webhook JSON body
    """
    payload: dict[str, Any] = {"text": message}
    if fields:
        payload["blocks"] = [
            {
                "type": "section",
                "text": {"type": "mrkdwn", "text": message},
            },
            {
                "type": "section",
                "fields": [
                    {"type": "mrkdwn", "text": f"*{key}:* {value}"}
                    for key, value in fields.items()
                ],
            },
        ]
    return payload


class WebhookSlackNotifier(SlackNotifier):
    """Posts messages to a Slack incoming webhook."""

    def __init__(
        self,
        webhook_url: str | None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize webhook notifier.

        Args:
            webhook_url: Incoming webhook URL; None disables sending
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests)
        """
        self.webhook_url = webhook_url
        self.timeout = timeout
        self.transport = transport

    async def send(self, message: str, fields: dict[str, str] | None = None) -> bool:
        if not self.webhook_url:
            logfire.info("Slack webhook not configured, skipping notification", message=message)
            return False

        payload = build_payload(message, fields)
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.post(self.webhook_url, json=payload)
        except httpx.HTTPError as e:
            logfire.error("Slack notification HTTP error", error=str(e))
            return False
        except httpx.InvalidURL as e:
            logfire.error("Slack webhook URL is malformed", error=str(e))
            return False

        if not response.is_success:
            logfire.error(
                "Slack notification failed",
                status_code=response.status_code,
                error=response.text,
            )
            return False

        logfire.info("Slack notification sent", message=message)
        return True


class MockSlackNotifier(SlackNotifier):
    """Mock Slack notifier for testing.

    Records every message instead of posting it.
    """

    def __init__(self, failing: bool = False) -> None:
        self.sent: list[tuple[str, dict[str, str]]] = []
        self.failing = failing

    async def send(self, message: str, fields: dict[str, str] | None = None) -> bool:
        self.sent.append((message, dict(fields or {})))
        # Attempts are recorded even when failing
        return not self.failing

    def messages(self) -> list[str]:
        return [message for message, _ in self.sent]
