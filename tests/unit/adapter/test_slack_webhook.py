"""Unit tests for the Slack webhook notifier."""

import json

import httpx
import pytest

from joinlink.adapter.slack import WebhookSlackNotifier
from joinlink.adapter.slack.webhook import build_payload

WEBHOOK_URL = "https://hooks.slack.com/services/T000/B000/XXXX"


class TestBuildPayload:
    """Tests for build_payload."""

    def test_plain_message(self):
        assert build_payload("hello") == {"text": "hello"}

    def test_fields_render_as_section(self):
        payload = build_payload("*Title*", {"Link": "https://x", "Days Left": "3"})

        assert payload["text"] == "*Title*"
        header, details = payload["blocks"]
        assert header["text"] == {"type": "mrkdwn", "text": "*Title*"}
        assert [field["text"] for field in details["fields"]] == [
            "*Link:* https://x",
            "*Days Left:* 3",
        ]


class TestWebhookSlackNotifier:
    """Tests for WebhookSlackNotifier."""

    @pytest.mark.asyncio
    async def test_posts_payload(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text="ok")

        notifier = WebhookSlackNotifier(WEBHOOK_URL, transport=httpx.MockTransport(handler))

        assert await notifier.send("hello", {"Link": "https://x"}) is True
        assert str(seen[0].url) == WEBHOOK_URL
        assert json.loads(seen[0].content)["text"] == "hello"

    @pytest.mark.asyncio
    async def test_unconfigured_webhook_skips(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200)

        notifier = WebhookSlackNotifier(None, transport=httpx.MockTransport(handler))

        assert await notifier.send("hello") is False
        assert seen == []

    @pytest.mark.asyncio
    async def test_rejected_post_returns_false(self):
        notifier = WebhookSlackNotifier(
            WEBHOOK_URL,
            transport=httpx.MockTransport(lambda request: httpx.Response(404, text="no_service")),
        )

        assert await notifier.send("hello") is False

    @pytest.mark.asyncio
    async def test_network_error_returns_false(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        notifier = WebhookSlackNotifier(WEBHOOK_URL, transport=httpx.MockTransport(handler))

        assert await notifier.send("hello") is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "webhook_url",
        ["https://hooks.slack.com:abc/services/x", "http://[::1/services/x"],
    )
    async def test_malformed_webhook_url_returns_false(self, webhook_url):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200)

        notifier = WebhookSlackNotifier(webhook_url, transport=httpx.MockTransport(handler))

        assert await notifier.send("hello", {"Link": "https://x"}) is False
        assert seen == []
