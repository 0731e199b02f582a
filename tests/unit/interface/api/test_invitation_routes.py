"""API tests for the admin invitation routes."""

import pytest

from joinlink.domain.repository import InvitationStore
from joinlink.domain.service import LinkProbe, Notifier
from joinlink.domain.service.notification_service import LINK_UPDATED_MESSAGE
from tests.factories import OTHER_URL, VALID_URL, admin_headers, make_record
from tests.harness import create_api_fixture

api_env = create_api_fixture()


class TestAuthentication:
    """Admin routes reject requests without an admin session."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method, path",
        [("GET", "/api/invite"), ("POST", "/api/invite"), ("POST", "/api/invite/validate")],
    )
    async def test_missing_token_is_unauthorized(self, api_env, method, path):
        response = await api_env.client.request(method, path, json={"url": VALID_URL})

        assert response.status_code == 401
        assert "error" in response.json()

    @pytest.mark.asyncio
    async def test_invalid_token_is_unauthorized(self, api_env):
        response = await api_env.client.get(
            "/api/invite", headers={"Authorization": "Bearer not-a-jwt"}
        )

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid token"}

    @pytest.mark.asyncio
    async def test_non_admin_email_is_unauthorized(self, api_env):
        response = await api_env.client.get(
            "/api/invite", headers=admin_headers("intruder@example.com")
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_cookie_session_is_accepted(self, api_env):
        token = admin_headers()["Authorization"].removeprefix("Bearer ")
        api_env.client.cookies.set("auth_token", token)

        response = await api_env.client.get("/api/invite")

        assert response.status_code == 200


class TestGetInvitation:
    """Tests for GET /api/invite."""

    @pytest.mark.asyncio
    async def test_returns_stored_record(self, api_env):
        store = await api_env.container.get(InvitationStore)
        store.seed(make_record())

        response = await api_env.client.get("/api/invite", headers=admin_headers())

        assert response.status_code == 200
        body = response.json()
        assert body["url"] == VALID_URL
        assert body["isActive"] is True
        assert "createdAt" in body

    @pytest.mark.asyncio
    async def test_expired_record_reads_inactive(self, api_env):
        store = await api_env.container.get(InvitationStore)
        store.seed(make_record(age_days=31))

        response = await api_env.client.get("/api/invite", headers=admin_headers())

        assert response.json()["isActive"] is False

    @pytest.mark.asyncio
    async def test_nothing_stored_returns_empty_record(self, api_env):
        response = await api_env.client.get("/api/invite", headers=admin_headers())

        assert response.status_code == 200
        assert response.json()["url"] == ""
        assert response.json()["isActive"] is False

    @pytest.mark.asyncio
    async def test_read_failure_is_server_error(self, api_env):
        store = await api_env.container.get(InvitationStore)
        store.fail_reads = True

        response = await api_env.client.get("/api/invite", headers=admin_headers())

        assert response.status_code == 500
        assert response.json() == {"error": "Error reading data"}


class TestUpdateInvitation:
    """Tests for POST /api/invite."""

    @pytest.mark.asyncio
    async def test_replaces_link(self, api_env):
        store = await api_env.container.get(InvitationStore)
        notifier = await api_env.container.get(Notifier)
        store.seed(make_record(url=VALID_URL, age_days=40, is_active=False))

        response = await api_env.client.post(
            "/api/invite", json={"url": OTHER_URL}, headers=admin_headers()
        )

        assert response.status_code == 200
        body = response.json()
        assert body["url"] == OTHER_URL
        assert body["isActive"] is True
        assert (await store.load()).url == OTHER_URL
        assert notifier.messages() == [LINK_UPDATED_MESSAGE]

    @pytest.mark.asyncio
    async def test_replaces_link_when_notification_fails(self, api_env):
        store = await api_env.container.get(InvitationStore)
        notifier = await api_env.container.get(Notifier)
        notifier.failing = True
        store.seed(make_record(url=VALID_URL))

        response = await api_env.client.post(
            "/api/invite", json={"url": OTHER_URL}, headers=admin_headers()
        )

        assert response.status_code == 200
        assert response.json()["url"] == OTHER_URL
        assert (await store.load()).url == OTHER_URL

    @pytest.mark.asyncio
    async def test_empty_url_is_rejected(self, api_env):
        store = await api_env.container.get(InvitationStore)

        response = await api_env.client.post(
            "/api/invite", json={"url": ""}, headers=admin_headers()
        )

        assert response.status_code == 400
        assert response.json() == {"error": "URL is required"}
        assert store.writes == []

    @pytest.mark.asyncio
    async def test_missing_url_is_rejected(self, api_env):
        response = await api_env.client.post("/api/invite", json={}, headers=admin_headers())

        assert response.status_code == 400
        assert response.json() == {"error": "URL is required"}

    @pytest.mark.asyncio
    async def test_malformed_url_leaves_record_unchanged(self, api_env):
        store = await api_env.container.get(InvitationStore)
        before = make_record()
        store.seed(before)

        response = await api_env.client.post(
            "/api/invite", json={"url": "not-a-url"}, headers=admin_headers()
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid URL format"}
        assert await store.load() == before

    @pytest.mark.asyncio
    async def test_unparseable_body_is_rejected(self, api_env):
        response = await api_env.client.post(
            "/api/invite",
            content=b"{not json",
            headers={**admin_headers(), "Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request body"}

    @pytest.mark.asyncio
    async def test_write_failure_is_server_error(self, api_env):
        store = await api_env.container.get(InvitationStore)
        store.fail_writes = True

        response = await api_env.client.post(
            "/api/invite", json={"url": VALID_URL}, headers=admin_headers()
        )

        assert response.status_code == 500
        assert response.json()["error"] == "Error saving data"


class TestValidateInvitation:
    """Tests for POST /api/invite/validate."""

    @pytest.mark.asyncio
    async def test_valid_link(self, api_env):
        store = await api_env.container.get(InvitationStore)
        store.seed(make_record(is_active=False))

        response = await api_env.client.post("/api/invite/validate", headers=admin_headers())

        assert response.status_code == 200
        assert response.json() == {
            "url": VALID_URL,
            "isValid": True,
            "message": "Link is valid and active",
        }
        assert (await store.load()).is_active is True

    @pytest.mark.asyncio
    async def test_invalid_link(self, api_env):
        store = await api_env.container.get(InvitationStore)
        probe = await api_env.container.get(LinkProbe)
        store.seed(make_record())
        probe.reachable = False

        response = await api_env.client.post("/api/invite/validate", headers=admin_headers())

        assert response.status_code == 200
        assert response.json()["isValid"] is False
        assert (await store.load()).is_active is False

    @pytest.mark.asyncio
    async def test_unreadable_store_is_server_error(self, api_env):
        store = await api_env.container.get(InvitationStore)
        store.seed(make_record())
        store.fail_reads = True

        response = await api_env.client.post("/api/invite/validate", headers=admin_headers())

        assert response.status_code == 500
        assert response.json() == {"error": "Error reading data"}
        assert store.writes == []

    @pytest.mark.asyncio
    async def test_nothing_stored_is_bad_request(self, api_env):
        response = await api_env.client.post("/api/invite/validate", headers=admin_headers())

        assert response.status_code == 400
        assert response.json() == {"error": "No invite link to validate"}
