"""Test configuration and fixtures."""

import pytest

from tests.factories import ADMIN_EMAIL, CRON_SECRET, JWT_SECRET


@pytest.fixture(autouse=True)
def test_environment(monkeypatch, tmp_path):
    """Pin settings to test values regardless of the developer's .env."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("CRON__SECRET", CRON_SECRET)
    monkeypatch.setenv("AUTH__JWT_SECRET", JWT_SECRET)
    monkeypatch.setenv("AUTH__ADMIN_EMAILS", f'["{ADMIN_EMAIL}"]')
    monkeypatch.setenv("STORAGE__BACKEND", "file")
    monkeypatch.setenv("STORAGE__FILE_PATH", str(tmp_path / "invite.json"))
    monkeypatch.delenv("SLACK__WEBHOOK_URL", raising=False)
