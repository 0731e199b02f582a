"""Unit tests for invitation expiry arithmetic."""

from datetime import datetime, timedelta, timezone

from joinlink.domain.service.expiry import days_left, days_since, is_expired

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


class TestIsExpired:
    """Tests for is_expired."""

    def test_fresh_link_is_not_expired(self):
        assert is_expired(NOW, now=NOW) is False

    def test_exactly_ttl_days_is_not_expired(self):
        """The TTL boundary itself is still inside the window."""
        assert is_expired(NOW - timedelta(days=30), now=NOW) is False

    def test_one_second_past_ttl_is_expired(self):
        assert is_expired(NOW - timedelta(days=30, seconds=1), now=NOW) is True

    def test_custom_ttl(self):
        created_at = NOW - timedelta(days=8)
        assert is_expired(created_at, ttl_days=7, now=NOW) is True
        assert is_expired(created_at, ttl_days=90, now=NOW) is False


class TestDaysLeft:
    """Tests for days_left."""

    def test_fresh_link_has_full_ttl(self):
        assert days_left(NOW, now=NOW) == 30

    def test_partial_days_count_as_elapsed_only_when_whole(self):
        """29.9 days elapsed floors to 29, leaving 1."""
        assert days_left(NOW - timedelta(days=29, hours=22), now=NOW) == 1

    def test_at_ttl_boundary_is_zero(self):
        assert days_left(NOW - timedelta(days=30), now=NOW) == 0

    def test_negative_after_expiry(self):
        assert days_left(NOW - timedelta(days=31), now=NOW) == -1

    def test_days_since_is_fractional(self):
        assert days_since(NOW - timedelta(hours=12), now=NOW) == 0.5
