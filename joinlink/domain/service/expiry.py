"""Invitation expiry arithmetic.

Calendar time, not business days. All functions accept an explicit ``now``
so callers and tests can pin the clock.
"""

import math
from datetime import datetime, timezone

SECONDS_PER_DAY = 24 * 60 * 60


def _now(now: datetime | None) -> datetime:
    return now if now is not None else datetime.now(timezone.utc)


def days_since(created_at: datetime, now: datetime | None = None) -> float:
    """Fractional days elapsed since created_at."""
    return (_now(now) - created_at).total_seconds() / SECONDS_PER_DAY


def is_expired(
    created_at: datetime, ttl_days: int = 30, now: datetime | None = None
) -> bool:
    """Whether more than ttl_days have passed. Exactly ttl_days is not expired."""
    return days_since(created_at, now) > ttl_days


def days_left(created_at: datetime, ttl_days: int = 30, now: datetime | None = None) -> int:
    """Whole days remaining in the TTL window; negative once past expiry."""
    return ttl_days - math.floor(days_since(created_at, now))
