"""Invitation record entity.

The deployment redirects visitors to exactly one Slack invitation URL.
That URL, when it was assigned and whether it is still honored make up the
only persistent entity of the system.
"""

from datetime import datetime, timezone

from pydantic import Field, field_validator

from joinlink.domain.model.common import DomainModel
from joinlink.domain.value import ReconcileAction


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InvitationRecord(DomainModel):
    """The current invitation.

    Business rules:
    - One record per deployment, replaced wholesale, never deleted
    - An empty url means no invitation is configured
    - is_active only goes back to True through an admin replace or a
      successful admin re-validation
    - Expiry is derived from created_at on every read, never stored
    """

    url: str = ""
    created_at: datetime = Field(default_factory=utc_now)
    is_active: bool = False

    @field_validator("created_at")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        """Treat naive timestamps as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    @classmethod
    def empty(cls) -> "InvitationRecord":
        """Zero value used when nothing is stored."""
        return cls(url="", created_at=utc_now(), is_active=False)

    @property
    def has_url(self) -> bool:
        return bool(self.url.strip())


class ReconcileOutcome(DomainModel):
    """Result of applying the expiry/validation policy to a record."""

    record: InvitationRecord
    action: ReconcileAction = ReconcileAction.NONE
    redirectable: bool = False
    is_valid: bool | None = None  # None when the link was not probed
    days_left: int | None = None
    notification_sent: bool = False
