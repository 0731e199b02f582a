"""Domain model entities."""

from joinlink.domain.model.invitation import InvitationRecord, ReconcileOutcome

__all__ = [
    "InvitationRecord",
    "ReconcileOutcome",
]
