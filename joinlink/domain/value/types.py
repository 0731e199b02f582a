"""Domain value types."""

from enum import Enum


class ReconcileAction(str, Enum):
    """What a reconcile pass did to the invitation record."""

    NONE = "none"
    EXPIRING_WARNING = "expiring_warning"
    DEACTIVATED_EXPIRED = "deactivated_expired"
    DEACTIVATED_INVALID = "deactivated_invalid"
