"""Domain services."""

from .base import Service
from .invitation_service import InvitationService
from .jwt_service import JWTService
from .link_validator import LinkProbe, LinkValidator
from .notification_service import NotificationService, Notifier

__all__ = [
    "InvitationService",
    "JWTService",
    "LinkProbe",
    "LinkValidator",
    "NotificationService",
    "Notifier",
    "Service",
]
