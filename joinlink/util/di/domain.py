"""Domain layer DI providers."""

from dishka import Scope, provide

from joinlink.config import AuthSettings, InvitationSettings
from joinlink.domain.repository import InvitationStore
from joinlink.domain.service import (
    InvitationService,
    JWTService,
    LinkProbe,
    LinkValidator,
    NotificationService,
    Notifier,
)
from joinlink.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped; each HTTP request gets fresh
    service instances around the app-scoped adapters.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide admin token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_link_validator(
        self, probe: LinkProbe, settings: InvitationSettings
    ) -> LinkValidator:
        """Provide link validator."""
        return LinkValidator(probe=probe, settings=settings)

    @provide
    def get_notification_service(self, notifier: Notifier) -> NotificationService:
        """Provide notification service."""
        return NotificationService(notifier=notifier)

    @provide
    def get_invitation_service(
        self,
        store: InvitationStore,
        validator: LinkValidator,
        notifications: NotificationService,
        settings: InvitationSettings,
    ) -> InvitationService:
        """Provide invitation domain service."""
        return InvitationService(
            store=store,
            validator=validator,
            notifications=notifications,
            settings=settings,
        )
