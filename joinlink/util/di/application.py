"""Application layer DI providers."""

from dishka import Scope, provide

from joinlink.application.usecase.invitation import (
    CheckInvitationUseCase,
    GetInvitationUseCase,
    UpdateInvitationUseCase,
    ValidateInvitationUseCase,
    VisitInvitationUseCase,
)
from joinlink.domain.service import InvitationService
from joinlink.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_visit_invitation_use_case(
        self, invitation_service: InvitationService
    ) -> VisitInvitationUseCase:
        """Provide visitor redirect use case."""
        return VisitInvitationUseCase(invitation_service=invitation_service)

    @provide(scope=Scope.REQUEST)
    def get_get_invitation_use_case(
        self, invitation_service: InvitationService
    ) -> GetInvitationUseCase:
        """Provide get invitation use case."""
        return GetInvitationUseCase(invitation_service=invitation_service)

    @provide(scope=Scope.REQUEST)
    def get_update_invitation_use_case(
        self, invitation_service: InvitationService
    ) -> UpdateInvitationUseCase:
        """Provide update invitation use case."""
        return UpdateInvitationUseCase(invitation_service=invitation_service)

    @provide(scope=Scope.REQUEST)
    def get_validate_invitation_use_case(
        self, invitation_service: InvitationService
    ) -> ValidateInvitationUseCase:
        """Provide validate invitation use case."""
        return ValidateInvitationUseCase(invitation_service=invitation_service)

    @provide(scope=Scope.REQUEST)
    def get_check_invitation_use_case(
        self, invitation_service: InvitationService
    ) -> CheckInvitationUseCase:
        """Provide scheduled check use case."""
        return CheckInvitationUseCase(invitation_service=invitation_service)
