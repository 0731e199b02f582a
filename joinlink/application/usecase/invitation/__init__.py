"""Invitation use cases."""

from joinlink.application.usecase.invitation.check_invitation import (
    CheckInvitationResponse,
    CheckInvitationUseCase,
)
from joinlink.application.usecase.invitation.get_invitation import (
    GetInvitationUseCase,
    InvitationResponse,
)
from joinlink.application.usecase.invitation.update_invitation import (
    UpdateInvitationRequest,
    UpdateInvitationUseCase,
)
from joinlink.application.usecase.invitation.validate_invitation import (
    ValidateInvitationResponse,
    ValidateInvitationUseCase,
)
from joinlink.application.usecase.invitation.visit_invitation import (
    VisitInvitationResponse,
    VisitInvitationUseCase,
)

__all__ = [
    "CheckInvitationResponse",
    "CheckInvitationUseCase",
    "GetInvitationUseCase",
    "InvitationResponse",
    "UpdateInvitationRequest",
    "UpdateInvitationUseCase",
    "ValidateInvitationResponse",
    "ValidateInvitationUseCase",
    "VisitInvitationResponse",
    "VisitInvitationUseCase",
]
