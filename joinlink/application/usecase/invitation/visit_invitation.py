"""Visitor redirect use case."""

import logfire

from joinlink.application.usecase.base import BaseUseCase, CamelModel
from joinlink.domain.service import InvitationService
from joinlink.domain.value import ReconcileAction


class VisitInvitationResponse(CamelModel):
    """Where to send a visitor."""

    redirect_url: str | None = None
    action: ReconcileAction = ReconcileAction.NONE


class VisitInvitationUseCase(BaseUseCase):
    """Use case for a visitor opening the join link.

    Runs the full reconcile policy, so a visit can deactivate a dead or
    expired link.
    """

    def __init__(self, invitation_service: InvitationService) -> None:
        """Initialize visit invitation use case.

        Args:
            invitation_service: Invitation domain service
        """
        self.invitation_service = invitation_service

    async def execute(self, request: None = None) -> VisitInvitationResponse:
        """Decide whether to redirect the visitor.

        Returns:
            Redirect target, or no target when the invitation is unavailable
        """
        with logfire.span("visit_invitation.execute"):
            record = await self.invitation_service.current()
            outcome = await self.invitation_service.reconcile(record)
            if not outcome.redirectable:
                logfire.info("Invitation unavailable", action=outcome.action.value)
                return VisitInvitationResponse(action=outcome.action)
            return VisitInvitationResponse(
                redirect_url=record.url.strip(), action=outcome.action
            )
