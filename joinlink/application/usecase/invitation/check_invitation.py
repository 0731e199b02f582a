"""Scheduled invitation check use case."""

from datetime import datetime, timezone

import logfire

from joinlink.application.usecase.base import BaseUseCase, CamelModel
from joinlink.domain.service import InvitationService
from joinlink.domain.value import ReconcileAction


class CheckInvitationResponse(CamelModel):
    """Scheduled check report."""

    checked: bool
    days_left: int | None = None
    is_valid: bool | None = None
    is_active: bool | None = None
    notification_sent: bool = False
    action: ReconcileAction = ReconcileAction.NONE
    timestamp: datetime
    message: str | None = None


class CheckInvitationUseCase(BaseUseCase):
    """Use case run by the scheduler to expire and re-validate the link."""

    def __init__(self, invitation_service: InvitationService) -> None:
        """Initialize check invitation use case.

        Args:
            invitation_service: Invitation domain service
        """
        self.invitation_service = invitation_service

    async def execute(self, request: None = None) -> CheckInvitationResponse:
        """Run the reconcile policy against the stored record.

        Returns:
            Report of what was checked and done
        """
        with logfire.span("check_invitation.execute"):
            record = await self.invitation_service.current()
            now = datetime.now(timezone.utc)

            if not record.has_url:
                logfire.info("No invitation to check")
                return CheckInvitationResponse(
                    checked=False,
                    timestamp=now,
                    message="No invite link to check",
                )

            outcome = await self.invitation_service.reconcile(record)
            effective = self.invitation_service.effective(outcome.record)
            logfire.info(
                "Scheduled invitation check complete",
                action=outcome.action.value,
                days_left=outcome.days_left,
                is_valid=outcome.is_valid,
            )
            return CheckInvitationResponse(
                checked=True,
                days_left=outcome.days_left,
                is_valid=outcome.is_valid,
                is_active=effective.is_active,
                notification_sent=outcome.notification_sent,
                action=outcome.action,
                timestamp=now,
            )
