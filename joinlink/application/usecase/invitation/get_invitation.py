"""Get invitation use case."""

from datetime import datetime

import logfire

from joinlink.application.usecase.base import BaseUseCase, CamelModel
from joinlink.domain.model import InvitationRecord
from joinlink.domain.service import InvitationService


class InvitationResponse(CamelModel):
    """Invitation record as shown to admins."""

    url: str
    created_at: datetime
    is_active: bool

    @classmethod
    def from_record(cls, record: InvitationRecord) -> "InvitationResponse":
        return cls(url=record.url, created_at=record.created_at, is_active=record.is_active)


class GetInvitationUseCase(BaseUseCase):
    """Use case for reading the current invitation.

    is_active in the response is the effective value: a stored active
    record past its TTL is reported inactive.
    """

    def __init__(self, invitation_service: InvitationService) -> None:
        """Initialize get invitation use case.

        Args:
            invitation_service: Invitation domain service
        """
        self.invitation_service = invitation_service

    async def execute(self, request: None = None) -> InvitationResponse:
        """Read the invitation.

        Returns:
            Current invitation with effective activity

        Raises:
            StoreTransportError: If the store cannot be read
        """
        with logfire.span("get_invitation.execute"):
            record = await self.invitation_service.stored()
            return InvitationResponse.from_record(self.invitation_service.effective(record))
