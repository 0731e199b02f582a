"""Validate invitation use case."""

import logfire

from joinlink.application.usecase.base import BaseUseCase, CamelModel
from joinlink.domain.service import InvitationService


class ValidateInvitationResponse(CamelModel):
    """Validate invitation response."""

    url: str
    is_valid: bool
    message: str


class ValidateInvitationUseCase(BaseUseCase):
    """Use case for an admin re-checking the stored link on demand.

    Stores the probe result as the record's activity, so a successful check
    re-activates a link that was previously marked invalid.
    """

    def __init__(self, invitation_service: InvitationService) -> None:
        """Initialize validate invitation use case.

        Args:
            invitation_service: Invitation domain service
        """
        self.invitation_service = invitation_service

    async def execute(self, request: None = None) -> ValidateInvitationResponse:
        """Validate the stored link.

        Returns:
            Validation result

        Raises:
            NoInvitationError: If no URL is stored
            StoreWriteError: If the result cannot be written
        """
        with logfire.span("validate_invitation.execute"):
            record, is_valid = await self.invitation_service.revalidate()
            message = (
                "Link is valid and active"
                if is_valid
                else "Link is invalid or broken - marked as inactive"
            )
            return ValidateInvitationResponse(url=record.url, is_valid=is_valid, message=message)
