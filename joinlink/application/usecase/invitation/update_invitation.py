"""Update invitation use case."""

import logfire

from joinlink.application.usecase.base import BaseUseCase, CamelModel
from joinlink.application.usecase.invitation.get_invitation import InvitationResponse
from joinlink.domain.service import InvitationService


class UpdateInvitationRequest(CamelModel):
    """Update invitation request."""

    url: str | None = None


class UpdateInvitationUseCase(BaseUseCase):
    """Use case for an admin replacing the invitation URL."""

    def __init__(self, invitation_service: InvitationService) -> None:
        """Initialize update invitation use case.

        Args:
            invitation_service: Invitation domain service
        """
        self.invitation_service = invitation_service

    async def execute(self, request: UpdateInvitationRequest) -> InvitationResponse:
        """Replace the invitation.

        Args:
            request: Request with the new URL

        Returns:
            The new, active invitation

        Raises:
            MissingURLError: If no URL was given
            InvalidURLError: If the URL is malformed
            StoreWriteError: If the record cannot be written
        """
        with logfire.span("update_invitation.execute"):
            record = await self.invitation_service.replace(request.url)
            return InvitationResponse.from_record(record)
