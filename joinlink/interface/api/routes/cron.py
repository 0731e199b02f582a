"""Scheduled check route."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header

from joinlink.application.usecase.invitation import (
    CheckInvitationResponse,
    CheckInvitationUseCase,
)
from joinlink.config import Settings
from joinlink.interface.api.auth import verify_cron_secret

router = APIRouter(prefix="/api/cron", tags=["cron"], route_class=DishkaRoute)


@router.get("/check-invite", response_model=CheckInvitationResponse)
async def check_invite(
    use_case: FromDishka[CheckInvitationUseCase],
    settings: FromDishka[Settings],
    authorization: str | None = Header(default=None),
) -> CheckInvitationResponse:
    """Expire or deactivate the invitation and send notifications.

    Called by an external scheduler with ``Authorization: Bearer <CRON__SECRET>``.

    Raises:
        UnauthorizedError: If the bearer secret does not match
    """
    verify_cron_secret(settings, authorization)
    return await use_case.execute()
