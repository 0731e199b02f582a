"""Admin invitation routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header

from joinlink.application.usecase.invitation import (
    GetInvitationUseCase,
    InvitationResponse,
    UpdateInvitationRequest,
    UpdateInvitationUseCase,
    ValidateInvitationResponse,
    ValidateInvitationUseCase,
)
from joinlink.domain.service import JWTService
from joinlink.interface.api.auth import authenticate_admin

router = APIRouter(prefix="/api/invite", tags=["invitation"], route_class=DishkaRoute)


@router.get("", response_model=InvitationResponse)
async def get_invitation(
    use_case: FromDishka[GetInvitationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> InvitationResponse:
    """Get the current invitation.

    Args:
        use_case: Get invitation use case from DI
        jwt_service: JWT service from DI
        auth_token: Admin session token from cookie
        authorization: Authorization header with a bearer session token

    Returns:
        Current invitation; isActive is the effective value

    Raises:
        UnauthorizedError: If not authenticated as admin
        StoreTransportError: If the store cannot be read
    """
    authenticate_admin(jwt_service, auth_token, authorization)
    return await use_case.execute()


@router.post("", response_model=InvitationResponse)
async def update_invitation(
    request: UpdateInvitationRequest,
    use_case: FromDishka[UpdateInvitationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> InvitationResponse:
    """Replace the invitation URL.

    Args:
        request: Request with the new URL
        use_case: Update invitation use case from DI
        jwt_service: JWT service from DI
        auth_token: Admin session token from cookie
        authorization: Authorization header with a bearer session token

    Returns:
        The new, active invitation

    Raises:
        UnauthorizedError: If not authenticated as admin
        MissingURLError: If no URL was given
        InvalidURLError: If the URL is malformed
        StoreWriteError: If the record cannot be written
    """
    authenticate_admin(jwt_service, auth_token, authorization)
    return await use_case.execute(request)


@router.post("/validate", response_model=ValidateInvitationResponse)
async def validate_invitation(
    use_case: FromDishka[ValidateInvitationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ValidateInvitationResponse:
    """Probe the stored link and record the result.

    Raises:
        UnauthorizedError: If not authenticated as admin
        NoInvitationError: If no URL is stored
    """
    authenticate_admin(jwt_service, auth_token, authorization)
    return await use_case.execute()
