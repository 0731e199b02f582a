"""Request authentication helpers for admin and scheduler routes."""

import hmac

import logfire

from joinlink.config import Settings
from joinlink.domain.service import JWTService
from joinlink.interface.error import UnauthorizedError
from joinlink.util.jwt import JWTError, TokenPayload


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def authenticate_admin(
    jwt_service: JWTService, auth_token: str | None, authorization: str | None
) -> TokenPayload:
    """Authenticate an admin from the bearer header or the session cookie.

    Args:
        jwt_service: JWT service from DI
        auth_token: Session token from the auth_token cookie
        authorization: Authorization header

    Returns:
        Verified token payload

    Raises:
        UnauthorizedError: If no valid admin token was presented
    """
    token = bearer_token(authorization) or auth_token
    if not token:
        raise UnauthorizedError("Not authenticated")

    try:
        return jwt_service.verify_admin(token)
    except JWTError as e:
        raise UnauthorizedError(str(e))


def verify_cron_secret(settings: Settings, authorization: str | None) -> None:
    """Check the scheduler's shared secret.

    Raises:
        UnauthorizedError: If the secret is unset, missing or wrong
    """
    secret = settings.cron.secret
    if not secret:
        logfire.warn("Scheduled check rejected: CRON__SECRET is not configured")
        raise UnauthorizedError("Unauthorized")

    expected = f"Bearer {secret}"
    if not authorization or not hmac.compare_digest(
        authorization.encode(), expected.encode()
    ):
        logfire.warn("Scheduled check rejected: bad bearer secret")
        raise UnauthorizedError("Unauthorized")
