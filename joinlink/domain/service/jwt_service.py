"""Admin session token domain service."""

import logfire

from joinlink.config import AuthSettings
from joinlink.util.jwt import JWTError, TokenPayload, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for admin session tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def verify_admin(self, token: str) -> TokenPayload:
        """Verify a session token and check the admin allow-list.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If the token is invalid, expired or not an admin's
        """
        with logfire.span("jwt_service.verify_admin"):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

            admins = self.auth_settings.admin_emails
            if admins and payload.email not in admins:
                logfire.warn("Token holder is not an admin", email=payload.email)
                raise JWTError("Not an admin")

            logfire.info("Admin token verified", sub=payload.sub, email=payload.email)
            return payload
