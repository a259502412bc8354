"""JWT token domain service."""

import logfire

from waresys.config import AuthSettings
from waresys.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, subject: str) -> str:
        """Create JWT token for a client.

        Args:
            subject: Client or user identifier

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", subject=subject):
            token = create_token(subject, self.auth_settings)
            logfire.info("JWT token created", subject=subject)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.debug("JWT token verified", subject=payload.sub)
                return payload
            except Exception as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise
