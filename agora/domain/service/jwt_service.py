"""JWT token domain service."""

import logfire

from agora.config import AuthSettings
from agora.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for session token operations.

    Tokens are issued by the host platform; this service verifies them to
    answer "is the caller authenticated" and "who is the current user".
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, tenant_id: str) -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID
            tenant_id: Tenant the session belongs to

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            token = create_token(user_id, tenant_id, self.auth_settings)
            logfire.info("JWT token created", user_id=user_id, tenant_id=tenant_id)
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
                logfire.info("JWT token verified", user_id=payload.user_id)
                return payload
            except Exception as e:
                logfire.error("JWT token verification failed", error=str(e))
                raise

    def get_payload_from_token(self, token: str | None) -> TokenPayload | None:
        """Extract the token payload without raising exceptions.

        This is a convenience method for API routes that need to optionally
        authenticate users without failing on invalid tokens.

        Args:
            token: JWT token string (optional)

        Returns:
            Payload if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            return self.verify_token(token)
        except Exception as e:
            # Invalid or expired token, treat as unauthenticated
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None
