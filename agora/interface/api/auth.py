"""Request authentication helpers for API routes."""

from fastapi import HTTPException, status

from agora.domain.service import JWTService
from agora.util.jwt import TokenPayload


def require_session(
    jwt_service: JWTService, auth_token: str | None, tenant_id: str, action: str
) -> TokenPayload:
    """Return the caller's session, or fail the request.

    Args:
        jwt_service: JWT service for token verification
        auth_token: JWT token from cookie
        tenant_id: Tenant addressed by the request path
        action: What the caller tried to do, for the error message

    Raises:
        HTTPException: 401 if not authenticated, 403 if the session belongs
            to another tenant
    """
    payload = jwt_service.get_payload_from_token(auth_token)
    if not payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    if payload.tenant_id != tenant_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Session does not belong to this tenant",
        )
    return payload


def optional_viewer(
    jwt_service: JWTService, auth_token: str | None, tenant_id: str
) -> str | None:
    """Return the caller's user ID if they hold a session for this tenant."""
    payload = jwt_service.get_payload_from_token(auth_token)
    if payload and payload.tenant_id == tenant_id:
        return payload.user_id
    return None
