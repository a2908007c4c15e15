"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from agora.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    RemoveVoteRequest,
    RemoveVoteResponse,
    RemoveVoteUseCase,
)
from agora.domain.error import DomainError
from agora.domain.service import JWTService
from agora.interface.api.auth import require_session
from agora.interface.error import to_http_exception

router = APIRouter(
    prefix="/tenants/{tenant_id}/comments/{comment_id}",
    tags=["votes"],
    route_class=DishkaRoute,
)


class CastVoteAPIRequest(BaseModel):
    """API request for voting on a comment."""

    weight: int  # +1 or -1


@router.post("/votes", response_model=CastVoteResponse)
async def cast_vote(
    tenant_id: str,
    comment_id: str,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Up- or down-vote a comment.

    Requires authentication. Voting again replaces the previous vote.

    Args:
        tenant_id: Tenant UUID
        comment_id: Comment UUID
        request: Vote weight
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Vote details with the comment's updated tally
    """
    session = require_session(jwt_service, auth_token, tenant_id, "vote")

    try:
        return await cast_vote_use_case.execute(
            CastVoteRequest(
                tenant_id=tenant_id,
                comment_id=comment_id,
                user_id=session.user_id,
                weight=request.weight,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/votes", response_model=RemoveVoteResponse)
async def remove_vote(
    tenant_id: str,
    comment_id: str,
    remove_vote_use_case: FromDishka[RemoveVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> RemoveVoteResponse:
    """Withdraw the caller's vote from a comment.

    Requires authentication.
    """
    session = require_session(jwt_service, auth_token, tenant_id, "remove votes")

    try:
        return await remove_vote_use_case.execute(
            RemoveVoteRequest(
                tenant_id=tenant_id,
                comment_id=comment_id,
                user_id=session.user_id,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
