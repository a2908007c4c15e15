"""Commentable routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from agora.application.usecase.commentable import (
    RegisterCommentableRequest,
    RegisterCommentableResponse,
    RegisterCommentableUseCase,
)
from agora.domain.error import DomainError
from agora.domain.service import JWTService
from agora.interface.api.auth import require_session
from agora.interface.error import to_http_exception

router = APIRouter(
    prefix="/tenants/{tenant_id}", tags=["commentables"], route_class=DishkaRoute
)


class RegisterCommentableAPIRequest(BaseModel):
    """API request for registering a commentable."""

    commentable_type: str = Field(min_length=1, max_length=50)
    commentable_id: str | None = None
    title: str = Field(min_length=1, max_length=300)
    author_id: str | None = None
    allows_alignment: bool = False
    allows_votes: bool = False


@router.post(
    "/commentables",
    response_model=RegisterCommentableResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register_commentable(
    tenant_id: str,
    request: RegisterCommentableAPIRequest,
    register_commentable_use_case: FromDishka[RegisterCommentableUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> RegisterCommentableResponse:
    """Register a host entity so it can receive comments.

    Requires authentication. Re-registering updates the capability flags.
    """
    require_session(jwt_service, auth_token, tenant_id, "register commentables")

    try:
        return await register_commentable_use_case.execute(
            RegisterCommentableRequest(
                tenant_id=tenant_id,
                commentable_type=request.commentable_type,
                commentable_id=request.commentable_id,
                title=request.title,
                author_id=request.author_id,
                allows_alignment=request.allows_alignment,
                allows_votes=request.allows_votes,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
