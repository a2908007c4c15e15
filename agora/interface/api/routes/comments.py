"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from agora.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from agora.domain.error import DomainError
from agora.domain.service import JWTService
from agora.domain.value import Alignment, CommentOrder
from agora.interface.api.auth import optional_viewer, require_session
from agora.interface.error import to_http_exception

router = APIRouter(
    prefix="/tenants/{tenant_id}/commentables/{commentable_type}/{commentable_id}",
    tags=["comments"],
    route_class=DishkaRoute,
)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    body: str = Field(min_length=1, max_length=10000)
    parent_id: str | None = None  # Parent comment ID for replies
    alignment: Alignment | None = None
    as_group_id: str | None = None  # Comment on behalf of a verified user group


@router.get("/comments", response_model=GetCommentsResponse)
async def get_comments(
    tenant_id: str,
    commentable_type: str,
    commentable_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    order: CommentOrder | None = None,
    auth_token: str | None = Cookie(default=None),
) -> GetCommentsResponse:
    """Get a commentable's comments as ranked threads.

    Authentication is optional; when present, each comment reports the
    caller's own vote.

    Args:
        tenant_id: Tenant UUID
        commentable_type: Kind of commentable
        commentable_id: Commentable UUID
        get_comments_use_case: Get comments use case from DI
        jwt_service: JWT service for token verification (injected)
        order: "recent" or "best" (defaults to the configured order)
        auth_token: JWT token from cookie

    Returns:
        Ranked comment threads with tallies
    """
    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(
                tenant_id=tenant_id,
                commentable_type=commentable_type,
                commentable_id=commentable_id,
                order=order,
                viewer_id=optional_viewer(jwt_service, auth_token, tenant_id),
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post(
    "/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    tenant_id: str,
    commentable_type: str,
    commentable_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Create a comment on a commentable or reply to another comment.

    Requires authentication.

    Args:
        tenant_id: Tenant UUID
        commentable_type: Kind of commentable
        commentable_id: Commentable UUID
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created comment details

    Raises:
        HTTPException: If not authenticated, not allowed, or validation fails
    """
    session = require_session(jwt_service, auth_token, tenant_id, "create comments")

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                tenant_id=tenant_id,
                commentable_type=commentable_type,
                commentable_id=commentable_id,
                user_id=session.user_id,
                body=request.body,
                parent_id=request.parent_id,
                alignment=request.alignment,
                as_group_id=request.as_group_id,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
