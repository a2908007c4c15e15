"""Register commentable use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from agora.application.usecase.base import BaseUseCase
from agora.domain.error import ValidationError
from agora.domain.service import CommentableService
from agora.domain.value import CommentableId, CommentableType, TenantId, UserId


class RegisterCommentableRequest(BaseModel):
    """Register commentable request."""

    tenant_id: str  # UUID string
    commentable_type: str
    commentable_id: str | None = None  # Host entity ID; generated when omitted
    title: str = Field(min_length=1, max_length=300)
    author_id: str | None = None
    allows_alignment: bool = False
    allows_votes: bool = False


class RegisterCommentableResponse(BaseModel):
    """Register commentable response."""

    commentable_type: str
    commentable_id: str
    title: str
    author_id: str | None
    allows_alignment: bool
    allows_votes: bool
    has_author: bool
    created_at: datetime


class RegisterCommentableUseCase(BaseUseCase):
    """Use case for registering a host entity so it can receive comments."""

    def __init__(self, commentable_service: CommentableService) -> None:
        self.commentable_service = commentable_service

    async def execute(
        self, request: RegisterCommentableRequest
    ) -> RegisterCommentableResponse:
        """Execute register commentable flow.

        Args:
            request: Register commentable request

        Returns:
            The registered commentable with its capability flags

        Raises:
            ValidationError: If an ID or the commentable type is malformed
        """
        try:
            tenant_id = TenantId(UUID(request.tenant_id))
            commentable_type = CommentableType(request.commentable_type)
            author_id = UserId(UUID(request.author_id)) if request.author_id else None
            commentable_id = (
                CommentableId(UUID(request.commentable_id))
                if request.commentable_id
                else None
            )
        except ValueError as e:
            raise ValidationError(f"Invalid commentable: {e}") from e

        commentable = await self.commentable_service.register_commentable(
            tenant_id=tenant_id,
            commentable_type=commentable_type,
            title=request.title,
            author_id=author_id,
            allows_alignment=request.allows_alignment,
            allows_votes=request.allows_votes,
            commentable_id=commentable_id,
        )
        capabilities = commentable.capabilities

        return RegisterCommentableResponse(
            commentable_type=commentable.commentable_type.root,
            commentable_id=str(commentable.id),
            title=commentable.title,
            author_id=str(commentable.author_id) if commentable.author_id else None,
            allows_alignment=capabilities.allows_alignment,
            allows_votes=capabilities.allows_votes,
            has_author=capabilities.has_author,
            created_at=commentable.created_at,
        )
