"""Create comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase
from agora.domain.error import ValidationError
from agora.domain.service import (
    AuthorshipService,
    CommentableService,
    CommentCreated,
    CommentService,
    NotificationService,
)
from agora.domain.value import (
    Alignment,
    CommentableId,
    CommentableRef,
    CommentableType,
    CommentId,
    TenantId,
    UserGroupId,
    UserId,
)

from .schema import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    tenant_id: str  # UUID string
    commentable_type: str
    commentable_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    body: str
    parent_id: str | None = None  # Parent comment ID for replies
    alignment: Alignment | None = None
    as_group_id: str | None = None  # Comment on behalf of this user group


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem
    notified: bool  # Whether a notification event was emitted
    comment_count: int  # Comments on the commentable, this one included


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a commentable or replying to a comment."""

    def __init__(
        self,
        commentable_service: CommentableService,
        authorship_service: AuthorshipService,
        comment_service: CommentService,
        notification_service: NotificationService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            commentable_service: Commentable domain service
            authorship_service: Resolves the identity the comment is posted as
            comment_service: Comment domain service
            notification_service: Dispatches comment notifications
        """
        self.commentable_service = commentable_service
        self.authorship_service = authorship_service
        self.comment_service = comment_service
        self.notification_service = notification_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Load the commentable (and its capabilities)
        2. Resolve the author identity (user or verified user group)
        3. Create the comment (validates body, alignment and parent)
        4. Dispatch the notification for the interested party

        Args:
            request: Create comment request

        Returns:
            Create comment response with the stored comment

        Raises:
            NotFoundError: If the commentable does not exist
            AuthorizationError: If the author cannot be resolved, or alignment
                is disabled on the commentable
            ValidationError: If the body or parent is invalid, or an ID or the
                commentable type is malformed
        """
        try:
            tenant_id = TenantId(UUID(request.tenant_id))
            ref = CommentableRef(
                commentable_type=CommentableType(request.commentable_type),
                commentable_id=CommentableId(UUID(request.commentable_id)),
            )
            user_id = UserId(UUID(request.user_id))
            parent_id = CommentId(UUID(request.parent_id)) if request.parent_id else None
            as_group_id = (
                UserGroupId(UUID(request.as_group_id)) if request.as_group_id else None
            )
        except ValueError as e:
            raise ValidationError(f"Invalid comment reference: {e}") from e

        commentable = await self.commentable_service.get_commentable(tenant_id, ref)

        author = await self.authorship_service.resolve(
            tenant_id=tenant_id,
            acting_user_id=user_id,
            as_group_id=as_group_id,
        )

        comment = await self.comment_service.create_comment(
            commentable=commentable,
            author=author,
            body=request.body,
            parent_id=parent_id,
            alignment=request.alignment,
        )

        notification = await self.notification_service.comment_created(
            CommentCreated(comment=comment, commentable=commentable)
        )
        logfire.info(
            "Comment created",
            comment_id=str(comment.id),
            commentable=str(ref),
            notified=notification is not None,
        )

        comment_count = await self.comment_service.count_comments(tenant_id, ref)

        return CreateCommentResponse(
            comment=CommentItem.from_comment(comment),
            notified=notification is not None,
            comment_count=comment_count,
        )
