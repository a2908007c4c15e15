"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from agora.config import CommentSettings
from agora.domain.error import FeatureDisabledError, ValidationError
from agora.domain.model import Comment, Commentable
from agora.domain.repository import CommentRepository
from agora.domain.value import (
    Alignment,
    AuthorIdentity,
    CommentableRef,
    CommentId,
    TenantId,
)

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            comment_settings: Comment behaviour settings
        """
        self.comment_repository = comment_repository
        self.comment_settings = comment_settings

    async def create_comment(
        self,
        commentable: Commentable,
        author: AuthorIdentity,
        body: str,
        parent_id: CommentId | None = None,
        alignment: Alignment | None = None,
    ) -> Comment:
        """Create a comment on a commentable or reply to another comment.

        Args:
            commentable: Commentable receiving the comment
            author: Resolved author identity
            body: Comment text
            parent_id: Parent comment ID for replies (None for top-level)
            alignment: Optional stance of the comment

        Returns:
            Created comment

        Raises:
            ValidationError: If the body is empty or too long, or the parent
                comment is missing or belongs to another commentable, or the
                reply would be nested deeper than the configured maximum
            FeatureDisabledError: If an alignment is given but the
                commentable does not allow alignment
        """
        with logfire.span(
            "comment_service.create_comment",
            tenant_id=str(commentable.tenant_id),
            commentable=str(commentable.ref),
            author_kind=author.kind.value,
            user_id=str(author.user_id),
            parent_id=str(parent_id) if parent_id else None,
            alignment=alignment.value if alignment else None,
        ):
            text = body.strip()
            if not text:
                logfire.warn("Empty comment body rejected", commentable=str(commentable.ref))
                raise ValidationError("Comment body cannot be empty")
            if len(text) > self.comment_settings.max_body_length:
                raise ValidationError(
                    f"Comment body cannot exceed "
                    f"{self.comment_settings.max_body_length} characters"
                )

            if alignment is not None and not commentable.capabilities.allows_alignment:
                logfire.warn(
                    "Alignment on commentable without alignment",
                    commentable=str(commentable.ref),
                    alignment=alignment.value,
                )
                raise FeatureDisabledError("Alignment", str(commentable.ref))

            # If replying, verify parent exists on the same commentable
            depth = 0
            if parent_id:
                parent = await self.comment_repository.find_by_id(
                    commentable.tenant_id, parent_id
                )
                if not parent:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        commentable=str(commentable.ref),
                    )
                    raise ValidationError("Parent comment not found")
                if parent.commentable != commentable.ref:
                    logfire.error(
                        "Parent comment does not belong to commentable",
                        parent_id=str(parent_id),
                        parent_commentable=str(parent.commentable),
                        target_commentable=str(commentable.ref),
                    )
                    raise ValidationError(
                        "Parent comment does not belong to this commentable"
                    )
                depth = parent.depth + 1
                if depth > self.comment_settings.max_depth:
                    logfire.warn(
                        "Reply nested too deep",
                        parent_id=str(parent_id),
                        depth=depth,
                    )
                    raise ValidationError(
                        f"Replies cannot be nested more than "
                        f"{self.comment_settings.max_depth} levels deep"
                    )

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                tenant_id=commentable.tenant_id,
                commentable=commentable.ref,
                author=author,
                body=text,
                parent_id=parent_id,
                depth=depth,
                alignment=alignment,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                commentable=str(commentable.ref),
                author=author.display_name.root,
                depth=depth,
            )
            return saved

    async def list_comments(
        self, tenant_id: TenantId, commentable: CommentableRef
    ) -> list[Comment]:
        """Get all comments of a commentable, at every depth, in creation order.

        Args:
            tenant_id: Tenant the comments belong to
            commentable: Commentable reference

        Returns:
            List of comments in creation order
        """
        with logfire.span(
            "comment_service.list_comments",
            tenant_id=str(tenant_id),
            commentable=str(commentable),
        ):
            comments = await self.comment_repository.find_by_commentable(
                tenant_id, commentable
            )
            logfire.info(
                "Comments retrieved for commentable",
                commentable=str(commentable),
                count=len(comments),
            )
            return comments

    async def count_comments(
        self, tenant_id: TenantId, commentable: CommentableRef
    ) -> int:
        """Count the comments of a commentable."""
        return await self.comment_repository.count_by_commentable(
            tenant_id, commentable
        )

    async def get_comment_by_id(
        self, tenant_id: TenantId, comment_id: CommentId
    ) -> Comment | None:
        """Get a comment by ID.

        Args:
            tenant_id: Tenant the comment must belong to
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(tenant_id, comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment
