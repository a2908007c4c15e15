"""Commentable domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from agora.domain.error import NotFoundError
from agora.domain.model import Commentable
from agora.domain.repository import CommentableRepository
from agora.domain.value import (
    CommentableId,
    CommentableRef,
    CommentableType,
    TenantId,
    UserId,
)

from .base import Service


class CommentableService(Service):
    """Domain service for commentable registration and lookup."""

    def __init__(self, commentable_repository: CommentableRepository) -> None:
        """Initialize commentable service.

        Args:
            commentable_repository: Commentable repository
        """
        self.commentable_repository = commentable_repository

    async def register_commentable(
        self,
        tenant_id: TenantId,
        commentable_type: CommentableType,
        title: str,
        author_id: UserId | None = None,
        allows_alignment: bool = False,
        allows_votes: bool = False,
        commentable_id: CommentableId | None = None,
    ) -> Commentable:
        """Register a host entity as a commentable.

        Re-registering an existing reference updates its title, author and
        capability flags.

        Args:
            tenant_id: Owning tenant
            commentable_type: Kind of host entity
            title: Title shown in notifications
            author_id: Author of the host entity, if it has one
            allows_alignment: Whether comments may carry a stance
            allows_votes: Whether comments may be voted on
            commentable_id: Host entity ID (generated when omitted)

        Returns:
            The registered commentable
        """
        with logfire.span(
            "commentable_service.register_commentable",
            tenant_id=str(tenant_id),
            commentable_type=commentable_type.root,
            commentable_id=str(commentable_id) if commentable_id else None,
        ):
            commentable = Commentable(
                id=commentable_id or CommentableId(uuid4()),
                tenant_id=tenant_id,
                commentable_type=commentable_type,
                title=title,
                author_id=author_id,
                allows_alignment=allows_alignment,
                allows_votes=allows_votes,
                created_at=datetime.now(),
            )
            saved = await self.commentable_repository.save(commentable)
            logfire.info(
                "Commentable registered",
                commentable=str(saved.ref),
                has_author=saved.capabilities.has_author,
                allows_alignment=allows_alignment,
                allows_votes=allows_votes,
            )
            return saved

    async def get_commentable(
        self, tenant_id: TenantId, ref: CommentableRef
    ) -> Commentable:
        """Get a commentable by reference.

        Args:
            tenant_id: Tenant the commentable must belong to
            ref: Commentable reference

        Returns:
            The commentable

        Raises:
            NotFoundError: If no such commentable exists in the tenant
        """
        with logfire.span(
            "commentable_service.get_commentable",
            tenant_id=str(tenant_id),
            commentable=str(ref),
        ):
            commentable = await self.commentable_repository.find_by_ref(tenant_id, ref)
            if not commentable:
                logfire.warn("Commentable not found", commentable=str(ref))
                raise NotFoundError("Commentable", str(ref))
            return commentable
