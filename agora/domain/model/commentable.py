"""Commentable entity.

A commentable is any entity of the host platform (a debate, a proposal,
a meeting) that accepts attached comments. The comment core only keeps
what it needs to reason about: who authored it and which comment
features it has switched on.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import (
    CommentableCapabilities,
    CommentableId,
    CommentableRef,
    CommentableType,
    TenantId,
    UserId,
)


class Commentable(DomainModel):
    """Commentable entity.

    The capability flags are fixed at registration so the comment core never
    has to probe the host entity for optional behaviour.
    """

    id: CommentableId
    tenant_id: TenantId
    commentable_type: CommentableType
    title: str = Field(min_length=1, max_length=300)
    author_id: Optional[UserId] = None
    allows_alignment: bool = False
    allows_votes: bool = False
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def ref(self) -> CommentableRef:
        """Polymorphic reference to this commentable."""
        return CommentableRef(
            commentable_type=self.commentable_type, commentable_id=self.id
        )

    @property
    def capabilities(self) -> CommentableCapabilities:
        """Capability descriptor consulted by the comment core."""
        return CommentableCapabilities(
            allows_alignment=self.allows_alignment,
            allows_votes=self.allows_votes,
            has_author=self.author_id is not None,
        )
