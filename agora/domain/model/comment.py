"""Comment entity.

Comments are threaded discussions on a commentable. A reply points at its
parent comment, which must live on the same commentable.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import (
    Alignment,
    AuthorIdentity,
    CommentableRef,
    CommentId,
    TenantId,
)


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a commentable or a reply to another comment.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - depth: Nesting level (0 for top-level, increments with each reply)

    Votes are not stored on the comment; scores are derived from the
    vote ledger when a listing is ranked.
    """

    id: CommentId
    tenant_id: TenantId
    commentable: CommentableRef
    author: AuthorIdentity
    body: str = Field(min_length=1, max_length=10000)
    parent_id: Optional[CommentId] = None
    depth: int = Field(default=0, ge=0)
    alignment: Optional[Alignment] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_reply(self) -> bool:
        """Whether this comment replies to another comment."""
        return self.parent_id is not None
