"""In-memory commentable repository for testing."""

from typing import Optional

from agora.domain.model.commentable import Commentable
from agora.domain.repository.commentable import CommentableRepository
from agora.domain.value import CommentableRef, TenantId


class InMemoryCommentableRepository(CommentableRepository):
    """In-memory implementation of CommentableRepository for testing."""

    def __init__(self) -> None:
        self._commentables: dict[CommentableRef, Commentable] = {}

    async def find_by_ref(
        self, tenant_id: TenantId, ref: CommentableRef
    ) -> Optional[Commentable]:
        """Find a commentable by reference within a tenant."""
        commentable = self._commentables.get(ref)
        if commentable and commentable.tenant_id == tenant_id:
            return commentable
        return None

    async def save(self, commentable: Commentable) -> Commentable:
        """Save or update a commentable."""
        self._commentables[commentable.ref] = commentable
        return commentable
