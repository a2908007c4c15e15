"""In-memory comment repository for testing."""

from typing import Optional

from agora.domain.model.comment import Comment
from agora.domain.repository.comment import CommentRepository
from agora.domain.value import CommentableRef, CommentId, TenantId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        # dicts keep insertion order, which is the creation order
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(
        self, tenant_id: TenantId, comment_id: CommentId
    ) -> Optional[Comment]:
        """Find a comment by ID."""
        comment = self._comments.get(comment_id)
        if comment and comment.tenant_id == tenant_id:
            return comment
        return None

    async def find_by_commentable(
        self, tenant_id: TenantId, commentable: CommentableRef
    ) -> list[Comment]:
        """Find all comments of a commentable in creation order."""
        comments = [
            c
            for c in self._comments.values()
            if c.tenant_id == tenant_id and c.commentable == commentable
        ]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def count_by_commentable(
        self, tenant_id: TenantId, commentable: CommentableRef
    ) -> int:
        """Count comments of a commentable."""
        return sum(
            1
            for c in self._comments.values()
            if c.tenant_id == tenant_id and c.commentable == commentable
        )

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment
