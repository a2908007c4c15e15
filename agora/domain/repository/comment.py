"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from agora.domain.model.comment import Comment
from agora.domain.value import CommentableRef, CommentId, TenantId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(
        self, tenant_id: TenantId, comment_id: CommentId
    ) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            tenant_id: Tenant the comment must belong to
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_commentable(
        self, tenant_id: TenantId, commentable: CommentableRef
    ) -> List[Comment]:
        """Find all comments of a commentable, at every depth.

        Comments are returned in insertion order; ranking is applied by
        the caller.

        Args:
            tenant_id: Tenant the comments belong to
            commentable: The commentable reference

        Returns:
            List of comments in creation order
        """
        pass

    @abstractmethod
    async def count_by_commentable(
        self, tenant_id: TenantId, commentable: CommentableRef
    ) -> int:
        """Count comments of a commentable.

        Args:
            tenant_id: Tenant the comments belong to
            commentable: The commentable reference

        Returns:
            Number of comments
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass
