"""Commentable repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from agora.domain.model.commentable import Commentable
from agora.domain.value import CommentableRef, TenantId


class CommentableRepository(ABC):
    """Repository for Commentable entity.

    Defines the contract for commentable persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_ref(
        self, tenant_id: TenantId, ref: CommentableRef
    ) -> Optional[Commentable]:
        """Find a commentable by its polymorphic reference.

        Args:
            tenant_id: Tenant the commentable must belong to
            ref: Commentable type and id

        Returns:
            The commentable if found within the tenant, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, commentable: Commentable) -> Commentable:
        """Save a commentable (create or update).

        Args:
            commentable: The commentable to save

        Returns:
            The saved commentable
        """
        pass
