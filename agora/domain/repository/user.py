"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from agora.domain.model.user import User
from agora.domain.value import TenantId, UserId


class UserRepository(ABC):
    """Repository for User entity."""

    @abstractmethod
    async def find_by_id(self, tenant_id: TenantId, user_id: UserId) -> Optional[User]:
        """Find a user by ID within a tenant.

        Args:
            tenant_id: Tenant the user must belong to
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        pass
