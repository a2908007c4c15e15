"""User group repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from agora.domain.model.user_group import UserGroup, UserGroupMembership
from agora.domain.value import TenantId, UserGroupId, UserId


class UserGroupRepository(ABC):
    """Repository for UserGroup entity and its memberships."""

    @abstractmethod
    async def find_by_id(
        self, tenant_id: TenantId, user_group_id: UserGroupId
    ) -> Optional[UserGroup]:
        """Find a user group by ID within a tenant.

        Args:
            tenant_id: Tenant the group must belong to
            user_group_id: The group's unique identifier

        Returns:
            The group if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_member(self, tenant_id: TenantId, user_id: UserId) -> List[UserGroup]:
        """Find all groups a user is a member of.

        Args:
            tenant_id: Tenant the groups belong to
            user_id: The member's user ID

        Returns:
            Groups ordered by name
        """
        pass

    @abstractmethod
    async def is_verified_member(
        self, tenant_id: TenantId, user_id: UserId, user_group_id: UserGroupId
    ) -> bool:
        """Check whether a user belongs to a verified group.

        Args:
            tenant_id: Tenant the group must belong to
            user_id: The user's ID
            user_group_id: The group's ID

        Returns:
            True iff the group exists in the tenant, is verified, and the user
            is one of its members
        """
        pass

    @abstractmethod
    async def save(self, user_group: UserGroup) -> UserGroup:
        """Save a user group (create or update)."""
        pass

    @abstractmethod
    async def add_membership(self, membership: UserGroupMembership) -> None:
        """Add a user to a group (no-op if already a member)."""
        pass
