"""In-memory user group repository for testing."""

from typing import Optional

from agora.domain.model.user_group import UserGroup, UserGroupMembership
from agora.domain.repository.user_group import UserGroupRepository
from agora.domain.value import TenantId, UserGroupId, UserId


class InMemoryUserGroupRepository(UserGroupRepository):
    """In-memory implementation of UserGroupRepository for testing."""

    def __init__(self) -> None:
        self._groups: dict[UserGroupId, UserGroup] = {}
        self._memberships: set[tuple[UserId, UserGroupId]] = set()

    async def find_by_id(
        self, tenant_id: TenantId, user_group_id: UserGroupId
    ) -> Optional[UserGroup]:
        """Find a user group by ID within a tenant."""
        group = self._groups.get(user_group_id)
        if group and group.tenant_id == tenant_id:
            return group
        return None

    async def find_by_member(self, tenant_id: TenantId, user_id: UserId) -> list[UserGroup]:
        """Find all groups a user is a member of, ordered by name."""
        groups = [
            self._groups[group_id]
            for member_id, group_id in self._memberships
            if member_id == user_id
            and group_id in self._groups
            and self._groups[group_id].tenant_id == tenant_id
        ]
        groups.sort(key=lambda g: g.name.root)
        return groups

    async def is_verified_member(
        self, tenant_id: TenantId, user_id: UserId, user_group_id: UserGroupId
    ) -> bool:
        """Check whether a user belongs to a verified group."""
        group = await self.find_by_id(tenant_id, user_group_id)
        return (
            group is not None
            and group.verified
            and (user_id, user_group_id) in self._memberships
        )

    async def save(self, user_group: UserGroup) -> UserGroup:
        """Save or update a user group."""
        self._groups[user_group.id] = user_group
        return user_group

    async def add_membership(self, membership: UserGroupMembership) -> None:
        """Add a user to a group."""
        self._memberships.add((membership.user_id, membership.user_group_id))
