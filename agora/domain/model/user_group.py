"""User group entities.

A user group is an organization (association, collective, ...) that its
members can speak for. Only verified groups may author comments.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import DisplayName, TenantId, UserGroupId, UserId


class UserGroup(DomainModel):
    """User group entity."""

    id: UserGroupId
    tenant_id: TenantId
    name: DisplayName
    verified_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def verified(self) -> bool:
        """Whether the group has been verified by the platform."""
        return self.verified_at is not None


class UserGroupMembership(DomainModel):
    """Membership of a user in a user group."""

    user_id: UserId
    user_group_id: UserGroupId
    created_at: datetime = Field(default_factory=datetime.now)
