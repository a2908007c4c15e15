"""PostgreSQL implementation of UserGroup repository."""

from typing import List, Optional

from sqlalchemy import and_, exists, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import UserGroup, UserGroupMembership
from agora.domain.repository import UserGroupRepository
from agora.domain.value import TenantId, UserGroupId, UserId
from agora.persistence.mappers import row_to_user_group, user_group_to_dict
from agora.persistence.tables import user_group_memberships_table, user_groups_table


class PostgresUserGroupRepository(UserGroupRepository):
    """PostgreSQL implementation of UserGroupRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, tenant_id: TenantId, user_group_id: UserGroupId
    ) -> Optional[UserGroup]:
        """Find a user group by ID within a tenant."""
        stmt = select(user_groups_table).where(
            and_(
                user_groups_table.c.tenant_id == tenant_id,
                user_groups_table.c.id == user_group_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user_group(dict(row)) if row else None

    async def find_by_member(self, tenant_id: TenantId, user_id: UserId) -> List[UserGroup]:
        """Find all groups a user is a member of, ordered by name."""
        stmt = (
            select(user_groups_table)
            .join(
                user_group_memberships_table,
                user_group_memberships_table.c.user_group_id == user_groups_table.c.id,
            )
            .where(
                and_(
                    user_groups_table.c.tenant_id == tenant_id,
                    user_group_memberships_table.c.user_id == user_id,
                )
            )
            .order_by(user_groups_table.c.name)
        )
        result = await self.session.execute(stmt)
        return [row_to_user_group(dict(row)) for row in result.mappings().all()]

    async def is_verified_member(
        self, tenant_id: TenantId, user_id: UserId, user_group_id: UserGroupId
    ) -> bool:
        """Check whether a user belongs to a verified group."""
        stmt = select(
            exists().where(
                and_(
                    user_groups_table.c.id == user_group_id,
                    user_groups_table.c.tenant_id == tenant_id,
                    user_groups_table.c.verified_at.is_not(None),
                    user_group_memberships_table.c.user_group_id
                    == user_groups_table.c.id,
                    user_group_memberships_table.c.user_id == user_id,
                )
            )
        )
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def save(self, user_group: UserGroup) -> UserGroup:
        """Save a user group (create or update)."""
        stmt = insert(user_groups_table).values(**user_group_to_dict(user_group))
        stmt = stmt.on_conflict_do_update(
            index_elements=[user_groups_table.c.id],
            set_={
                "name": stmt.excluded.name,
                "verified_at": stmt.excluded.verified_at,
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return user_group

    async def add_membership(self, membership: UserGroupMembership) -> None:
        """Add a user to a group (no-op if already a member)."""
        stmt = (
            insert(user_group_memberships_table)
            .values(**membership.model_dump())
            .on_conflict_do_nothing(constraint="uq_user_group_membership")
        )
        await self.session.execute(stmt)
        await self.session.flush()
