"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import and_, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import User
from agora.domain.repository import UserRepository
from agora.domain.value import TenantId, UserId
from agora.persistence.mappers import row_to_user, user_to_dict
from agora.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, tenant_id: TenantId, user_id: UserId) -> Optional[User]:
        """Find a user by ID within a tenant.

        Args:
            tenant_id: Tenant the user must belong to
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(
            and_(users_table.c.tenant_id == tenant_id, users_table.c.id == user_id)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        stmt = insert(users_table).values(**user_to_dict(user))
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={
                "name": stmt.excluded.name,
                "nickname": stmt.excluded.nickname,
                "email": stmt.excluded.email,
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return user
