"""PostgreSQL implementation of Commentable repository."""

from typing import Optional

from sqlalchemy import and_, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Commentable
from agora.domain.repository import CommentableRepository
from agora.domain.value import CommentableRef, TenantId
from agora.persistence.mappers import commentable_to_dict, row_to_commentable
from agora.persistence.tables import commentables_table


class PostgresCommentableRepository(CommentableRepository):
    """PostgreSQL implementation of CommentableRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_ref(
        self, tenant_id: TenantId, ref: CommentableRef
    ) -> Optional[Commentable]:
        """Find a commentable by reference within a tenant."""
        stmt = select(commentables_table).where(
            and_(
                commentables_table.c.tenant_id == tenant_id,
                commentables_table.c.commentable_type == ref.commentable_type.root,
                commentables_table.c.id == ref.commentable_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_commentable(dict(row)) if row else None

    async def save(self, commentable: Commentable) -> Commentable:
        """Save a commentable (create or update)."""
        values = commentable_to_dict(commentable)
        stmt = insert(commentables_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[commentables_table.c.id],
            set_={
                "title": stmt.excluded.title,
                "author_id": stmt.excluded.author_id,
                "allows_alignment": stmt.excluded.allows_alignment,
                "allows_votes": stmt.excluded.allows_votes,
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return commentable
