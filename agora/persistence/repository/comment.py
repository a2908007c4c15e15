"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import and_, func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Comment
from agora.domain.repository import CommentRepository
from agora.domain.value import CommentableRef, CommentId, TenantId
from agora.persistence.mappers import comment_to_dict, row_to_comment
from agora.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _on_commentable(tenant_id: TenantId, commentable: CommentableRef):
        return and_(
            comments_table.c.tenant_id == tenant_id,
            comments_table.c.commentable_type == commentable.commentable_type.root,
            comments_table.c.commentable_id == commentable.commentable_id,
        )

    async def find_by_id(
        self, tenant_id: TenantId, comment_id: CommentId
    ) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(
            and_(
                comments_table.c.tenant_id == tenant_id,
                comments_table.c.id == comment_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_by_commentable(
        self, tenant_id: TenantId, commentable: CommentableRef
    ) -> List[Comment]:
        """Find all comments of a commentable in creation order."""
        stmt = (
            select(comments_table)
            .where(self._on_commentable(tenant_id, commentable))
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def count_by_commentable(
        self, tenant_id: TenantId, commentable: CommentableRef
    ) -> int:
        """Count comments of a commentable."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(self._on_commentable(tenant_id, commentable))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update body)."""
        existing = await self.find_by_id(comment.tenant_id, comment.id)

        if existing:
            stmt = (
                update(comments_table)
                .where(comments_table.c.id == comment.id)
                .values(
                    body=comment.body,
                    alignment=comment.alignment.value if comment.alignment else None,
                    updated_at=comment.updated_at,
                )
            )
        else:
            stmt = insert(comments_table).values(**comment_to_dict(comment))

        await self.session.execute(stmt)
        await self.session.flush()
        return comment
