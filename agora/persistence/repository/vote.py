"""PostgreSQL implementation of Vote repository."""

from typing import Sequence

from sqlalchemy import and_, case, delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Vote
from agora.domain.repository import VoteRepository
from agora.domain.value import CommentId, UserId, VoteTally, VoteWeight
from agora.persistence.mappers import row_to_vote, vote_to_dict
from agora.persistence.tables import comment_votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote or replace the weight of the existing one.

        Relies on the (comment_id, author_id) unique constraint so concurrent
        re-votes by one author collapse onto a single row.
        """
        stmt = insert(comment_votes_table).values(**vote_to_dict(vote))
        stmt = stmt.on_conflict_do_update(
            constraint="uq_comment_votes_comment_author",
            set_={
                "weight": stmt.excluded.weight,
                "updated_at": stmt.excluded.updated_at,
            },
        ).returning(comment_votes_table)
        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_vote(dict(row))

    async def delete_by_comment_and_author(
        self, comment_id: CommentId, author_id: UserId
    ) -> bool:
        """Delete an author's vote on a comment."""
        stmt = delete(comment_votes_table).where(
            and_(
                comment_votes_table.c.comment_id == comment_id,
                comment_votes_table.c.author_id == author_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def tally_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, VoteTally]:
        """Aggregate up/down vote counts for many comments (batch query)."""
        if not comment_ids:
            return {}

        weight = comment_votes_table.c.weight
        stmt = (
            select(
                comment_votes_table.c.comment_id,
                func.sum(case((weight > 0, 1), else_=0)).label("up"),
                func.sum(case((weight < 0, 1), else_=0)).label("down"),
            )
            .where(comment_votes_table.c.comment_id.in_(comment_ids))
            .group_by(comment_votes_table.c.comment_id)
        )
        result = await self.session.execute(stmt)
        return {
            CommentId(row.comment_id): VoteTally(up=int(row.up), down=int(row.down))
            for row in result.fetchall()
        }

    async def find_weights_by_author(
        self, author_id: UserId, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, VoteWeight]:
        """Find an author's current vote weight on many comments (batch query)."""
        if not comment_ids:
            return {}

        stmt = select(
            comment_votes_table.c.comment_id, comment_votes_table.c.weight
        ).where(
            and_(
                comment_votes_table.c.author_id == author_id,
                comment_votes_table.c.comment_id.in_(comment_ids),
            )
        )
        result = await self.session.execute(stmt)
        return {
            CommentId(row.comment_id): VoteWeight(row.weight)
            for row in result.fetchall()
        }
