"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Sequence

from agora.domain.model.vote import Vote
from agora.domain.value import CommentId, UserId, VoteTally, VoteWeight


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote or replace the weight of the existing one.

        The (comment_id, author_id) pair is the serialization point: a
        concurrent re-vote by the same author never produces two rows.

        Args:
            vote: The vote to store

        Returns:
            The stored vote (keeping the original id and created_at on replace)
        """
        pass

    @abstractmethod
    async def delete_by_comment_and_author(
        self, comment_id: CommentId, author_id: UserId
    ) -> bool:
        """Delete an author's vote on a comment.

        Args:
            comment_id: The comment's ID
            author_id: The voter's user ID

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass

    @abstractmethod
    async def tally_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, VoteTally]:
        """Aggregate up/down vote counts for many comments (batch query).

        Args:
            comment_ids: Comment IDs to aggregate

        Returns:
            Mapping of comment ID to tally; comments without votes are omitted
        """
        pass

    @abstractmethod
    async def find_weights_by_author(
        self, author_id: UserId, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, VoteWeight]:
        """Find an author's current vote weight on many comments (batch query).

        Args:
            author_id: The voter's user ID
            comment_ids: Comment IDs to check

        Returns:
            Mapping of comment ID to weight for the comments the author voted on
        """
        pass
