"""In-memory vote repository for testing."""

from collections import defaultdict
from typing import Sequence

from agora.domain.model.vote import Vote
from agora.domain.repository.vote import VoteRepository
from agora.domain.value import CommentId, UserId, VoteTally, VoteWeight


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Votes are keyed by (comment_id, author_id), mirroring the unique
    constraint of the database table.
    """

    def __init__(self) -> None:
        self._votes: dict[tuple[CommentId, UserId], Vote] = {}

    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote or replace the existing weight."""
        key = (vote.comment_id, vote.author_id)
        existing = self._votes.get(key)
        if existing:
            vote = existing.model_copy(
                update={"weight": vote.weight, "updated_at": vote.updated_at}
            )
        self._votes[key] = vote
        return vote

    async def delete_by_comment_and_author(
        self, comment_id: CommentId, author_id: UserId
    ) -> bool:
        """Delete an author's vote on a comment."""
        return self._votes.pop((comment_id, author_id), None) is not None

    async def tally_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, VoteTally]:
        """Aggregate up/down counts for many comments."""
        wanted = set(comment_ids)
        counts: dict[CommentId, dict[VoteWeight, int]] = defaultdict(
            lambda: {VoteWeight.UP: 0, VoteWeight.DOWN: 0}
        )
        for vote in self._votes.values():
            if vote.comment_id in wanted:
                counts[vote.comment_id][vote.weight] += 1

        return {
            cid: VoteTally(up=c[VoteWeight.UP], down=c[VoteWeight.DOWN])
            for cid, c in counts.items()
        }

    async def find_weights_by_author(
        self, author_id: UserId, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, VoteWeight]:
        """Find an author's weights on many comments."""
        return {
            cid: self._votes[(cid, author_id)].weight
            for cid in comment_ids
            if (cid, author_id) in self._votes
        }
