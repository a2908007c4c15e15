"""Vote domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from agora.domain.error import FeatureDisabledError, NotFoundError, ValidationError
from agora.domain.model import Comment, Vote
from agora.domain.repository import VoteRepository
from agora.domain.value import CommentId, TenantId, UserId, VoteId, VoteTally, VoteWeight

from .base import Service
from .comment_service import CommentService
from .commentable_service import CommentableService


class VoteService(Service):
    """Domain service for the comment vote ledger.

    Each author holds at most one vote per comment. Casting again replaces
    the previous weight, so a comment's score is the sum of the current
    weights of its voters.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        comment_service: CommentService,
        commentable_service: CommentableService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            comment_service: Comment domain service
            commentable_service: Commentable domain service
        """
        self.vote_repository = vote_repository
        self.comment_service = comment_service
        self.commentable_service = commentable_service

    async def _get_votable_comment(
        self, tenant_id: TenantId, comment_id: CommentId
    ) -> Comment:
        comment = await self.comment_service.get_comment_by_id(tenant_id, comment_id)
        if not comment:
            logfire.warn("Vote on non-existent comment", comment_id=str(comment_id))
            raise NotFoundError("Comment", str(comment_id))

        commentable = await self.commentable_service.get_commentable(
            tenant_id, comment.commentable
        )
        if not commentable.capabilities.allows_votes:
            logfire.warn(
                "Vote on commentable without votes",
                comment_id=str(comment_id),
                commentable=str(commentable.ref),
            )
            raise FeatureDisabledError("Voting", str(commentable.ref))
        return comment

    async def cast_vote(
        self,
        tenant_id: TenantId,
        comment_id: CommentId,
        author_id: UserId,
        weight: int,
    ) -> Vote:
        """Cast or replace an author's vote on a comment.

        Args:
            tenant_id: Tenant the comment belongs to
            comment_id: Comment ID
            author_id: Voting user ID
            weight: +1 for an up-vote, -1 for a down-vote

        Returns:
            The stored vote

        Raises:
            ValidationError: If the weight is not +1 or -1
            NotFoundError: If the comment does not exist
            FeatureDisabledError: If the commentable does not allow votes
        """
        with logfire.span(
            "vote_service.cast_vote",
            comment_id=str(comment_id),
            author_id=str(author_id),
            weight=weight,
        ):
            try:
                vote_weight = VoteWeight(weight)
            except ValueError:
                raise ValidationError(f"Vote weight must be 1 or -1, got {weight}")

            await self._get_votable_comment(tenant_id, comment_id)

            now = datetime.now()
            vote = Vote(
                id=VoteId(uuid4()),
                tenant_id=tenant_id,
                comment_id=comment_id,
                author_id=author_id,
                weight=vote_weight,
                created_at=now,
                updated_at=now,
            )
            saved = await self.vote_repository.upsert(vote)
            logfire.info(
                "Vote cast",
                comment_id=str(comment_id),
                author_id=str(author_id),
                weight=saved.weight.value,
                replaced=saved.id != vote.id,
            )
            return saved

    async def remove_vote(
        self, tenant_id: TenantId, comment_id: CommentId, author_id: UserId
    ) -> bool:
        """Withdraw an author's vote from a comment.

        Args:
            tenant_id: Tenant the comment belongs to
            comment_id: Comment ID
            author_id: Voting user ID

        Returns:
            True if a vote was removed, False if no vote existed

        Raises:
            NotFoundError: If the comment does not exist
            FeatureDisabledError: If the commentable does not allow votes
        """
        with logfire.span(
            "vote_service.remove_vote",
            comment_id=str(comment_id),
            author_id=str(author_id),
        ):
            await self._get_votable_comment(tenant_id, comment_id)

            deleted = await self.vote_repository.delete_by_comment_and_author(
                comment_id, author_id
            )
            if deleted:
                logfire.info(
                    "Vote removed from comment",
                    comment_id=str(comment_id),
                    author_id=str(author_id),
                )
            else:
                logfire.info(
                    "No vote to remove from comment",
                    comment_id=str(comment_id),
                    author_id=str(author_id),
                )
            return deleted

    async def score_of(self, comment_id: CommentId) -> int:
        """Net score of a comment (sum of current vote weights)."""
        tally = await self.tally_of(comment_id)
        return tally.score

    async def tally_of(self, comment_id: CommentId) -> VoteTally:
        """Up/down vote counts of a comment."""
        tallies = await self.tallies_for([comment_id])
        return tallies[comment_id]

    async def tallies_for(
        self, comment_ids: list[CommentId]
    ) -> dict[CommentId, VoteTally]:
        """Up/down vote counts for many comments.

        Args:
            comment_ids: Comment IDs to aggregate

        Returns:
            Mapping with an entry (possibly empty) for every requested comment
        """
        if not comment_ids:
            return {}

        # Batch query to aggregate all votes at once (avoid N+1)
        tallies = await self.vote_repository.tally_by_comments(comment_ids)
        return {cid: tallies.get(cid, VoteTally()) for cid in comment_ids}

    async def get_author_votes(
        self, author_id: UserId, comment_ids: list[CommentId]
    ) -> dict[CommentId, VoteWeight]:
        """Find the weights an author currently holds on the given comments.

        Args:
            author_id: Voting user ID
            comment_ids: Comment IDs to check

        Returns:
            Mapping of comment ID to weight, for voted comments only
        """
        if not comment_ids:
            return {}

        return await self.vote_repository.find_weights_by_author(
            author_id, comment_ids
        )
