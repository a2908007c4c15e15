"""Cast vote use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase
from agora.domain.error import ValidationError
from agora.domain.service import VoteService
from agora.domain.value import CommentId, TenantId, UserId, VoteWeight


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    tenant_id: str  # UUID string
    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    weight: int  # +1 or -1, checked by the vote service


class CastVoteResponse(BaseModel):
    """Cast vote response, including the comment's updated tally."""

    vote_id: str
    comment_id: str
    weight: VoteWeight
    up: int
    down: int
    score: int
    created_at: datetime
    updated_at: datetime


class CastVoteUseCase(BaseUseCase):
    """Use case for up- or down-voting a comment.

    Casting again replaces the user's previous vote on the comment.
    """

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Cast vote response with the stored vote and the new tally

        Raises:
            ValidationError: If the weight is not +1 or -1, or an ID is malformed
            NotFoundError: If the comment does not exist
            FeatureDisabledError: If the commentable does not allow votes
        """
        try:
            tenant_id = TenantId(UUID(request.tenant_id))
            comment_id = CommentId(UUID(request.comment_id))
            user_id = UserId(UUID(request.user_id))
        except ValueError as e:
            raise ValidationError(f"Invalid vote reference: {e}") from e

        vote = await self.vote_service.cast_vote(
            tenant_id=tenant_id,
            comment_id=comment_id,
            author_id=user_id,
            weight=request.weight,
        )
        tally = await self.vote_service.tally_of(comment_id)

        return CastVoteResponse(
            vote_id=str(vote.id),
            comment_id=str(vote.comment_id),
            weight=vote.weight,
            up=tally.up,
            down=tally.down,
            score=tally.score,
            created_at=vote.created_at,
            updated_at=vote.updated_at,
        )
