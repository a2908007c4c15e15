"""Remove vote use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase
from agora.domain.error import ValidationError
from agora.domain.service import VoteService
from agora.domain.value import CommentId, TenantId, UserId


class RemoveVoteRequest(BaseModel):
    """Remove vote request."""

    tenant_id: str  # UUID string
    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class RemoveVoteResponse(BaseModel):
    """Remove vote response."""

    success: bool
    message: str
    score: int


class RemoveVoteUseCase(BaseUseCase):
    """Use case for withdrawing a vote from a comment."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize remove vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: RemoveVoteRequest) -> RemoveVoteResponse:
        """Execute remove vote flow.

        Args:
            request: Remove vote request

        Returns:
            Remove vote response

        Raises:
            ValidationError: If an ID is malformed
            NotFoundError: If the comment does not exist
            FeatureDisabledError: If the commentable does not allow votes
        """
        try:
            tenant_id = TenantId(UUID(request.tenant_id))
            comment_id = CommentId(UUID(request.comment_id))
            user_id = UserId(UUID(request.user_id))
        except ValueError as e:
            raise ValidationError(f"Invalid vote reference: {e}") from e

        removed = await self.vote_service.remove_vote(
            tenant_id=tenant_id,
            comment_id=comment_id,
            author_id=user_id,
        )
        score = await self.vote_service.score_of(comment_id)

        if removed:
            return RemoveVoteResponse(
                success=True,
                message="Vote removed successfully",
                score=score,
            )
        else:
            return RemoveVoteResponse(
                success=False,
                message="No vote found to remove",
                score=score,
            )
