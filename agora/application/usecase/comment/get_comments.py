"""Get comments use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase
from agora.config import CommentSettings
from agora.domain.error import ValidationError
from agora.domain.service import (
    CommentableService,
    CommentService,
    RankingService,
    VoteService,
)
from agora.domain.value import (
    CommentableId,
    CommentableRef,
    CommentableType,
    CommentId,
    CommentOrder,
    TenantId,
    UserId,
    VoteWeight,
)

from .schema import CommentItem


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    tenant_id: str  # UUID string
    commentable_type: str
    commentable_id: str  # UUID string
    order: CommentOrder | None = None  # Defaults to the configured order
    viewer_id: str | None = None  # Authenticated user, to report their votes


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    commentable_type: str
    commentable_id: str
    title: str
    order: CommentOrder
    allows_alignment: bool
    allows_votes: bool
    comments: list[CommentItem]
    total: int


class GetCommentsUseCase(BaseUseCase):
    """Use case for listing a commentable's comments as ranked threads."""

    def __init__(
        self,
        commentable_service: CommentableService,
        comment_service: CommentService,
        vote_service: VoteService,
        ranking_service: RankingService,
        comment_settings: CommentSettings,
    ) -> None:
        self.commentable_service = commentable_service
        self.comment_service = comment_service
        self.vote_service = vote_service
        self.ranking_service = ranking_service
        self.comment_settings = comment_settings

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Tallies and the viewer's votes are loaded in one batch each, then
        every level of the tree is ranked with the requested order.

        Args:
            request: Get comments request

        Returns:
            Ranked comment threads with vote state

        Raises:
            ValidationError: If an ID or the commentable type is malformed
            NotFoundError: If the commentable does not exist
        """
        try:
            tenant_id = TenantId(UUID(request.tenant_id))
            ref = CommentableRef(
                commentable_type=CommentableType(request.commentable_type),
                commentable_id=CommentableId(UUID(request.commentable_id)),
            )
            viewer_id = UserId(UUID(request.viewer_id)) if request.viewer_id else None
        except ValueError as e:
            raise ValidationError(f"Invalid commentable reference: {e}") from e
        order = request.order or self.comment_settings.default_order

        commentable = await self.commentable_service.get_commentable(tenant_id, ref)
        comments = await self.comment_service.list_comments(tenant_id, ref)

        comment_ids = [comment.id for comment in comments]
        tallies = await self.vote_service.tallies_for(comment_ids)

        my_votes: dict[CommentId, VoteWeight] = {}
        if viewer_id:
            my_votes = await self.vote_service.get_author_votes(viewer_id, comment_ids)

        threads = self.ranking_service.build_threads(comments, order, tallies)

        # Reverse display order visits every reply before its parent
        items: dict[CommentId, CommentItem] = {}
        for thread in reversed(list(self.ranking_service.flatten(threads))):
            items[thread.comment.id] = CommentItem.from_comment(
                thread.comment,
                tally=thread.tally,
                my_vote=my_votes.get(thread.comment.id),
                replies=[items[reply.comment.id] for reply in thread.replies],
            )

        return GetCommentsResponse(
            commentable_type=ref.commentable_type.root,
            commentable_id=str(ref.commentable_id),
            title=commentable.title,
            order=order,
            allows_alignment=commentable.allows_alignment,
            allows_votes=commentable.allows_votes,
            comments=[items[thread.comment.id] for thread in threads],
            total=len(comments),
        )
