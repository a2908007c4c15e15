"""Application layer DI providers."""

from dishka import Scope, provide

from agora.application.usecase.comment import CreateCommentUseCase, GetCommentsUseCase
from agora.application.usecase.commentable import RegisterCommentableUseCase
from agora.application.usecase.user_group import ListEligibleGroupsUseCase
from agora.application.usecase.vote import CastVoteUseCase, RemoveVoteUseCase
from agora.config import CommentSettings
from agora.domain.service import (
    AuthorshipService,
    CommentableService,
    CommentService,
    NotificationService,
    RankingService,
    VoteService,
)
from agora.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Commentable use cases
    @provide(scope=Scope.REQUEST)
    def get_register_commentable_use_case(
        self, commentable_service: CommentableService
    ) -> RegisterCommentableUseCase:
        """Provide register commentable use case."""
        return RegisterCommentableUseCase(commentable_service=commentable_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        commentable_service: CommentableService,
        authorship_service: AuthorshipService,
        comment_service: CommentService,
        notification_service: NotificationService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            commentable_service=commentable_service,
            authorship_service=authorship_service,
            comment_service=comment_service,
            notification_service=notification_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self,
        commentable_service: CommentableService,
        comment_service: CommentService,
        vote_service: VoteService,
        ranking_service: RankingService,
        comment_settings: CommentSettings,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            commentable_service=commentable_service,
            comment_service=comment_service,
            vote_service=vote_service,
            ranking_service=ranking_service,
            comment_settings=comment_settings,
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_vote_use_case(self, vote_service: VoteService) -> RemoveVoteUseCase:
        """Provide remove vote use case."""
        return RemoveVoteUseCase(vote_service=vote_service)

    # User group use cases
    @provide(scope=Scope.REQUEST)
    def get_list_eligible_groups_use_case(
        self, authorship_service: AuthorshipService
    ) -> ListEligibleGroupsUseCase:
        """Provide list eligible groups use case."""
        return ListEligibleGroupsUseCase(authorship_service=authorship_service)
