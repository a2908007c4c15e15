"""Domain layer DI providers."""

from dishka import Scope, provide

from agora.config import AuthSettings, CommentSettings, NotificationSettings, Settings
from agora.domain.repository import (
    CommentableRepository,
    CommentRepository,
    UserGroupRepository,
    UserRepository,
    VoteRepository,
)
from agora.domain.service import (
    AuthorshipService,
    CommentableService,
    CommentService,
    JWTService,
    NotificationDelivery,
    NotificationService,
    RankingService,
    VoteService,
)
from agora.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_commentable_service(
        self, commentable_repository: CommentableRepository
    ) -> CommentableService:
        """Provide commentable domain service."""
        return CommentableService(commentable_repository=commentable_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, comment_settings: CommentSettings
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository, comment_settings=comment_settings
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        comment_service: CommentService,
        commentable_service: CommentableService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            comment_service=comment_service,
            commentable_service=commentable_service,
        )

    @provide
    def get_ranking_service(self) -> RankingService:
        """Provide ranking domain service."""
        return RankingService()

    @provide
    def get_authorship_service(
        self,
        user_repository: UserRepository,
        user_group_repository: UserGroupRepository,
    ) -> AuthorshipService:
        """Provide authorship domain service."""
        return AuthorshipService(
            user_repository=user_repository,
            user_group_repository=user_group_repository,
        )

    @provide
    def get_notification_service(
        self,
        comment_repository: CommentRepository,
        user_repository: UserRepository,
        delivery: NotificationDelivery,
        notification_settings: NotificationSettings,
        settings: Settings,
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(
            comment_repository=comment_repository,
            user_repository=user_repository,
            delivery=delivery,
            notification_settings=notification_settings,
            frontend_url=settings.api.frontend_url,
        )
