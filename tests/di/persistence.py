"""Mock persistence providers for testing."""

from dishka import Scope, provide

from agora.domain.repository import (
    CommentableRepository,
    CommentRepository,
    UserGroupRepository,
    UserRepository,
    VoteRepository,
)
from agora.persistence.repository.inmemory import (
    InMemoryCommentableRepository,
    InMemoryCommentRepository,
    InMemoryUserGroupRepository,
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from agora.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so data survives across HTTP requests made
    against one container; every test builds its own container, which keeps
    tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_commentable_repository(self) -> CommentableRepository:
        """Provide in-memory commentable repository."""
        return InMemoryCommentableRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_vote_repository(self) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository()

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_user_group_repository(self) -> UserGroupRepository:
        """Provide in-memory user group repository."""
        return InMemoryUserGroupRepository()
