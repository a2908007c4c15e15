"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .commentable import InMemoryCommentableRepository
from .user import InMemoryUserRepository
from .user_group import InMemoryUserGroupRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCommentableRepository",
    "InMemoryCommentRepository",
    "InMemoryUserRepository",
    "InMemoryUserGroupRepository",
    "InMemoryVoteRepository",
]
