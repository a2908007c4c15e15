"""PostgreSQL repository implementations."""

from agora.persistence.repository.comment import PostgresCommentRepository
from agora.persistence.repository.commentable import PostgresCommentableRepository
from agora.persistence.repository.user import PostgresUserRepository
from agora.persistence.repository.user_group import PostgresUserGroupRepository
from agora.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresCommentableRepository",
    "PostgresCommentRepository",
    "PostgresUserRepository",
    "PostgresUserGroupRepository",
    "PostgresVoteRepository",
]
