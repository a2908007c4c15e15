"""Repository interfaces for the Agora domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from agora.domain.repository.comment import CommentRepository
from agora.domain.repository.commentable import CommentableRepository
from agora.domain.repository.user import UserRepository
from agora.domain.repository.user_group import UserGroupRepository
from agora.domain.repository.vote import VoteRepository

__all__ = [
    "CommentableRepository",
    "CommentRepository",
    "UserRepository",
    "UserGroupRepository",
    "VoteRepository",
]
