"""Domain value objects for Agora comments."""

from agora.domain.value.identifiers import (
    CommentableId,
    CommentId,
    TenantId,
    UserGroupId,
    UserId,
    VoteId,
)
from agora.domain.value.types import (
    Alignment,
    AuthorIdentity,
    AuthorKind,
    CommentableCapabilities,
    CommentableRef,
    CommentableType,
    CommentOrder,
    DisplayName,
    NotificationKind,
    VoteTally,
    VoteWeight,
)

__all__ = [
    # Identifiers
    "TenantId",
    "UserId",
    "UserGroupId",
    "CommentableId",
    "CommentId",
    "VoteId",
    # Types
    "Alignment",
    "AuthorIdentity",
    "AuthorKind",
    "CommentableCapabilities",
    "CommentableRef",
    "CommentableType",
    "CommentOrder",
    "DisplayName",
    "NotificationKind",
    "VoteTally",
    "VoteWeight",
]
