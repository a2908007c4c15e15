"""Domain model entities for Agora comments."""

from agora.domain.model.comment import Comment
from agora.domain.model.commentable import Commentable
from agora.domain.model.notification import NotificationEvent
from agora.domain.model.user import User
from agora.domain.model.user_group import UserGroup, UserGroupMembership
from agora.domain.model.vote import Vote

__all__ = [
    "Commentable",
    "Comment",
    "NotificationEvent",
    "User",
    "UserGroup",
    "UserGroupMembership",
    "Vote",
]
