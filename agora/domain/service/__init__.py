"""Domain services."""

from .authorship_service import AuthorshipService
from .base import Service
from .comment_service import CommentService
from .commentable_service import CommentableService
from .jwt_service import JWTService
from .notification_service import (
    CommentCreated,
    NotificationDelivery,
    NotificationService,
)
from .ranking_service import CommentThread, RankingService
from .vote_service import VoteService

__all__ = [
    "AuthorshipService",
    "CommentCreated",
    "CommentService",
    "CommentThread",
    "CommentableService",
    "JWTService",
    "NotificationDelivery",
    "NotificationService",
    "RankingService",
    "Service",
    "VoteService",
]
