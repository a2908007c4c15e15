"""Notification domain service.

Decides who is interested in a newly created comment and hands a
notification event to the delivery collaborator.
"""

from dataclasses import dataclass

import logfire

from agora.config import NotificationSettings
from agora.domain.model import Comment, Commentable, NotificationEvent
from agora.domain.repository import CommentRepository, UserRepository
from agora.domain.value import NotificationKind, UserId

from .base import Service


class NotificationDelivery:
    """Generic notification delivery interface (mailer, queue, webhook)."""

    async def deliver(self, event: NotificationEvent) -> None:
        """Deliver a notification event.

        Args:
            event: Event to deliver
        """
        raise NotImplementedError


@dataclass(frozen=True)
class CommentCreated:
    """Raised by the create-comment flow once the comment is stored."""

    comment: Comment
    commentable: Commentable


class NotificationService(Service):
    """Domain service dispatching comment notifications."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        user_repository: UserRepository,
        delivery: NotificationDelivery,
        notification_settings: NotificationSettings,
        frontend_url: str,
    ) -> None:
        """Initialize notification service.

        Args:
            comment_repository: Comment repository (parent lookup)
            user_repository: User repository (recipient lookup)
            delivery: Delivery collaborator
            notification_settings: Subjects and payload settings
            frontend_url: Base URL used to build links to the comment
        """
        self.comment_repository = comment_repository
        self.user_repository = user_repository
        self.delivery = delivery
        self.notification_settings = notification_settings
        self.frontend_url = frontend_url.rstrip("/")

    async def _interested_party(
        self, event: CommentCreated
    ) -> tuple[UserId, NotificationKind] | None:
        comment = event.comment

        if comment.parent_id is not None:
            parent = await self.comment_repository.find_by_id(
                comment.tenant_id, comment.parent_id
            )
            if parent is None:
                return None
            return parent.author.user_id, NotificationKind.NEW_REPLY

        if event.commentable.author_id is not None:
            return event.commentable.author_id, NotificationKind.NEW_COMMENT

        return None

    def _link(self, comment: Comment) -> str:
        ref = comment.commentable
        return (
            f"{self.frontend_url}/{ref.commentable_type}/{ref.commentable_id}"
            f"#comment_{comment.id}"
        )

    async def comment_created(self, event: CommentCreated) -> NotificationEvent | None:
        """Notify the interested party of a new comment.

        For a reply the interested party is the parent comment's author;
        for a top-level comment it is the commentable's author, if any.
        Nobody is notified of their own comments.

        Delivery failures are logged and swallowed: they never affect
        the comment that was just created.

        Args:
            event: The comment-created event

        Returns:
            The emitted event, or None when nobody is notified
        """
        comment = event.comment
        with logfire.span(
            "notification_service.comment_created",
            comment_id=str(comment.id),
            commentable=str(comment.commentable),
        ):
            party = await self._interested_party(event)
            if party is None:
                logfire.info("No interested party", comment_id=str(comment.id))
                return None

            recipient_id, kind = party
            if recipient_id == comment.author.user_id:
                logfire.info(
                    "Skipping self notification",
                    comment_id=str(comment.id),
                    user_id=str(recipient_id),
                )
                return None

            recipient = await self.user_repository.find_by_id(
                comment.tenant_id, recipient_id
            )
            settings = self.notification_settings
            subject = (
                settings.new_reply_subject
                if kind == NotificationKind.NEW_REPLY
                else settings.new_comment_subject
            )
            notification = NotificationEvent(
                recipient_id=recipient_id,
                recipient_email=recipient.email if recipient else None,
                kind=kind,
                subject=subject,
                payload={
                    "tenant_id": str(comment.tenant_id),
                    "commentable_type": comment.commentable.commentable_type.root,
                    "commentable_id": str(comment.commentable.commentable_id),
                    "commentable_title": event.commentable.title,
                    "comment_id": str(comment.id),
                    "parent_id": str(comment.parent_id) if comment.parent_id else None,
                    "author_name": comment.author.display_name.root,
                    "excerpt": comment.body[: settings.excerpt_length],
                    "link": self._link(comment),
                },
            )

            try:
                await self.delivery.deliver(notification)
            except Exception as e:
                logfire.error(
                    "Notification delivery failed",
                    comment_id=str(comment.id),
                    recipient_id=str(recipient_id),
                    kind=kind.value,
                    error=str(e),
                )
                return notification

            logfire.info(
                "Notification emitted",
                comment_id=str(comment.id),
                recipient_id=str(recipient_id),
                kind=kind.value,
            )
            return notification
