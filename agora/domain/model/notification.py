"""Notification event emitted when a comment is created."""

from typing import Any, Optional

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import NotificationKind, UserId


class NotificationEvent(DomainModel):
    """Abstract notification handed to the delivery collaborator.

    The comment core never sends anything itself; it only decides who is
    interested and what to tell them.
    """

    recipient_id: UserId
    recipient_email: Optional[str] = None
    kind: NotificationKind
    subject: str
    payload: dict[str, Any] = Field(default_factory=dict)
