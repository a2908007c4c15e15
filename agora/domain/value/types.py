"""Domain value objects for Agora comments.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from agora.domain.value.common import RootValueObject, ValueObject
from agora.domain.value.identifiers import CommentableId, UserGroupId, UserId


class VoteWeight(int, Enum):
    """Weight of a vote on a comment."""

    UP = 1
    DOWN = -1


class Alignment(str, Enum):
    """Stance a comment takes towards its commentable."""

    FAVOR = "favor"
    AGAINST = "against"
    NEUTRAL = "neutral"


class CommentOrder(str, Enum):
    """Ordering keys for comment listings.

    RECENT keeps insertion order (oldest first), BEST sorts by net vote score.
    """

    RECENT = "recent"
    BEST = "best"


class AuthorKind(str, Enum):
    """Kind of identity a comment is authored as."""

    USER = "user"
    USER_GROUP = "user_group"


class NotificationKind(str, Enum):
    """Kind of notification emitted on comment creation."""

    NEW_COMMENT = "new_comment"
    NEW_REPLY = "new_reply"


class CommentableType(RootValueObject[str]):
    """Short slug naming the kind of commentable entity.

    Examples: 'debate', 'proposal', 'meeting'
    """

    @field_validator("root")
    @classmethod
    def validate_commentable_type(cls, v: str) -> str:
        """Validate commentable type format."""
        if not re.match(r"^[a-z][a-z0-9_]{0,49}$", v):
            raise ValueError(
                "Commentable type must be 1-50 characters, lowercase, "
                "alphanumeric with underscores, starting with a letter"
            )
        return v


class DisplayName(RootValueObject[str]):
    """Human-readable name shown next to authored content."""

    @field_validator("root")
    @classmethod
    def validate_display_name(cls, v: str) -> str:
        """Validate name is not blank and within length limits."""
        if not v.strip() or len(v) > 255:
            raise ValueError("Display name must be 1-255 characters")
        return v


class CommentableRef(ValueObject):
    """Polymorphic reference to a commentable (type + id)."""

    commentable_type: CommentableType
    commentable_id: CommentableId

    def __str__(self) -> str:
        return f"{self.commentable_type}/{self.commentable_id}"


class CommentableCapabilities(ValueObject):
    """Per-commentable feature switches consulted by the comment core."""

    allows_alignment: bool = False
    allows_votes: bool = False
    has_author: bool = False


class AuthorIdentity(ValueObject):
    """Identity a comment is published under.

    ``user_id`` is always the acting user so actions stay attributable,
    even when the comment is displayed under a user group's name.
    """

    kind: AuthorKind
    user_id: UserId
    user_group_id: UserGroupId | None = None
    display_name: DisplayName

    @property
    def is_group(self) -> bool:
        """Whether the comment is published on behalf of a user group."""
        return self.kind == AuthorKind.USER_GROUP


class VoteTally(ValueObject):
    """Aggregated votes on a comment."""

    up: int = 0
    down: int = 0

    @property
    def score(self) -> int:
        """Net score: sum of vote weights."""
        return self.up - self.down
