"""Test configuration and helpers for building domain objects."""

from datetime import datetime, timedelta
from uuid import uuid4

from agora.domain.model import Comment, Commentable, User, UserGroup
from agora.domain.value import (
    Alignment,
    AuthorIdentity,
    AuthorKind,
    CommentableId,
    CommentableType,
    CommentId,
    DisplayName,
    TenantId,
    UserGroupId,
    UserId,
)

BASE_TIME = datetime(2024, 3, 1, 12, 0, 0)


def minutes_after_base(minutes: int) -> datetime:
    """Deterministic timestamps so creation order is unambiguous."""
    return BASE_TIME + timedelta(minutes=minutes)


def make_user(
    tenant_id: TenantId,
    name: str = "Ada Lovelace",
    email: str | None = "ada@example.org",
) -> User:
    """Build a user of the given tenant."""
    return User(
        id=UserId(uuid4()),
        tenant_id=tenant_id,
        name=DisplayName(name),
        nickname=name.split()[0].lower(),
        email=email,
    )


def make_group(
    tenant_id: TenantId, name: str = "Friends of the Park", verified: bool = True
) -> UserGroup:
    """Build a user group, verified unless asked otherwise."""
    return UserGroup(
        id=UserGroupId(uuid4()),
        tenant_id=tenant_id,
        name=DisplayName(name),
        verified_at=BASE_TIME if verified else None,
    )


def make_commentable(
    tenant_id: TenantId,
    author_id: UserId | None = None,
    allows_alignment: bool = False,
    allows_votes: bool = True,
    commentable_type: str = "debate",
) -> Commentable:
    """Build a commentable with the given capabilities."""
    return Commentable(
        id=CommentableId(uuid4()),
        tenant_id=tenant_id,
        commentable_type=CommentableType(commentable_type),
        title="Should the park stay open at night?",
        author_id=author_id,
        allows_alignment=allows_alignment,
        allows_votes=allows_votes,
    )


def user_identity(user: User) -> AuthorIdentity:
    """Author identity of a user commenting as themself."""
    return AuthorIdentity(kind=AuthorKind.USER, user_id=user.id, display_name=user.name)


def make_comment(
    commentable: Commentable,
    author: User,
    created_at: datetime,
    body: str = "I agree with this proposal.",
    parent: Comment | None = None,
    alignment: Alignment | None = None,
) -> Comment:
    """Build a stored comment (bypassing the comment service)."""
    return Comment(
        id=CommentId(uuid4()),
        tenant_id=commentable.tenant_id,
        commentable=commentable.ref,
        author=user_identity(author),
        body=body,
        parent_id=parent.id if parent else None,
        depth=parent.depth + 1 if parent else 0,
        alignment=alignment,
        created_at=created_at,
        updated_at=created_at,
    )


def new_tenant() -> TenantId:
    return TenantId(uuid4())
