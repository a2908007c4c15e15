"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from agora.domain.model import Comment, Commentable, User, UserGroup, Vote
from agora.domain.value import (
    Alignment,
    AuthorIdentity,
    AuthorKind,
    CommentableId,
    CommentableRef,
    CommentableType,
    CommentId,
    DisplayName,
    TenantId,
    UserGroupId,
    UserId,
    VoteId,
    VoteWeight,
)


def _uuid(value: Any) -> UUID:
    """Normalize a UUID column value (drivers may hand back strings)."""
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> Optional[UUID]:
    return _uuid(value) if value else None


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        tenant_id=TenantId(_uuid(row["tenant_id"])),
        name=DisplayName(row["name"]),
        nickname=row["nickname"],
        email=row.get("email"),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return user.model_dump()


def row_to_user_group(row: Dict[str, Any]) -> UserGroup:
    """Convert database row to UserGroup domain model."""
    return UserGroup(
        id=UserGroupId(_uuid(row["id"])),
        tenant_id=TenantId(_uuid(row["tenant_id"])),
        name=DisplayName(row["name"]),
        verified_at=row.get("verified_at"),
        created_at=row["created_at"],
    )


def user_group_to_dict(user_group: UserGroup) -> Dict[str, Any]:
    """Convert UserGroup domain model to database dict."""
    return user_group.model_dump()


def row_to_commentable(row: Dict[str, Any]) -> Commentable:
    """Convert database row to Commentable domain model.

    Args:
        row: Database row as dict

    Returns:
        Commentable domain model
    """
    author_id = _optional_uuid(row.get("author_id"))
    return Commentable(
        id=CommentableId(_uuid(row["id"])),
        tenant_id=TenantId(_uuid(row["tenant_id"])),
        commentable_type=CommentableType(row["commentable_type"]),
        title=row["title"],
        author_id=UserId(author_id) if author_id else None,
        allows_alignment=row["allows_alignment"],
        allows_votes=row["allows_votes"],
        created_at=row["created_at"],
    )


def commentable_to_dict(commentable: Commentable) -> Dict[str, Any]:
    """Convert Commentable domain model to database dict."""
    return commentable.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    The author identity and the commentable reference are stored flattened
    across several columns.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_id = _optional_uuid(row.get("parent_id"))
    user_group_id = _optional_uuid(row.get("author_user_group_id"))
    return Comment(
        id=CommentId(_uuid(row["id"])),
        tenant_id=TenantId(_uuid(row["tenant_id"])),
        commentable=CommentableRef(
            commentable_type=CommentableType(row["commentable_type"]),
            commentable_id=CommentableId(_uuid(row["commentable_id"])),
        ),
        author=AuthorIdentity(
            kind=AuthorKind(row["author_kind"]),
            user_id=UserId(_uuid(row["author_user_id"])),
            user_group_id=UserGroupId(user_group_id) if user_group_id else None,
            display_name=DisplayName(row["author_name"]),
        ),
        body=row["body"],
        parent_id=CommentId(parent_id) if parent_id else None,
        depth=row["depth"],
        alignment=Alignment(row["alignment"]) if row.get("alignment") else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": comment.id,
        "tenant_id": comment.tenant_id,
        "commentable_type": comment.commentable.commentable_type.root,
        "commentable_id": comment.commentable.commentable_id,
        "parent_id": comment.parent_id,
        "author_kind": comment.author.kind.value,
        "author_user_id": comment.author.user_id,
        "author_user_group_id": comment.author.user_group_id,
        "author_name": comment.author.display_name.root,
        "body": comment.body,
        "depth": comment.depth,
        "alignment": comment.alignment.value if comment.alignment else None,
        "created_at": comment.created_at,
        "updated_at": comment.updated_at,
    }


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(_uuid(row["id"])),
        tenant_id=TenantId(_uuid(row["tenant_id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        weight=VoteWeight(row["weight"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    Args:
        vote: Vote domain model

    Returns:
        Dict suitable for database insertion/update
    """
    # VoteWeight is an int enum; store the plain integer
    return vote.model_dump(mode="python") | {"weight": vote.weight.value}
