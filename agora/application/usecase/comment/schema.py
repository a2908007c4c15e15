"""Response items shared by the comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from agora.domain.model import Comment
from agora.domain.value import Alignment, AuthorKind, VoteTally, VoteWeight


class CommentAuthorItem(BaseModel):
    """Author shown next to a comment."""

    kind: AuthorKind
    user_id: str
    user_group_id: str | None
    display_name: str


class CommentItem(BaseModel):
    """Comment item in response.

    ``replies`` holds the ranked direct replies, so a listing is a tree.
    """

    comment_id: str
    commentable_type: str
    commentable_id: str
    author: CommentAuthorItem
    body: str
    parent_id: str | None
    depth: int
    alignment: Alignment | None
    up: int
    down: int
    score: int
    my_vote: VoteWeight | None = None
    created_at: datetime
    updated_at: datetime
    replies: list["CommentItem"] = []

    @classmethod
    def from_comment(
        cls,
        comment: Comment,
        tally: VoteTally | None = None,
        my_vote: VoteWeight | None = None,
        replies: list["CommentItem"] | None = None,
    ) -> "CommentItem":
        """Build a response item from a comment and its vote state."""
        tally = tally or VoteTally()
        return cls(
            comment_id=str(comment.id),
            commentable_type=comment.commentable.commentable_type.root,
            commentable_id=str(comment.commentable.commentable_id),
            author=CommentAuthorItem(
                kind=comment.author.kind,
                user_id=str(comment.author.user_id),
                user_group_id=(
                    str(comment.author.user_group_id)
                    if comment.author.user_group_id
                    else None
                ),
                display_name=comment.author.display_name.root,
            ),
            body=comment.body,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            depth=comment.depth,
            alignment=comment.alignment,
            up=tally.up,
            down=tally.down,
            score=tally.score,
            my_vote=my_vote,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            replies=replies or [],
        )
