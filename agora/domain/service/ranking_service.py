"""Comment ranking and threading."""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterator

from agora.domain.model import Comment
from agora.domain.value import CommentId, CommentOrder, VoteTally

from .base import Service


@dataclass
class CommentThread:
    """Node in a ranked comment tree.

    Holds a comment, its vote tally and its direct replies, ranked under
    the same ordering as the level above.
    """

    comment: Comment
    tally: VoteTally
    replies: list["CommentThread"] = field(default_factory=list)

    @property
    def score(self) -> int:
        return self.tally.score


class RankingService(Service):
    """Orders a commentable's comments and nests replies under their parents.

    Ranking never touches storage: callers pass the comments and the vote
    tallies they already loaded.
    """

    def order(
        self,
        comments: list[Comment],
        order: CommentOrder,
        tallies: dict[CommentId, VoteTally] | None = None,
    ) -> list[Comment]:
        """Order a flat list of comments.

        RECENT sorts by creation time ascending. BEST sorts by score
        descending, ties broken by creation time ascending. Comments created
        at the same instant are ordered by ID under both keys.

        Args:
            comments: Comments to order
            order: Ordering key
            tallies: Vote tallies by comment ID (missing entries score 0)

        Returns:
            New list in ranked order
        """
        tallies = tallies or {}

        if order == CommentOrder.BEST:

            def best_key(comment: Comment):
                tally = tallies.get(comment.id, VoteTally())
                return (-tally.score, comment.created_at, comment.id)

            return sorted(comments, key=best_key)

        return sorted(comments, key=lambda c: (c.created_at, c.id))

    def build_threads(
        self,
        comments: list[Comment],
        order: CommentOrder,
        tallies: dict[CommentId, VoteTally] | None = None,
    ) -> list[CommentThread]:
        """Rank comments level by level and nest replies under their parents.

        Top-level comments are ranked among themselves, and the direct
        replies of each comment are ranked among themselves, recursively.
        A comment whose parent is not part of ``comments`` is treated as a
        root so that partial listings never lose comments.

        Args:
            comments: All comments of a commentable, any order
            order: Ordering key applied at every level
            tallies: Vote tallies by comment ID

        Returns:
            Ranked top-level threads
        """
        tallies = tallies or {}
        known_ids = {comment.id for comment in comments}

        children: dict[CommentId | None, list[Comment]] = defaultdict(list)
        for comment in comments:
            parent_id = comment.parent_id if comment.parent_id in known_ids else None
            children[parent_id].append(comment)

        # Explicit stack: reply chains may be deeper than the recursion limit
        roots: list[CommentThread] = []
        pending: list[tuple[CommentId | None, list[CommentThread]]] = [(None, roots)]
        while pending:
            parent_id, siblings = pending.pop()
            for comment in self.order(children[parent_id], order, tallies):
                thread = CommentThread(
                    comment=comment, tally=tallies.get(comment.id, VoteTally())
                )
                siblings.append(thread)
                pending.append((comment.id, thread.replies))

        return roots

    @staticmethod
    def flatten(threads: list[CommentThread]) -> Iterator[CommentThread]:
        """Walk ranked threads in display (pre-)order."""
        pending = list(reversed(threads))
        while pending:
            thread = pending.pop()
            yield thread
            pending.extend(reversed(thread.replies))
