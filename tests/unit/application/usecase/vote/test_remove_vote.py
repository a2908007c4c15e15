"""Unit tests for RemoveVoteUseCase."""

from uuid import uuid4

import pytest

from agora.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    RemoveVoteRequest,
    RemoveVoteUseCase,
)
from agora.domain.error import NotFoundError
from agora.domain.repository import CommentableRepository, CommentRepository
from tests.conftest import (
    make_comment,
    make_commentable,
    make_user,
    minutes_after_base,
    new_tenant,
)
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRemoveVoteUseCase:
    """Tests for RemoveVoteUseCase."""

    @pytest.mark.asyncio
    async def test_remove_existing_vote(self, unit_env):
        """Removing a vote drops it from the score."""
        # Arrange
        cast_vote = await unit_env.get(CastVoteUseCase)
        remove_vote = await unit_env.get(RemoveVoteUseCase)
        commentable_repo = await unit_env.get(CommentableRepository)
        comment_repo = await unit_env.get(CommentRepository)
        tenant_id = new_tenant()
        commentable = await commentable_repo.save(make_commentable(tenant_id))
        comment = await comment_repo.save(
            make_comment(commentable, make_user(tenant_id), minutes_after_base(0))
        )
        voter, other = make_user(tenant_id), make_user(tenant_id)
        for user in (voter, other):
            await cast_vote.execute(
                CastVoteRequest(
                    tenant_id=str(tenant_id),
                    comment_id=str(comment.id),
                    user_id=str(user.id),
                    weight=1,
                )
            )

        # Act
        response = await remove_vote.execute(
            RemoveVoteRequest(
                tenant_id=str(tenant_id),
                comment_id=str(comment.id),
                user_id=str(voter.id),
            )
        )

        # Assert
        assert response.success
        assert response.message == "Vote removed successfully"
        assert response.score == 1

    @pytest.mark.asyncio
    async def test_remove_missing_vote_reports_failure(self, unit_env):
        """Removing a vote that was never cast is not an error."""
        # Arrange
        remove_vote = await unit_env.get(RemoveVoteUseCase)
        commentable_repo = await unit_env.get(CommentableRepository)
        comment_repo = await unit_env.get(CommentRepository)
        tenant_id = new_tenant()
        commentable = await commentable_repo.save(make_commentable(tenant_id))
        comment = await comment_repo.save(
            make_comment(commentable, make_user(tenant_id), minutes_after_base(0))
        )

        # Act
        response = await remove_vote.execute(
            RemoveVoteRequest(
                tenant_id=str(tenant_id),
                comment_id=str(comment.id),
                user_id=str(uuid4()),
            )
        )

        # Assert
        assert not response.success
        assert response.message == "No vote found to remove"
        assert response.score == 0

    @pytest.mark.asyncio
    async def test_remove_vote_on_unknown_comment(self, unit_env):
        """Removing a vote from a comment that does not exist fails."""
        # Arrange
        remove_vote = await unit_env.get(RemoveVoteUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await remove_vote.execute(
                RemoveVoteRequest(
                    tenant_id=str(uuid4()),
                    comment_id=str(uuid4()),
                    user_id=str(uuid4()),
                )
            )
