"""Unit tests for RegisterCommentableUseCase."""

from uuid import uuid4

import pytest

from agora.application.usecase.commentable import (
    RegisterCommentableRequest,
    RegisterCommentableUseCase,
)
from agora.domain.repository import CommentableRepository
from agora.domain.value import (
    CommentableId,
    CommentableRef,
    CommentableType,
    TenantId,
)
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRegisterCommentableUseCase:
    """Tests for RegisterCommentableUseCase."""

    @pytest.mark.asyncio
    async def test_register_with_host_id(self, unit_env):
        """The host entity's own ID is kept as the commentable ID."""
        # Arrange
        use_case = await unit_env.get(RegisterCommentableUseCase)
        commentable_repo = await unit_env.get(CommentableRepository)
        tenant_id = uuid4()
        host_id = uuid4()
        author_id = uuid4()

        # Act
        response = await use_case.execute(
            RegisterCommentableRequest(
                tenant_id=str(tenant_id),
                commentable_type="meeting",
                commentable_id=str(host_id),
                title="Budget assembly",
                author_id=str(author_id),
                allows_alignment=True,
                allows_votes=True,
            )
        )

        # Assert
        assert response.commentable_id == str(host_id)
        assert response.commentable_type == "meeting"
        assert response.author_id == str(author_id)
        assert response.has_author
        assert response.allows_alignment
        assert response.allows_votes
        stored = await commentable_repo.find_by_ref(
            TenantId(tenant_id),
            CommentableRef(
                commentable_type=CommentableType("meeting"),
                commentable_id=CommentableId(host_id),
            ),
        )
        assert stored is not None
        assert stored.title == "Budget assembly"

    @pytest.mark.asyncio
    async def test_register_without_host_id_or_author(self, unit_env):
        """An ID is generated when none is given; features default to off."""
        # Arrange
        use_case = await unit_env.get(RegisterCommentableUseCase)

        # Act
        response = await use_case.execute(
            RegisterCommentableRequest(
                tenant_id=str(uuid4()),
                commentable_type="proposal",
                title="More benches",
            )
        )

        # Assert
        assert response.commentable_id
        assert response.author_id is None
        assert not response.has_author
        assert not response.allows_alignment
        assert not response.allows_votes
