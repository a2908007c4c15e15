"""Unit tests for CommentService."""

import pytest

from agora.config import CommentSettings
from agora.domain.error import (
    AuthorizationError,
    FeatureDisabledError,
    ValidationError,
)
from agora.domain.repository import CommentableRepository, CommentRepository
from agora.domain.service import CommentService
from agora.domain.value import Alignment
from tests.conftest import (
    make_comment,
    make_commentable,
    make_user,
    minutes_after_base,
    new_tenant,
    user_identity,
)
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_top_level_comment_has_depth_zero(self, unit_env):
        """A comment without parent is stored at depth 0."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        tenant_id = new_tenant()
        commentable = make_commentable(tenant_id)
        author = make_user(tenant_id)

        # Act
        comment = await comment_service.create_comment(
            commentable=commentable,
            author=user_identity(author),
            body="  Keep it open until midnight.  ",
        )

        # Assert
        assert comment.depth == 0
        assert comment.parent_id is None
        assert comment.body == "Keep it open until midnight."
        assert comment.commentable == commentable.ref
        assert comment.tenant_id == tenant_id

    @pytest.mark.asyncio
    async def test_reply_depth_is_parent_depth_plus_one(self, unit_env):
        """Replies nest one level below their parent, at any depth."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        tenant_id = new_tenant()
        commentable = make_commentable(tenant_id)
        author = user_identity(make_user(tenant_id))

        # Act
        root = await comment_service.create_comment(commentable, author, "Root")
        reply = await comment_service.create_comment(
            commentable, author, "Reply", parent_id=root.id
        )
        nested = await comment_service.create_comment(
            commentable, author, "Nested", parent_id=reply.id
        )
        deeper = await comment_service.create_comment(
            commentable, author, "Deeper", parent_id=nested.id
        )

        # Assert
        assert [root.depth, reply.depth, nested.depth, deeper.depth] == [0, 1, 2, 3]
        assert deeper.parent_id == nested.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", ["", "   ", "\n\t"])
    async def test_empty_body_is_rejected(self, unit_env, body):
        """Empty and whitespace-only bodies are rejected."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        tenant_id = new_tenant()

        # Act & Assert
        with pytest.raises(ValidationError, match="cannot be empty"):
            await comment_service.create_comment(
                make_commentable(tenant_id),
                user_identity(make_user(tenant_id)),
                body,
            )

    @pytest.mark.asyncio
    async def test_body_over_max_length_is_rejected(self, unit_env):
        """Bodies over the configured limit are rejected."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        tenant_id = new_tenant()
        too_long = "a" * (comment_service.comment_settings.max_body_length + 1)

        # Act & Assert
        with pytest.raises(ValidationError, match="cannot exceed"):
            await comment_service.create_comment(
                make_commentable(tenant_id),
                user_identity(make_user(tenant_id)),
                too_long,
            )

    @pytest.mark.asyncio
    async def test_unknown_parent_is_rejected(self, unit_env):
        """Replying to a comment that does not exist fails."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        tenant_id = new_tenant()
        commentable = make_commentable(tenant_id)
        author = make_user(tenant_id)
        ghost = make_comment(commentable, author, minutes_after_base(0))

        # Act & Assert
        with pytest.raises(ValidationError, match="Parent comment not found"):
            await comment_service.create_comment(
                commentable, user_identity(author), "Reply", parent_id=ghost.id
            )

    @pytest.mark.asyncio
    async def test_parent_on_other_commentable_is_rejected(self, unit_env):
        """A reply must live on the same commentable as its parent."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        tenant_id = new_tenant()
        author = user_identity(make_user(tenant_id))
        debate = make_commentable(tenant_id)
        proposal = make_commentable(tenant_id, commentable_type="proposal")
        parent = await comment_service.create_comment(debate, author, "On the debate")

        # Act & Assert
        with pytest.raises(ValidationError, match="does not belong"):
            await comment_service.create_comment(
                proposal, author, "On the proposal", parent_id=parent.id
            )

    @pytest.mark.asyncio
    async def test_reply_beyond_max_depth_is_rejected(self, unit_env):
        """Replies deeper than the configured maximum are not stored."""
        # Arrange
        comment_repo = await unit_env.get(CommentRepository)
        comment_service = CommentService(
            comment_repository=comment_repo,
            comment_settings=CommentSettings(max_depth=1),
        )
        tenant_id = new_tenant()
        commentable = make_commentable(tenant_id)
        author = user_identity(make_user(tenant_id))
        root = await comment_service.create_comment(commentable, author, "Root")
        reply = await comment_service.create_comment(
            commentable, author, "Reply", parent_id=root.id
        )

        # Act & Assert
        with pytest.raises(ValidationError, match="nested more than 1 levels"):
            await comment_service.create_comment(
                commentable, author, "Too deep", parent_id=reply.id
            )

        assert reply.depth == 1
        assert await comment_repo.count_by_commentable(tenant_id, commentable.ref) == 2

    @pytest.mark.asyncio
    async def test_alignment_allowed_when_enabled(self, unit_env):
        """Alignment is stored when the commentable allows it."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        tenant_id = new_tenant()
        commentable = make_commentable(tenant_id, allows_alignment=True)

        # Act
        comment = await comment_service.create_comment(
            commentable,
            user_identity(make_user(tenant_id)),
            "I support this",
            alignment=Alignment.FAVOR,
        )

        # Assert
        assert comment.alignment == Alignment.FAVOR

    @pytest.mark.asyncio
    @pytest.mark.parametrize("alignment", list(Alignment))
    async def test_alignment_rejected_when_disabled(self, unit_env, alignment):
        """Any alignment on a commentable without alignment is not authorized."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        tenant_id = new_tenant()
        commentable = make_commentable(tenant_id, allows_alignment=False)

        # Act & Assert
        with pytest.raises(AuthorizationError) as exc_info:
            await comment_service.create_comment(
                commentable,
                user_identity(make_user(tenant_id)),
                "I support this",
                alignment=alignment,
            )

        assert isinstance(exc_info.value, FeatureDisabledError)
        assert exc_info.value.feature == "Alignment"
        assert await comment_repo.count_by_commentable(tenant_id, commentable.ref) == 0


class TestListComments:
    """Tests for list_comments method."""

    @pytest.mark.asyncio
    async def test_lists_all_depths_in_creation_order(self, unit_env):
        """Every comment of the commentable comes back, oldest first."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        tenant_id = new_tenant()
        commentable = make_commentable(tenant_id)
        author = make_user(tenant_id)

        first = make_comment(commentable, author, minutes_after_base(0))
        second = make_comment(commentable, author, minutes_after_base(5), parent=first)
        third = make_comment(commentable, author, minutes_after_base(10))
        # Saved out of order on purpose
        for comment in (third, first, second):
            await comment_repo.save(comment)

        # Act
        comments = await comment_service.list_comments(tenant_id, commentable.ref)

        # Assert
        assert [c.id for c in comments] == [first.id, second.id, third.id]

    @pytest.mark.asyncio
    async def test_other_commentables_and_tenants_are_excluded(self, unit_env):
        """Listing is scoped to one commentable of one tenant."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        tenant_id = new_tenant()
        commentable = make_commentable(tenant_id)
        other = make_commentable(tenant_id)
        author = make_user(tenant_id)

        mine = make_comment(commentable, author, minutes_after_base(0))
        await comment_repo.save(mine)
        await comment_repo.save(make_comment(other, author, minutes_after_base(1)))

        # Act
        comments = await comment_service.list_comments(tenant_id, commentable.ref)
        foreign = await comment_service.list_comments(new_tenant(), commentable.ref)

        # Assert
        assert [c.id for c in comments] == [mine.id]
        assert foreign == []

    @pytest.mark.asyncio
    async def test_recent_listing_returns_every_created_comment(self, unit_env):
        """N comments created through the service are all listed in order."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        commentable_repo = await unit_env.get(CommentableRepository)
        tenant_id = new_tenant()
        commentable = await commentable_repo.save(make_commentable(tenant_id))
        author = user_identity(make_user(tenant_id))

        created = [
            await comment_service.create_comment(commentable, author, f"Point {i}")
            for i in range(5)
        ]

        # Act
        comments = await comment_service.list_comments(tenant_id, commentable.ref)

        # Assert
        assert [c.id for c in comments] == [c.id for c in created]
        assert await comment_service.count_comments(tenant_id, commentable.ref) == 5


class TestGetCommentById:
    """Tests for get_comment_by_id method."""

    @pytest.mark.asyncio
    async def test_found_only_within_its_tenant(self, unit_env):
        """A comment is returned for its own tenant and hidden from others."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        tenant_id = new_tenant()
        commentable = make_commentable(tenant_id)
        comment = await comment_repo.save(
            make_comment(commentable, make_user(tenant_id), minutes_after_base(0))
        )

        # Act
        found = await comment_service.get_comment_by_id(tenant_id, comment.id)
        hidden = await comment_service.get_comment_by_id(new_tenant(), comment.id)

        # Assert
        assert found == comment
        assert hidden is None
