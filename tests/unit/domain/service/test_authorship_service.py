"""Unit tests for AuthorshipService."""

from uuid import uuid4

import pytest

from agora.domain.error import AuthorizationError
from agora.domain.model import UserGroupMembership
from agora.domain.repository import UserGroupRepository, UserRepository
from agora.domain.service import AuthorshipService
from agora.domain.value import AuthorKind, UserGroupId, UserId
from tests.conftest import make_group, make_user, new_tenant
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


async def _member_of(unit_env, verified: bool):
    """Store a user who is a member of a (verified or not) group."""
    user_repo = await unit_env.get(UserRepository)
    group_repo = await unit_env.get(UserGroupRepository)
    tenant_id = new_tenant()
    user = await user_repo.save(make_user(tenant_id))
    group = await group_repo.save(make_group(tenant_id, verified=verified))
    await group_repo.add_membership(
        UserGroupMembership(user_id=user.id, user_group_id=group.id)
    )
    return user, group


class TestResolve:
    """Tests for resolve method."""

    @pytest.mark.asyncio
    async def test_resolves_user_identity_without_group(self, unit_env):
        """Without a group the user comments as themself."""
        # Arrange
        authorship_service = await unit_env.get(AuthorshipService)
        user_repo = await unit_env.get(UserRepository)
        tenant_id = new_tenant()
        user = await user_repo.save(make_user(tenant_id, name="Grace Hopper"))

        # Act
        identity = await authorship_service.resolve(tenant_id, user.id)

        # Assert
        assert identity.kind == AuthorKind.USER
        assert identity.user_id == user.id
        assert identity.user_group_id is None
        assert identity.display_name.root == "Grace Hopper"
        assert not identity.is_group

    @pytest.mark.asyncio
    async def test_verified_member_comments_as_group(self, unit_env):
        """A verified member gets the group identity, keeping the acting user."""
        # Arrange
        authorship_service = await unit_env.get(AuthorshipService)
        user, group = await _member_of(unit_env, verified=True)

        # Act
        identity = await authorship_service.resolve(
            user.tenant_id, user.id, as_group_id=group.id
        )

        # Assert
        assert identity.kind == AuthorKind.USER_GROUP
        assert identity.is_group
        assert identity.user_group_id == group.id
        assert identity.user_id == user.id
        assert identity.display_name == group.name

    @pytest.mark.asyncio
    async def test_member_of_unverified_group_is_refused(self, unit_env):
        """Membership of an unverified group does not grant group authorship."""
        # Arrange
        authorship_service = await unit_env.get(AuthorshipService)
        user, group = await _member_of(unit_env, verified=False)

        # Act & Assert
        with pytest.raises(AuthorizationError):
            await authorship_service.resolve(user.tenant_id, user.id, group.id)

    @pytest.mark.asyncio
    async def test_non_member_is_refused(self, unit_env):
        """A user outside a verified group cannot speak for it."""
        # Arrange
        authorship_service = await unit_env.get(AuthorshipService)
        user_repo = await unit_env.get(UserRepository)
        _, group = await _member_of(unit_env, verified=True)
        outsider = await user_repo.save(make_user(group.tenant_id, name="Eve Outsider"))

        # Act & Assert
        with pytest.raises(AuthorizationError):
            await authorship_service.resolve(group.tenant_id, outsider.id, group.id)

    @pytest.mark.asyncio
    async def test_unknown_group_is_refused(self, unit_env):
        """Asking for a group that does not exist is not authorized."""
        # Arrange
        authorship_service = await unit_env.get(AuthorshipService)
        user_repo = await unit_env.get(UserRepository)
        tenant_id = new_tenant()
        user = await user_repo.save(make_user(tenant_id))

        # Act & Assert
        with pytest.raises(AuthorizationError):
            await authorship_service.resolve(tenant_id, user.id, UserGroupId(uuid4()))

    @pytest.mark.asyncio
    async def test_user_of_other_tenant_is_refused(self, unit_env):
        """The acting user must belong to the tenant."""
        # Arrange
        authorship_service = await unit_env.get(AuthorshipService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user(new_tenant()))

        # Act & Assert
        with pytest.raises(AuthorizationError):
            await authorship_service.resolve(new_tenant(), user.id)

    @pytest.mark.asyncio
    async def test_unknown_user_is_refused(self, unit_env):
        """An acting user that does not exist is not authorized."""
        # Arrange
        authorship_service = await unit_env.get(AuthorshipService)

        # Act & Assert
        with pytest.raises(AuthorizationError):
            await authorship_service.resolve(new_tenant(), UserId(uuid4()))


class TestEligibleGroups:
    """Tests for eligible_groups method."""

    @pytest.mark.asyncio
    async def test_lists_only_verified_groups_by_name(self, unit_env):
        """Unverified groups are left out; the rest are sorted by name."""
        # Arrange
        authorship_service = await unit_env.get(AuthorshipService)
        user_repo = await unit_env.get(UserRepository)
        group_repo = await unit_env.get(UserGroupRepository)
        tenant_id = new_tenant()
        user = await user_repo.save(make_user(tenant_id))

        zoo = await group_repo.save(make_group(tenant_id, name="Zoo Society"))
        arts = await group_repo.save(make_group(tenant_id, name="Arts Collective"))
        pending = await group_repo.save(
            make_group(tenant_id, name="Bikers Club", verified=False)
        )
        for group in (zoo, arts, pending):
            await group_repo.add_membership(
                UserGroupMembership(user_id=user.id, user_group_id=group.id)
            )
        # Not a member of this one
        await group_repo.save(make_group(tenant_id, name="Chess Club"))

        # Act
        groups = await authorship_service.eligible_groups(tenant_id, user.id)

        # Assert
        assert [g.name.root for g in groups] == ["Arts Collective", "Zoo Society"]
