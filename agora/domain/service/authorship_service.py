"""Authorship domain service."""

import logfire

from agora.domain.error import AuthorizationError
from agora.domain.model import UserGroup
from agora.domain.repository import UserGroupRepository, UserRepository
from agora.domain.value import (
    AuthorIdentity,
    AuthorKind,
    TenantId,
    UserGroupId,
    UserId,
)

from .base import Service


class AuthorshipService(Service):
    """Resolves the identity a new comment is published under.

    Callers are expected to be authenticated already; this service only
    decides whether the acting user may speak as the requested identity.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        user_group_repository: UserGroupRepository,
    ) -> None:
        """Initialize authorship service.

        Args:
            user_repository: User repository
            user_group_repository: User group repository
        """
        self.user_repository = user_repository
        self.user_group_repository = user_group_repository

    async def resolve(
        self,
        tenant_id: TenantId,
        acting_user_id: UserId,
        as_group_id: UserGroupId | None = None,
    ) -> AuthorIdentity:
        """Resolve the author identity for a new comment.

        Args:
            tenant_id: Tenant the comment is created in
            acting_user_id: Authenticated user creating the comment
            as_group_id: Group to comment on behalf of, if any

        Returns:
            The user's own identity, or the group identity with the acting
            user kept for attribution

        Raises:
            AuthorizationError: If the user does not belong to the tenant, or
                is not a member of the requested group, or the group is not
                verified
        """
        with logfire.span(
            "authorship_service.resolve",
            tenant_id=str(tenant_id),
            user_id=str(acting_user_id),
            user_group_id=str(as_group_id) if as_group_id else None,
        ):
            user = await self.user_repository.find_by_id(tenant_id, acting_user_id)
            if not user:
                logfire.warn(
                    "Acting user not found in tenant",
                    tenant_id=str(tenant_id),
                    user_id=str(acting_user_id),
                )
                raise AuthorizationError(
                    f"User {acting_user_id} cannot comment in tenant {tenant_id}"
                )

            if as_group_id is None:
                return AuthorIdentity(
                    kind=AuthorKind.USER,
                    user_id=user.id,
                    display_name=user.name,
                )

            is_member = await self.user_group_repository.is_verified_member(
                tenant_id, user.id, as_group_id
            )
            group = (
                await self.user_group_repository.find_by_id(tenant_id, as_group_id)
                if is_member
                else None
            )
            if not group:
                logfire.warn(
                    "Group authorship denied",
                    user_id=str(user.id),
                    user_group_id=str(as_group_id),
                )
                raise AuthorizationError(
                    f"User {user.id} cannot comment as user group {as_group_id}"
                )

            logfire.info(
                "Commenting as user group",
                user_id=str(user.id),
                user_group_id=str(group.id),
                group_name=group.name.root,
            )
            return AuthorIdentity(
                kind=AuthorKind.USER_GROUP,
                user_id=user.id,
                user_group_id=group.id,
                display_name=group.name,
            )

    async def eligible_groups(
        self, tenant_id: TenantId, user_id: UserId
    ) -> list[UserGroup]:
        """List the verified groups a user may comment on behalf of.

        Args:
            tenant_id: Tenant the groups belong to
            user_id: Member user ID

        Returns:
            Verified groups the user belongs to, ordered by name
        """
        with logfire.span(
            "authorship_service.eligible_groups",
            tenant_id=str(tenant_id),
            user_id=str(user_id),
        ):
            groups = await self.user_group_repository.find_by_member(tenant_id, user_id)
            return [group for group in groups if group.verified]
