"""List eligible user groups use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase
from agora.domain.error import ValidationError
from agora.domain.service import AuthorshipService
from agora.domain.value import TenantId, UserId


class UserGroupItem(BaseModel):
    """User group a member may comment as."""

    user_group_id: str
    name: str


class ListEligibleGroupsRequest(BaseModel):
    """List eligible groups request."""

    tenant_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class ListEligibleGroupsResponse(BaseModel):
    """List eligible groups response."""

    groups: list[UserGroupItem]


class ListEligibleGroupsUseCase(BaseUseCase):
    """Use case for listing the groups a user may comment on behalf of."""

    def __init__(self, authorship_service: AuthorshipService) -> None:
        self.authorship_service = authorship_service

    async def execute(
        self, request: ListEligibleGroupsRequest
    ) -> ListEligibleGroupsResponse:
        try:
            tenant_id = TenantId(UUID(request.tenant_id))
            user_id = UserId(UUID(request.user_id))
        except ValueError as e:
            raise ValidationError(f"Invalid user reference: {e}") from e

        groups = await self.authorship_service.eligible_groups(tenant_id, user_id)
        return ListEligibleGroupsResponse(
            groups=[
                UserGroupItem(user_group_id=str(group.id), name=group.name.root)
                for group in groups
            ]
        )
