"""User group routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from agora.application.usecase.user_group import (
    ListEligibleGroupsRequest,
    ListEligibleGroupsResponse,
    ListEligibleGroupsUseCase,
)
from agora.domain.error import DomainError
from agora.domain.service import JWTService
from agora.interface.api.auth import require_session
from agora.interface.error import to_http_exception

router = APIRouter(
    prefix="/tenants/{tenant_id}/users", tags=["user_groups"], route_class=DishkaRoute
)


@router.get("/me/groups", response_model=ListEligibleGroupsResponse)
async def list_my_groups(
    tenant_id: str,
    list_eligible_groups_use_case: FromDishka[ListEligibleGroupsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListEligibleGroupsResponse:
    """List the verified groups the caller may comment on behalf of.

    Requires authentication.
    """
    session = require_session(jwt_service, auth_token, tenant_id, "list groups")

    try:
        return await list_eligible_groups_use_case.execute(
            ListEligibleGroupsRequest(tenant_id=tenant_id, user_id=session.user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
