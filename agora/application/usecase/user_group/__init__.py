"""User group use cases."""

from .list_eligible_groups import (
    ListEligibleGroupsRequest,
    ListEligibleGroupsResponse,
    ListEligibleGroupsUseCase,
    UserGroupItem,
)

__all__ = [
    "ListEligibleGroupsRequest",
    "ListEligibleGroupsResponse",
    "ListEligibleGroupsUseCase",
    "UserGroupItem",
]
