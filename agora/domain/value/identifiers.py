"""Strongly typed identifiers for Agora domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Tenant (organization) owning every other entity
TenantId = NewType("TenantId", UUID)

# Core domain entity identifiers
UserId = NewType("UserId", UUID)
UserGroupId = NewType("UserGroupId", UUID)
CommentableId = NewType("CommentableId", UUID)
CommentId = NewType("CommentId", UUID)
VoteId = NewType("VoteId", UUID)
