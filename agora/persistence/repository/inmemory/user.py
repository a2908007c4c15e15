"""In-memory user repository for testing."""

from typing import Optional

from agora.domain.model.user import User
from agora.domain.repository.user import UserRepository
from agora.domain.value import TenantId, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, tenant_id: TenantId, user_id: UserId) -> Optional[User]:
        """Find a user by ID within a tenant."""
        user = self._users.get(user_id)
        if user and user.tenant_id == tenant_id:
            return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user
