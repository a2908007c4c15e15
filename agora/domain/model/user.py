"""User entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import DisplayName, TenantId, UserId


class User(DomainModel):
    """Participant of a tenant's platform.

    Users are managed by the host platform; the comment core reads them to
    display authors and to address notifications.
    """

    id: UserId
    tenant_id: TenantId
    name: DisplayName
    nickname: str = Field(min_length=1, max_length=50)
    email: Optional[str] = None  # Notification address
    created_at: datetime = Field(default_factory=datetime.now)
