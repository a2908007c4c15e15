"""Vote entity.

Votes are weighted (+1 / -1) and keyed by (comment, author): casting
again replaces the author's previous vote instead of adding to it.
"""

from datetime import datetime

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import CommentId, TenantId, UserId, VoteId, VoteWeight


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per author per comment (enforced by a unique constraint)
    - Re-voting replaces the weight (last write wins)
    """

    id: VoteId
    tenant_id: TenantId
    comment_id: CommentId
    author_id: UserId
    weight: VoteWeight
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
