"""Group entity.

Groups collect related issues under one owner.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from civic.domain.model.common import DomainModel
from civic.domain.value import GroupId, UserId


class Group(DomainModel):
    """Group entity.

    Carries the same vote and comment counters as an issue, plus
    ``issue_count``: the number of issues whose ``group_id`` points here.
    """

    id: GroupId
    name: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    owner_id: UserId
    upvote_count: int = Field(default=0, ge=0)
    comment_count: int = Field(default=0, ge=0)
    issue_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
