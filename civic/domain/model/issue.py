"""Issue entity.

Issues are the complaints citizens file. An issue may belong to at most
one group at a time.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from civic.domain.model.common import DomainModel
from civic.domain.value import GroupId, IssueId, UserId


class Issue(DomainModel):
    """Issue entity.

    ``upvote_count`` and ``comment_count`` are denormalized caches kept in
    step by the vote and comment services. ``group_id`` only changes
    through the membership service so the groups' ``issue_count`` follows.
    """

    id: IssueId
    title: str = Field(min_length=1, max_length=300)
    description: str = Field(min_length=1, max_length=10000)
    owner_id: UserId
    group_id: Optional[GroupId] = None
    upvote_count: int = Field(default=0, ge=0)
    comment_count: int = Field(default=0, ge=0)
    posted_at: datetime = Field(default_factory=datetime.now)
