"""Vote entity.

Votes are weighted upvotes. Each user can hold one vote per subject.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from civic.domain.model.common import DomainModel
from civic.domain.value import SubjectType, UserId, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per voter per subject (enforced by database unique constraint)
    - ``weight`` is the voter's role weight at cast time and never changes,
      so removing the vote later subtracts exactly what was added
    """

    id: VoteId
    subject_type: SubjectType
    subject_id: UUID  # IssueId or GroupId (both are UUIDs)
    voter_id: UserId
    weight: int = Field(default=1, ge=1)
    cast_at: datetime = Field(default_factory=datetime.now)
