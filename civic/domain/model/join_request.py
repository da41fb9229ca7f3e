"""Group join request entity.

A join request proposes linking an issue to a group. Either side may
propose; the other side decides.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from civic.domain.model.common import DomainModel
from civic.domain.value import GroupId, IssueId, JoinRequestId, JoinRequestStatus


class GroupJoinRequest(DomainModel):
    """Group join request entity.

    ``initiated_by_group`` is True when the group owner proposed including
    the issue and False when the issue owner asked to join the group.
    ``handled_at`` is stamped exactly when the request leaves PENDING.
    """

    id: JoinRequestId
    issue_id: IssueId
    group_id: GroupId
    initiated_by_group: bool
    status: JoinRequestStatus = JoinRequestStatus.PENDING
    requested_at: datetime = Field(default_factory=datetime.now)
    handled_at: Optional[datetime] = None

    @model_validator(mode="after")
    def validate_handled_at(self) -> "GroupJoinRequest":
        """Terminal requests carry a handled_at timestamp, pending ones do not."""
        if self.status.is_terminal and self.handled_at is None:
            raise ValueError(f"{self.status.value} request requires handled_at")
        if not self.status.is_terminal and self.handled_at is not None:
            raise ValueError("Pending request cannot have handled_at")
        return self

    @property
    def is_pending(self) -> bool:
        return self.status == JoinRequestStatus.PENDING
