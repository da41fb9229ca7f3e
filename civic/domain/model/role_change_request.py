"""Role change request entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from civic.domain.model.common import DomainModel
from civic.domain.value import RoleChangeRequestId, RoleChangeStatus, RoleId, UserId


class RoleChangeRequest(DomainModel):
    """Role change request entity.

    Submitted by a user, reviewed by an administrator. Approval moves the
    user to ``requested_role_id``.
    """

    id: RoleChangeRequestId
    user_id: UserId
    requested_role_id: RoleId
    status: RoleChangeStatus = RoleChangeStatus.PENDING
    submitted_at: datetime = Field(default_factory=datetime.now)
    reviewed_at: Optional[datetime] = None
    reviewer_id: Optional[UserId] = None

    @property
    def is_pending(self) -> bool:
        return self.status == RoleChangeStatus.PENDING
