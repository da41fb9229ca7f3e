"""Join request response model shared by the join request use cases."""

from datetime import datetime

from pydantic import BaseModel

from civic.domain.model.join_request import GroupJoinRequest
from civic.domain.value import JoinRequestStatus


class JoinRequestResponse(BaseModel):
    """Join request as returned to callers."""

    request_id: str
    issue_id: str
    group_id: str
    initiated_by_group: bool
    status: JoinRequestStatus
    requested_at: datetime
    handled_at: datetime | None

    @classmethod
    def from_domain(cls, request: GroupJoinRequest) -> "JoinRequestResponse":
        return cls(
            request_id=str(request.id),
            issue_id=str(request.issue_id),
            group_id=str(request.group_id),
            initiated_by_group=request.initiated_by_group,
            status=request.status,
            requested_at=request.requested_at,
            handled_at=request.handled_at,
        )
