"""Role change request response model."""

from datetime import datetime

from pydantic import BaseModel

from civic.domain.model.role_change_request import RoleChangeRequest
from civic.domain.value import RoleChangeStatus


class RoleChangeRequestResponse(BaseModel):
    """Role change request as returned to callers."""

    request_id: str
    user_id: str
    requested_role_id: str
    status: RoleChangeStatus
    submitted_at: datetime
    reviewed_at: datetime | None
    reviewer_id: str | None

    @classmethod
    def from_domain(cls, request: RoleChangeRequest) -> "RoleChangeRequestResponse":
        return cls(
            request_id=str(request.id),
            user_id=str(request.user_id),
            requested_role_id=str(request.requested_role_id),
            status=request.status,
            submitted_at=request.submitted_at,
            reviewed_at=request.reviewed_at,
            reviewer_id=str(request.reviewer_id) if request.reviewer_id else None,
        )
