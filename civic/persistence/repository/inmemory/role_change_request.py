"""In-memory role change request repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from civic.domain.model.role_change_request import RoleChangeRequest
from civic.domain.repository.constraint import (
    PENDING_ROLE_CHANGE_REQUEST,
    ConstraintViolation,
)
from civic.domain.repository.role_change_request import RoleChangeRequestRepository
from civic.domain.value import RoleChangeRequestId, RoleChangeStatus, UserId

from .base import InMemoryRepository


class InMemoryRoleChangeRequestRepository(
    InMemoryRepository[RoleChangeRequest], RoleChangeRequestRepository
):
    """In-memory implementation of RoleChangeRequestRepository for testing."""

    async def find_by_id(
        self, request_id: RoleChangeRequestId, for_update: bool = False
    ) -> Optional[RoleChangeRequest]:
        return self._rows.get(request_id)

    async def find_pending_by_user(self, user_id: UserId) -> Optional[RoleChangeRequest]:
        for request in self._rows.values():
            if request.is_pending and request.user_id == user_id:
                return request
        return None

    async def find_pending(self) -> list[RoleChangeRequest]:
        pending = [r for r in self._rows.values() if r.is_pending]
        pending.sort(key=lambda r: r.submitted_at)
        return pending

    async def save(self, request: RoleChangeRequest) -> RoleChangeRequest:
        """Save a role change request.

        Raises:
            IntegrityError: If the user already has a pending request
        """
        if request.is_pending and await self.find_pending_by_user(request.user_id):
            raise IntegrityError(
                "INSERT INTO role_change_requests",
                None,
                ConstraintViolation(PENDING_ROLE_CHANGE_REQUEST),
            )

        self._rows[request.id] = request
        return request

    async def update_review(
        self,
        request_id: RoleChangeRequestId,
        status: RoleChangeStatus,
        reviewed_at: datetime,
        reviewer_id: UserId,
    ) -> RoleChangeRequest:
        updated = self._rows[request_id].evolve(
            status=status, reviewed_at=reviewed_at, reviewer_id=reviewer_id
        )
        self._rows[request_id] = updated
        return updated
