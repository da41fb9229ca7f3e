"""In-memory group join request repository for testing."""

from datetime import datetime
from typing import Collection, Optional

from sqlalchemy.exc import IntegrityError

from civic.domain.model.join_request import GroupJoinRequest
from civic.domain.repository.constraint import PENDING_JOIN_REQUEST, ConstraintViolation
from civic.domain.repository.join_request import JoinRequestRepository
from civic.domain.value import GroupId, IssueId, JoinRequestId, JoinRequestStatus

from .base import InMemoryRepository


class InMemoryJoinRequestRepository(
    InMemoryRepository[GroupJoinRequest], JoinRequestRepository
):
    """In-memory implementation of JoinRequestRepository for testing."""

    async def find_by_id(
        self, request_id: JoinRequestId, for_update: bool = False
    ) -> Optional[GroupJoinRequest]:
        return self._rows.get(request_id)

    async def find_pending(
        self, issue_id: IssueId, group_id: GroupId
    ) -> Optional[GroupJoinRequest]:
        for request in self._rows.values():
            if (
                request.is_pending
                and request.issue_id == issue_id
                and request.group_id == group_id
            ):
                return request
        return None

    async def find_pending_involving(
        self,
        issue_ids: Collection[IssueId],
        group_ids: Collection[GroupId],
    ) -> list[GroupJoinRequest]:
        issue_set, group_set = set(issue_ids), set(group_ids)
        requests = [
            r
            for r in self._rows.values()
            if r.is_pending and (r.issue_id in issue_set or r.group_id in group_set)
        ]
        requests.sort(key=lambda r: r.requested_at, reverse=True)
        return requests

    async def save(self, request: GroupJoinRequest) -> GroupJoinRequest:
        """Save a join request.

        Raises:
            IntegrityError: If a pending request for the pair already exists
        """
        if request.is_pending and await self.find_pending(
            request.issue_id, request.group_id
        ):
            raise IntegrityError(
                "INSERT INTO group_join_requests",
                None,
                ConstraintViolation(PENDING_JOIN_REQUEST),
            )

        self._rows[request.id] = request
        return request

    async def update_status(
        self,
        request_id: JoinRequestId,
        status: JoinRequestStatus,
        handled_at: datetime,
    ) -> GroupJoinRequest:
        updated = self._rows[request_id].evolve(
            status=status, handled_at=handled_at
        )
        self._rows[request_id] = updated
        return updated
