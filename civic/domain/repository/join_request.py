"""Group join request repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Collection, List, Optional

from civic.domain.model.join_request import GroupJoinRequest
from civic.domain.value import GroupId, IssueId, JoinRequestId, JoinRequestStatus


class JoinRequestRepository(ABC):
    """Repository for GroupJoinRequest entity."""

    @abstractmethod
    async def find_by_id(
        self, request_id: JoinRequestId, for_update: bool = False
    ) -> Optional[GroupJoinRequest]:
        """Find a join request by ID.

        Args:
            request_id: Request identifier
            for_update: Lock the row until the surrounding transaction ends

        Returns:
            The request if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_pending(
        self, issue_id: IssueId, group_id: GroupId
    ) -> Optional[GroupJoinRequest]:
        """Find the pending request for an (issue, group) pair, if any."""
        pass

    @abstractmethod
    async def find_pending_involving(
        self,
        issue_ids: Collection[IssueId],
        group_ids: Collection[GroupId],
    ) -> List[GroupJoinRequest]:
        """Find pending requests touching any of the given issues or groups.

        Returns:
            Requests ordered newest first
        """
        pass

    @abstractmethod
    async def save(self, request: GroupJoinRequest) -> GroupJoinRequest:
        """Insert a new join request.

        Raises:
            IntegrityError: If a pending request for the pair already exists
        """
        pass

    @abstractmethod
    async def update_status(
        self,
        request_id: JoinRequestId,
        status: JoinRequestStatus,
        handled_at: datetime,
    ) -> GroupJoinRequest:
        """Move a request to a terminal status.

        Returns:
            The updated request
        """
        pass
