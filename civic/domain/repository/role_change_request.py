"""Role change request repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from civic.domain.model.role_change_request import RoleChangeRequest
from civic.domain.value import RoleChangeRequestId, RoleChangeStatus, UserId


class RoleChangeRequestRepository(ABC):
    """Repository for RoleChangeRequest entity."""

    @abstractmethod
    async def find_by_id(
        self, request_id: RoleChangeRequestId, for_update: bool = False
    ) -> Optional[RoleChangeRequest]:
        """Find a role change request by ID."""
        pass

    @abstractmethod
    async def find_pending_by_user(self, user_id: UserId) -> Optional[RoleChangeRequest]:
        """Find the user's pending request, if any."""
        pass

    @abstractmethod
    async def find_pending(self) -> List[RoleChangeRequest]:
        """Find all pending requests, oldest first."""
        pass

    @abstractmethod
    async def save(self, request: RoleChangeRequest) -> RoleChangeRequest:
        """Insert a new request.

        Raises:
            IntegrityError: If the user already has a pending request
        """
        pass

    @abstractmethod
    async def update_review(
        self,
        request_id: RoleChangeRequestId,
        status: RoleChangeStatus,
        reviewed_at: datetime,
        reviewer_id: UserId,
    ) -> RoleChangeRequest:
        """Record an administrator's decision.

        Returns:
            The updated request
        """
        pass
