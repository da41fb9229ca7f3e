"""List pending role change requests use case."""

from uuid import UUID

from pydantic import BaseModel

from civic.application.usecase.base import BaseUseCase
from civic.domain.service import RoleChangeService
from civic.domain.value import UserId

from .response import RoleChangeRequestResponse


class ListPendingRoleChangeRequestsRequest(BaseModel):
    """List pending role change requests request."""

    reviewer_id: str


class ListPendingRoleChangeRequestsResponse(BaseModel):
    """Administrator review queue, oldest first."""

    requests: list[RoleChangeRequestResponse]


class ListPendingRoleChangeRequestsUseCase(
    BaseUseCase[ListPendingRoleChangeRequestsRequest, ListPendingRoleChangeRequestsResponse]
):
    """Use case for the administrator review queue."""

    def __init__(self, role_change_service: RoleChangeService) -> None:
        self.role_change_service = role_change_service

    async def execute(
        self, request: ListPendingRoleChangeRequestsRequest
    ) -> ListPendingRoleChangeRequestsResponse:
        pending = await self.role_change_service.list_pending(
            UserId(UUID(request.reviewer_id))
        )
        return ListPendingRoleChangeRequestsResponse(
            requests=[RoleChangeRequestResponse.from_domain(r) for r in pending]
        )
