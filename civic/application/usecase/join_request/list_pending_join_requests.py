"""List pending join requests use case."""

from uuid import UUID

from pydantic import BaseModel

from civic.application.usecase.base import BaseUseCase
from civic.domain.service import JoinRequestService
from civic.domain.value import UserId

from .response import JoinRequestResponse


class ListPendingJoinRequestsRequest(BaseModel):
    """List pending join requests request."""

    actor_id: str


class ListPendingJoinRequestsResponse(BaseModel):
    """Requests waiting for the actor's decision, newest first."""

    requests: list[JoinRequestResponse]


class ListPendingJoinRequestsUseCase(
    BaseUseCase[ListPendingJoinRequestsRequest, ListPendingJoinRequestsResponse]
):
    """Use case for the actor's join request inbox."""

    def __init__(self, join_request_service: JoinRequestService) -> None:
        self.join_request_service = join_request_service

    async def execute(
        self, request: ListPendingJoinRequestsRequest
    ) -> ListPendingJoinRequestsResponse:
        pending = await self.join_request_service.list_pending_for(
            UserId(UUID(request.actor_id))
        )
        return ListPendingJoinRequestsResponse(
            requests=[JoinRequestResponse.from_domain(r) for r in pending]
        )
