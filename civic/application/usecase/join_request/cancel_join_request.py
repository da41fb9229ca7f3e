"""Cancel join request use case."""

from uuid import UUID

from pydantic import BaseModel

from civic.application.usecase.base import BaseUseCase
from civic.domain.service import JoinRequestService
from civic.domain.value import JoinRequestId, UserId

from .response import JoinRequestResponse


class CancelJoinRequestRequest(BaseModel):
    """Cancel join request request."""

    request_id: str
    actor_id: str


class CancelJoinRequestUseCase(
    BaseUseCase[CancelJoinRequestRequest, JoinRequestResponse]
):
    """Use case for withdrawing a pending join request."""

    def __init__(self, join_request_service: JoinRequestService) -> None:
        self.join_request_service = join_request_service

    async def execute(self, request: CancelJoinRequestRequest) -> JoinRequestResponse:
        join_request = await self.join_request_service.cancel(
            request_id=JoinRequestId(UUID(request.request_id)),
            actor_id=UserId(UUID(request.actor_id)),
        )
        return JoinRequestResponse.from_domain(join_request)
