"""Decide join request use case."""

from uuid import UUID

from pydantic import BaseModel

from civic.application.usecase.base import BaseUseCase
from civic.domain.service import JoinRequestService
from civic.domain.value import JoinDecision, JoinRequestId, UserId

from .response import JoinRequestResponse


class DecideJoinRequestRequest(BaseModel):
    """Decide join request request."""

    request_id: str
    actor_id: str
    decision: JoinDecision


class DecideJoinRequestUseCase(
    BaseUseCase[DecideJoinRequestRequest, JoinRequestResponse]
):
    """Use case for approving or declining a join request."""

    def __init__(self, join_request_service: JoinRequestService) -> None:
        self.join_request_service = join_request_service

    async def execute(self, request: DecideJoinRequestRequest) -> JoinRequestResponse:
        """Execute decide join request flow.

        Raises:
            NotFoundError: If the request does not exist
            ConflictError: If the request is no longer pending
            ForbiddenError: If the actor initiated the request or owns neither side
        """
        join_request = await self.join_request_service.decide(
            request_id=JoinRequestId(UUID(request.request_id)),
            actor_id=UserId(UUID(request.actor_id)),
            decision=request.decision,
        )
        return JoinRequestResponse.from_domain(join_request)
