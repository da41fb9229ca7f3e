"""Submit join request use case."""

from uuid import UUID

from pydantic import BaseModel

from civic.application.usecase.base import BaseUseCase
from civic.domain.service import JoinRequestService
from civic.domain.value import GroupId, IssueId, UserId

from .response import JoinRequestResponse


class SubmitJoinRequestRequest(BaseModel):
    """Submit join request request."""

    issue_id: str
    group_id: str
    actor_id: str  # User ID from the identity provider


class SubmitJoinRequestUseCase(
    BaseUseCase[SubmitJoinRequestRequest, JoinRequestResponse]
):
    """Use case for proposing that an issue join a group."""

    def __init__(self, join_request_service: JoinRequestService) -> None:
        """Initialize submit join request use case.

        Args:
            join_request_service: Join request domain service
        """
        self.join_request_service = join_request_service

    async def execute(self, request: SubmitJoinRequestRequest) -> JoinRequestResponse:
        """Execute submit join request flow.

        Returns:
            The created request; already APPROVED when the actor owns
            both the issue and the group

        Raises:
            NotFoundError: If the issue or group does not exist
            ForbiddenError: If the actor owns neither side
            ConflictError: If already linked or a pending request exists
        """
        join_request = await self.join_request_service.submit(
            issue_id=IssueId(UUID(request.issue_id)),
            group_id=GroupId(UUID(request.group_id)),
            actor_id=UserId(UUID(request.actor_id)),
        )
        return JoinRequestResponse.from_domain(join_request)
