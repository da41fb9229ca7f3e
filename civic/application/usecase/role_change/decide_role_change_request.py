"""Decide role change request use case."""

from uuid import UUID

from pydantic import BaseModel

from civic.application.usecase.base import BaseUseCase
from civic.domain.service import RoleChangeService
from civic.domain.value import RoleChangeDecision, RoleChangeRequestId, UserId

from .response import RoleChangeRequestResponse


class DecideRoleChangeRequestRequest(BaseModel):
    """Decide role change request request."""

    request_id: str
    reviewer_id: str
    decision: RoleChangeDecision


class DecideRoleChangeRequestUseCase(
    BaseUseCase[DecideRoleChangeRequestRequest, RoleChangeRequestResponse]
):
    """Use case for an administrator reviewing a role change request."""

    def __init__(self, role_change_service: RoleChangeService) -> None:
        self.role_change_service = role_change_service

    async def execute(
        self, request: DecideRoleChangeRequestRequest
    ) -> RoleChangeRequestResponse:
        role_change = await self.role_change_service.decide(
            request_id=RoleChangeRequestId(UUID(request.request_id)),
            reviewer_id=UserId(UUID(request.reviewer_id)),
            decision=request.decision,
        )
        return RoleChangeRequestResponse.from_domain(role_change)
