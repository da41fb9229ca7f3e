"""Submit role change request use case."""

from uuid import UUID

from pydantic import BaseModel

from civic.application.usecase.base import BaseUseCase
from civic.domain.service import RoleChangeService
from civic.domain.value import RoleId, UserId

from .response import RoleChangeRequestResponse


class SubmitRoleChangeRequestRequest(BaseModel):
    """Submit role change request request."""

    user_id: str
    requested_role_id: str


class SubmitRoleChangeRequestUseCase(
    BaseUseCase[SubmitRoleChangeRequestRequest, RoleChangeRequestResponse]
):
    """Use case for asking an administrator for another role."""

    def __init__(self, role_change_service: RoleChangeService) -> None:
        """Initialize submit role change request use case.

        Args:
            role_change_service: Role change domain service
        """
        self.role_change_service = role_change_service

    async def execute(
        self, request: SubmitRoleChangeRequestRequest
    ) -> RoleChangeRequestResponse:
        """Execute submit role change flow.

        Raises:
            NotFoundError: If the user or role does not exist
            ConflictError: If a request is already pending or the role is unchanged
        """
        role_change = await self.role_change_service.submit(
            user_id=UserId(UUID(request.user_id)),
            requested_role_id=RoleId(UUID(request.requested_role_id)),
        )
        return RoleChangeRequestResponse.from_domain(role_change)
