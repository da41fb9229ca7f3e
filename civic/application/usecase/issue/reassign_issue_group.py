"""Reassign issue group use case."""

from uuid import UUID

from pydantic import BaseModel

from civic.application.usecase.base import BaseUseCase
from civic.domain.service import MembershipService
from civic.domain.value import GroupId, IssueId, UserId


class ReassignIssueGroupRequest(BaseModel):
    """Reassign issue group request.

    ``group_id=None`` removes the issue from its group.
    """

    issue_id: str
    actor_id: str  # User ID from the identity provider
    group_id: str | None = None


class ReassignIssueGroupUseCase(BaseUseCase[ReassignIssueGroupRequest, None]):
    """Use case for the issue owner's direct move between groups."""

    def __init__(self, membership_service: MembershipService) -> None:
        self.membership_service = membership_service

    async def execute(self, request: ReassignIssueGroupRequest) -> None:
        await self.membership_service.reassign_issue_group(
            issue_id=IssueId(UUID(request.issue_id)),
            group_id=GroupId(UUID(request.group_id)) if request.group_id else None,
            actor_id=UserId(UUID(request.actor_id)),
        )
