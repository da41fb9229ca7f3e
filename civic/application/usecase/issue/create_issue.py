"""Create issue use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from civic.application.usecase.base import BaseUseCase
from civic.domain.service import MembershipService
from civic.domain.value import GroupId, UserId


class CreateIssueRequest(BaseModel):
    """Create issue request."""

    owner_id: str  # User ID from the identity provider
    title: str
    description: str
    group_id: str | None = None


class CreateIssueResponse(BaseModel):
    """Create issue response."""

    issue_id: str
    title: str
    description: str
    owner_id: str
    group_id: str | None
    upvote_count: int
    comment_count: int
    posted_at: datetime


class CreateIssueUseCase(BaseUseCase[CreateIssueRequest, CreateIssueResponse]):
    """Use case for filing an issue, optionally directly into a group."""

    def __init__(self, membership_service: MembershipService) -> None:
        """Initialize create issue use case.

        Args:
            membership_service: Membership domain service
        """
        self.membership_service = membership_service

    async def execute(self, request: CreateIssueRequest) -> CreateIssueResponse:
        """Execute create issue flow.

        Raises:
            ValidationError: If title or description is blank
            NotFoundError: If the group does not exist
        """
        issue = await self.membership_service.create_issue(
            owner_id=UserId(UUID(request.owner_id)),
            title=request.title,
            description=request.description,
            group_id=GroupId(UUID(request.group_id)) if request.group_id else None,
        )

        return CreateIssueResponse(
            issue_id=str(issue.id),
            title=issue.title,
            description=issue.description,
            owner_id=str(issue.owner_id),
            group_id=str(issue.group_id) if issue.group_id else None,
            upvote_count=issue.upvote_count,
            comment_count=issue.comment_count,
            posted_at=issue.posted_at,
        )
