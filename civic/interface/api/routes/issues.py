"""Issue routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel

from civic.application.usecase.issue import (
    CreateIssueRequest,
    CreateIssueResponse,
    CreateIssueUseCase,
    ReassignIssueGroupRequest,
    ReassignIssueGroupUseCase,
)

from .actor import ActorId

router = APIRouter(prefix="/issues", tags=["issues"], route_class=DishkaRoute)


class CreateIssueBody(BaseModel):
    """Create issue request body."""

    title: str
    description: str
    group_id: UUID | None = None


class IssueGroupBody(BaseModel):
    """Target group for an issue; null removes it from its group."""

    group_id: UUID | None = None


@router.post("", response_model=CreateIssueResponse, status_code=status.HTTP_201_CREATED)
async def create_issue(
    body: CreateIssueBody,
    actor_id: ActorId,
    create_issue_use_case: FromDishka[CreateIssueUseCase],
) -> CreateIssueResponse:
    """File a new issue, optionally directly into a group."""
    request = CreateIssueRequest(
        owner_id=str(actor_id),
        title=body.title,
        description=body.description,
        group_id=str(body.group_id) if body.group_id else None,
    )
    return await create_issue_use_case.execute(request)


@router.put("/{issue_id}/group", status_code=status.HTTP_204_NO_CONTENT)
async def reassign_issue_group(
    issue_id: UUID,
    body: IssueGroupBody,
    actor_id: ActorId,
    reassign_use_case: FromDishka[ReassignIssueGroupUseCase],
) -> None:
    """Move an issue out of its group, or into another group the owner runs.

    Keeps both groups' ``issue_count`` in step with the move.
    """
    await reassign_use_case.execute(
        ReassignIssueGroupRequest(
            issue_id=str(issue_id),
            actor_id=str(actor_id),
            group_id=str(body.group_id) if body.group_id else None,
        )
    )
