"""Role change request routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel

from civic.application.usecase.role_change import (
    DecideRoleChangeRequestRequest,
    DecideRoleChangeRequestUseCase,
    ListPendingRoleChangeRequestsRequest,
    ListPendingRoleChangeRequestsResponse,
    ListPendingRoleChangeRequestsUseCase,
    RoleChangeRequestResponse,
    SubmitRoleChangeRequestRequest,
    SubmitRoleChangeRequestUseCase,
)
from civic.domain.value import RoleChangeDecision

from .actor import ActorId

router = APIRouter(prefix="/role-requests", tags=["role-requests"], route_class=DishkaRoute)


class SubmitRoleChangeBody(BaseModel):
    """Submit role change body."""

    requested_role_id: UUID


class RoleChangeDecisionBody(BaseModel):
    """Decision body."""

    decision: RoleChangeDecision


@router.post(
    "", response_model=RoleChangeRequestResponse, status_code=status.HTTP_201_CREATED
)
async def submit_role_change_request(
    body: SubmitRoleChangeBody,
    actor_id: ActorId,
    submit_use_case: FromDishka[SubmitRoleChangeRequestUseCase],
) -> RoleChangeRequestResponse:
    """Ask an administrator to move the actor to another role."""
    request = SubmitRoleChangeRequestRequest(
        user_id=str(actor_id),
        requested_role_id=str(body.requested_role_id),
    )
    return await submit_use_case.execute(request)


@router.get("/pending", response_model=ListPendingRoleChangeRequestsResponse)
async def list_pending_role_change_requests(
    actor_id: ActorId,
    list_pending_use_case: FromDishka[ListPendingRoleChangeRequestsUseCase],
) -> ListPendingRoleChangeRequestsResponse:
    """Administrator review queue."""
    return await list_pending_use_case.execute(
        ListPendingRoleChangeRequestsRequest(reviewer_id=str(actor_id))
    )


@router.post("/{request_id}/decision", response_model=RoleChangeRequestResponse)
async def decide_role_change_request(
    request_id: UUID,
    body: RoleChangeDecisionBody,
    actor_id: ActorId,
    decide_use_case: FromDishka[DecideRoleChangeRequestUseCase],
) -> RoleChangeRequestResponse:
    request = DecideRoleChangeRequestRequest(
        request_id=str(request_id),
        reviewer_id=str(actor_id),
        decision=body.decision,
    )
    return await decide_use_case.execute(request)
