"""Group join request routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel

from civic.application.usecase.join_request import (
    CancelJoinRequestRequest,
    CancelJoinRequestUseCase,
    DecideJoinRequestRequest,
    DecideJoinRequestUseCase,
    JoinRequestResponse,
    ListPendingJoinRequestsRequest,
    ListPendingJoinRequestsResponse,
    ListPendingJoinRequestsUseCase,
    SubmitJoinRequestRequest,
    SubmitJoinRequestUseCase,
)
from civic.domain.value import JoinDecision

from .actor import ActorId

router = APIRouter(prefix="/join-requests", tags=["join-requests"], route_class=DishkaRoute)


class SubmitJoinRequestBody(BaseModel):
    """Submit join request body."""

    issue_id: UUID
    group_id: UUID


class JoinDecisionBody(BaseModel):
    """Decision body."""

    decision: JoinDecision


@router.post("", response_model=JoinRequestResponse, status_code=status.HTTP_201_CREATED)
async def submit_join_request(
    body: SubmitJoinRequestBody,
    actor_id: ActorId,
    submit_use_case: FromDishka[SubmitJoinRequestUseCase],
) -> JoinRequestResponse:
    """Propose linking an issue to a group.

    The actor's ownership determines which side initiated the request.
    Owning both sides approves the request immediately.
    """
    request = SubmitJoinRequestRequest(
        issue_id=str(body.issue_id),
        group_id=str(body.group_id),
        actor_id=str(actor_id),
    )
    return await submit_use_case.execute(request)


@router.get("/pending", response_model=ListPendingJoinRequestsResponse)
async def list_pending_join_requests(
    actor_id: ActorId,
    list_pending_use_case: FromDishka[ListPendingJoinRequestsUseCase],
) -> ListPendingJoinRequestsResponse:
    """List requests waiting for the actor's decision."""
    return await list_pending_use_case.execute(
        ListPendingJoinRequestsRequest(actor_id=str(actor_id))
    )


@router.post("/{request_id}/decision", response_model=JoinRequestResponse)
async def decide_join_request(
    request_id: UUID,
    body: JoinDecisionBody,
    actor_id: ActorId,
    decide_use_case: FromDishka[DecideJoinRequestUseCase],
) -> JoinRequestResponse:
    request = DecideJoinRequestRequest(
        request_id=str(request_id),
        actor_id=str(actor_id),
        decision=body.decision,
    )
    return await decide_use_case.execute(request)


@router.post("/{request_id}/cancel", response_model=JoinRequestResponse)
async def cancel_join_request(
    request_id: UUID,
    actor_id: ActorId,
    cancel_use_case: FromDishka[CancelJoinRequestUseCase],
) -> JoinRequestResponse:
    return await cancel_use_case.execute(
        CancelJoinRequestRequest(request_id=str(request_id), actor_id=str(actor_id))
    )
