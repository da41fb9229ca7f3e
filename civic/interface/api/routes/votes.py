"""Vote routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from civic.application.usecase.vote import (
    RemoveVoteRequest,
    RemoveVoteResponse,
    RemoveVoteUseCase,
    ToggleVoteRequest,
    ToggleVoteResponse,
    ToggleVoteUseCase,
)
from civic.domain.value import SubjectType

from .actor import ActorId

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


@router.post("/issues/{issue_id}/vote", response_model=ToggleVoteResponse)
async def toggle_issue_vote(
    issue_id: UUID,
    actor_id: ActorId,
    toggle_vote_use_case: FromDishka[ToggleVoteUseCase],
) -> ToggleVoteResponse:
    """Cast or withdraw the actor's vote on an issue.

    Returns:
        Whether the actor now has a vote, and the issue's weighted total
    """
    request = ToggleVoteRequest(
        subject_type=SubjectType.ISSUE,
        subject_id=str(issue_id),
        voter_id=str(actor_id),
    )
    return await toggle_vote_use_case.execute(request)


@router.post("/groups/{group_id}/vote", response_model=ToggleVoteResponse)
async def toggle_group_vote(
    group_id: UUID,
    actor_id: ActorId,
    toggle_vote_use_case: FromDishka[ToggleVoteUseCase],
) -> ToggleVoteResponse:
    """Cast or withdraw the actor's vote on a group."""
    request = ToggleVoteRequest(
        subject_type=SubjectType.GROUP,
        subject_id=str(group_id),
        voter_id=str(actor_id),
    )
    return await toggle_vote_use_case.execute(request)


@router.delete("/issues/{issue_id}/vote", response_model=RemoveVoteResponse)
async def remove_issue_vote(
    issue_id: UUID,
    actor_id: ActorId,
    remove_vote_use_case: FromDishka[RemoveVoteUseCase],
) -> RemoveVoteResponse:
    """Withdraw the actor's vote on an issue; a no-op if there is none."""
    request = RemoveVoteRequest(
        subject_type=SubjectType.ISSUE,
        subject_id=str(issue_id),
        voter_id=str(actor_id),
    )
    return await remove_vote_use_case.execute(request)


@router.delete("/groups/{group_id}/vote", response_model=RemoveVoteResponse)
async def remove_group_vote(
    group_id: UUID,
    actor_id: ActorId,
    remove_vote_use_case: FromDishka[RemoveVoteUseCase],
) -> RemoveVoteResponse:
    request = RemoveVoteRequest(
        subject_type=SubjectType.GROUP,
        subject_id=str(group_id),
        voter_id=str(actor_id),
    )
    return await remove_vote_use_case.execute(request)
