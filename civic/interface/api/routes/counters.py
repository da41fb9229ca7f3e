"""Counter maintenance routes."""

from typing import Literal
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from civic.application.usecase.counter import (
    RecountCountersRequest,
    RecountCountersResponse,
    RecountCountersUseCase,
)
from civic.domain.value import SubjectType

from .actor import ActorId

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)

SUBJECT_COLLECTIONS = {"issues": SubjectType.ISSUE, "groups": SubjectType.GROUP}


@router.post(
    "/{collection}/{subject_id}/recount", response_model=RecountCountersResponse
)
async def recount_counters(
    collection: Literal["issues", "groups"],
    subject_id: UUID,
    actor_id: ActorId,
    recount_use_case: FromDishka[RecountCountersUseCase],
) -> RecountCountersResponse:
    """Rebuild a subject's cached counters from its vote, comment and issue rows.

    Administrators only.
    """
    request = RecountCountersRequest(
        subject_type=SUBJECT_COLLECTIONS[collection],
        subject_id=str(subject_id),
        actor_id=str(actor_id),
    )
    return await recount_use_case.execute(request)
