"""Recount subject counters use case."""

from uuid import UUID

from pydantic import BaseModel

from civic.application.usecase.base import BaseUseCase
from civic.domain.service import CounterService
from civic.domain.value import SubjectType, UserId


class RecountCountersRequest(BaseModel):
    """Recount counters request."""

    subject_type: SubjectType
    subject_id: str
    actor_id: str


class CounterDriftResponse(BaseModel):
    """One corrected counter."""

    counter: str
    stored: int
    actual: int


class RecountCountersResponse(BaseModel):
    """Recount counters response."""

    corrected: list[CounterDriftResponse]


class RecountCountersUseCase(
    BaseUseCase[RecountCountersRequest, RecountCountersResponse]
):
    """Use case for rebuilding a subject's cached counters from source rows."""

    def __init__(self, counter_service: CounterService) -> None:
        self.counter_service = counter_service

    async def execute(self, request: RecountCountersRequest) -> RecountCountersResponse:
        drifts = await self.counter_service.recount(
            request.subject_type,
            UUID(request.subject_id),
            UserId(UUID(request.actor_id)),
        )
        return RecountCountersResponse(
            corrected=[
                CounterDriftResponse(counter=d.counter, stored=d.stored, actual=d.actual)
                for d in drifts
            ]
        )
