"""Counter maintenance use cases."""

from .recount_counters import (
    CounterDriftResponse,
    RecountCountersRequest,
    RecountCountersResponse,
    RecountCountersUseCase,
)

__all__ = [
    "CounterDriftResponse",
    "RecountCountersRequest",
    "RecountCountersResponse",
    "RecountCountersUseCase",
]
