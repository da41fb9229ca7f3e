"""Join request use cases."""

from .cancel_join_request import CancelJoinRequestRequest, CancelJoinRequestUseCase
from .decide_join_request import DecideJoinRequestRequest, DecideJoinRequestUseCase
from .list_pending_join_requests import (
    ListPendingJoinRequestsRequest,
    ListPendingJoinRequestsResponse,
    ListPendingJoinRequestsUseCase,
)
from .response import JoinRequestResponse
from .submit_join_request import SubmitJoinRequestRequest, SubmitJoinRequestUseCase

__all__ = [
    "JoinRequestResponse",
    "SubmitJoinRequestRequest",
    "SubmitJoinRequestUseCase",
    "DecideJoinRequestRequest",
    "DecideJoinRequestUseCase",
    "CancelJoinRequestRequest",
    "CancelJoinRequestUseCase",
    "ListPendingJoinRequestsRequest",
    "ListPendingJoinRequestsResponse",
    "ListPendingJoinRequestsUseCase",
]
