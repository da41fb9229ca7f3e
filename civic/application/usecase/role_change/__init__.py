"""Role change use cases."""

from .decide_role_change_request import (
    DecideRoleChangeRequestRequest,
    DecideRoleChangeRequestUseCase,
)
from .list_pending_role_change_requests import (
    ListPendingRoleChangeRequestsRequest,
    ListPendingRoleChangeRequestsResponse,
    ListPendingRoleChangeRequestsUseCase,
)
from .response import RoleChangeRequestResponse
from .submit_role_change_request import (
    SubmitRoleChangeRequestRequest,
    SubmitRoleChangeRequestUseCase,
)

__all__ = [
    "RoleChangeRequestResponse",
    "SubmitRoleChangeRequestRequest",
    "SubmitRoleChangeRequestUseCase",
    "DecideRoleChangeRequestRequest",
    "DecideRoleChangeRequestUseCase",
    "ListPendingRoleChangeRequestsRequest",
    "ListPendingRoleChangeRequestsResponse",
    "ListPendingRoleChangeRequestsUseCase",
]
