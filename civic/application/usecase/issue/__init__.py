"""Issue use cases."""

from .create_issue import CreateIssueRequest, CreateIssueResponse, CreateIssueUseCase
from .reassign_issue_group import ReassignIssueGroupRequest, ReassignIssueGroupUseCase

__all__ = [
    "CreateIssueRequest",
    "CreateIssueResponse",
    "CreateIssueUseCase",
    "ReassignIssueGroupRequest",
    "ReassignIssueGroupUseCase",
]
