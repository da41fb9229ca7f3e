"""Domain value objects for the civic backend."""

from civic.domain.value.identifiers import (
    CommentId,
    GroupId,
    IssueId,
    JoinRequestId,
    RoleChangeRequestId,
    RoleId,
    UserId,
    VoteId,
)
from civic.domain.value.types import (
    CommentContent,
    CounterDrift,
    JoinDecision,
    JoinRequestStatus,
    RoleChangeDecision,
    RoleChangeStatus,
    SubjectType,
    ToggleResult,
)

__all__ = [
    # Identifiers
    "UserId",
    "RoleId",
    "IssueId",
    "GroupId",
    "CommentId",
    "VoteId",
    "JoinRequestId",
    "RoleChangeRequestId",
    # Types
    "SubjectType",
    "JoinRequestStatus",
    "JoinDecision",
    "RoleChangeStatus",
    "RoleChangeDecision",
    "CommentContent",
    "ToggleResult",
    "CounterDrift",
]
