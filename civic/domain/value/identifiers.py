"""Strongly typed identifiers for civic domain entities.

Using NewType keeps issue, group and request ids from being mixed up
at call sites that take several UUIDs.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
RoleId = NewType("RoleId", UUID)
IssueId = NewType("IssueId", UUID)
GroupId = NewType("GroupId", UUID)
CommentId = NewType("CommentId", UUID)
VoteId = NewType("VoteId", UUID)
JoinRequestId = NewType("JoinRequestId", UUID)
RoleChangeRequestId = NewType("RoleChangeRequestId", UUID)
