"""Domain model entities for the civic backend."""

from civic.domain.model.comment import Comment
from civic.domain.model.group import Group
from civic.domain.model.issue import Issue
from civic.domain.model.join_request import GroupJoinRequest
from civic.domain.model.role import Role
from civic.domain.model.role_change_request import RoleChangeRequest
from civic.domain.model.subject import Subject
from civic.domain.model.user import User
from civic.domain.model.vote import Vote

__all__ = [
    "Role",
    "User",
    "Issue",
    "Group",
    "Subject",
    "Comment",
    "Vote",
    "GroupJoinRequest",
    "RoleChangeRequest",
]
