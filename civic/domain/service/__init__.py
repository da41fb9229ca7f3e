"""Domain services."""

from . import policy
from .base import Service
from .comment_service import CommentService
from .counter_service import CounterService
from .join_request_service import JoinRequestService
from .membership_service import MembershipService
from .role_change_service import RoleChangeService
from .subject_service import SubjectService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "CommentService",
    "CounterService",
    "JoinRequestService",
    "MembershipService",
    "RoleChangeService",
    "Service",
    "SubjectService",
    "UserService",
    "VoteService",
    "policy",
]
