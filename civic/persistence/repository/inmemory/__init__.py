"""In-memory repository implementations for testing."""

from .base import InMemoryRepository
from .comment import InMemoryCommentRepository
from .group import InMemoryGroupRepository
from .issue import InMemoryIssueRepository
from .join_request import InMemoryJoinRequestRepository
from .role import InMemoryRoleRepository
from .role_change_request import InMemoryRoleChangeRequestRepository
from .transaction import InMemoryTransactionManager
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryRepository",
    "InMemoryTransactionManager",
    "InMemoryRoleRepository",
    "InMemoryUserRepository",
    "InMemoryIssueRepository",
    "InMemoryGroupRepository",
    "InMemoryCommentRepository",
    "InMemoryVoteRepository",
    "InMemoryJoinRequestRepository",
    "InMemoryRoleChangeRequestRepository",
]
