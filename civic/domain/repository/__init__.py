"""Repository interfaces for the civic domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from civic.domain.repository import constraint
from civic.domain.repository.comment import CommentRepository
from civic.domain.repository.group import GroupRepository
from civic.domain.repository.issue import IssueRepository
from civic.domain.repository.join_request import JoinRequestRepository
from civic.domain.repository.role import RoleRepository
from civic.domain.repository.role_change_request import RoleChangeRequestRepository
from civic.domain.repository.subject import SubjectRepository
from civic.domain.repository.transaction import TransactionManager
from civic.domain.repository.user import UserRepository
from civic.domain.repository.vote import VoteRepository

__all__ = [
    "constraint",
    "TransactionManager",
    "SubjectRepository",
    "UserRepository",
    "RoleRepository",
    "IssueRepository",
    "GroupRepository",
    "CommentRepository",
    "VoteRepository",
    "JoinRequestRepository",
    "RoleChangeRequestRepository",
]
