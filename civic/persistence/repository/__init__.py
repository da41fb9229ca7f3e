"""PostgreSQL repository implementations."""

from civic.persistence.repository.comment import PostgresCommentRepository
from civic.persistence.repository.group import PostgresGroupRepository
from civic.persistence.repository.issue import PostgresIssueRepository
from civic.persistence.repository.join_request import PostgresJoinRequestRepository
from civic.persistence.repository.role import PostgresRoleRepository
from civic.persistence.repository.role_change_request import (
    PostgresRoleChangeRequestRepository,
)
from civic.persistence.repository.transaction import PostgresTransactionManager
from civic.persistence.repository.user import PostgresUserRepository
from civic.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresTransactionManager",
    "PostgresRoleRepository",
    "PostgresUserRepository",
    "PostgresIssueRepository",
    "PostgresGroupRepository",
    "PostgresCommentRepository",
    "PostgresVoteRepository",
    "PostgresJoinRequestRepository",
    "PostgresRoleChangeRequestRepository",
]
