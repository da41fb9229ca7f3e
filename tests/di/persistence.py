"""Mock persistence providers for testing."""

from dishka import Scope, provide

from civic.domain.repository import (
    CommentRepository,
    GroupRepository,
    IssueRepository,
    JoinRequestRepository,
    RoleChangeRequestRepository,
    RoleRepository,
    TransactionManager,
    UserRepository,
    VoteRepository,
)
from civic.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryGroupRepository,
    InMemoryIssueRepository,
    InMemoryJoinRequestRepository,
    InMemoryRepository,
    InMemoryRoleChangeRequestRepository,
    InMemoryRoleRepository,
    InMemoryTransactionManager,
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from civic.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses REQUEST scope to ensure test isolation - each test gets fresh repositories.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_role_repository(self) -> RoleRepository:
        return InMemoryRoleRepository()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self) -> UserRepository:
        return InMemoryUserRepository()

    @provide(scope=Scope.REQUEST)
    def get_issue_repository(self) -> IssueRepository:
        return InMemoryIssueRepository()

    @provide(scope=Scope.REQUEST)
    def get_group_repository(self) -> GroupRepository:
        return InMemoryGroupRepository()

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self) -> CommentRepository:
        return InMemoryCommentRepository()

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self) -> VoteRepository:
        return InMemoryVoteRepository()

    @provide(scope=Scope.REQUEST)
    def get_join_request_repository(self) -> JoinRequestRepository:
        return InMemoryJoinRequestRepository()

    @provide(scope=Scope.REQUEST)
    def get_role_change_request_repository(self) -> RoleChangeRequestRepository:
        return InMemoryRoleChangeRequestRepository()

    @provide(scope=Scope.REQUEST)
    def get_transaction_manager(
        self,
        role_repository: RoleRepository,
        user_repository: UserRepository,
        issue_repository: IssueRepository,
        group_repository: GroupRepository,
        comment_repository: CommentRepository,
        vote_repository: VoteRepository,
        join_request_repository: JoinRequestRepository,
        role_change_request_repository: RoleChangeRequestRepository,
    ) -> TransactionManager:
        """Provide a transaction manager that rolls back every in-memory repository."""
        repositories = [
            role_repository,
            user_repository,
            issue_repository,
            group_repository,
            comment_repository,
            vote_repository,
            join_request_repository,
            role_change_request_repository,
        ]
        return InMemoryTransactionManager(
            [r for r in repositories if isinstance(r, InMemoryRepository)]
        )
