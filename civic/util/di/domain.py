"""Domain layer DI providers."""

from dishka import Scope, provide

from civic.config import VotingSettings
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
from civic.domain.service import (
    CommentService,
    CounterService,
    JoinRequestService,
    MembershipService,
    RoleChangeService,
    SubjectService,
    UserService,
    VoteService,
)
from civic.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances sharing one transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_subject_service(
        self, issue_repository: IssueRepository, group_repository: GroupRepository
    ) -> SubjectService:
        """Provide subject counter domain service."""
        return SubjectService(
            issue_repository=issue_repository, group_repository=group_repository
        )

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        role_repository: RoleRepository,
        voting_settings: VotingSettings,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            role_repository=role_repository,
            default_vote_weight=voting_settings.default_weight,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        subject_service: SubjectService,
        user_service: UserService,
        transaction_manager: TransactionManager,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            subject_service=subject_service,
            user_service=user_service,
            transaction_manager=transaction_manager,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        subject_service: SubjectService,
        user_service: UserService,
        transaction_manager: TransactionManager,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            subject_service=subject_service,
            user_service=user_service,
            transaction_manager=transaction_manager,
        )

    @provide
    def get_membership_service(
        self,
        issue_repository: IssueRepository,
        group_repository: GroupRepository,
        user_service: UserService,
        transaction_manager: TransactionManager,
    ) -> MembershipService:
        """Provide issue membership domain service."""
        return MembershipService(
            issue_repository=issue_repository,
            group_repository=group_repository,
            user_service=user_service,
            transaction_manager=transaction_manager,
        )

    @provide
    def get_join_request_service(
        self,
        join_request_repository: JoinRequestRepository,
        issue_repository: IssueRepository,
        group_repository: GroupRepository,
        membership_service: MembershipService,
        transaction_manager: TransactionManager,
    ) -> JoinRequestService:
        """Provide join request domain service."""
        return JoinRequestService(
            join_request_repository=join_request_repository,
            issue_repository=issue_repository,
            group_repository=group_repository,
            membership_service=membership_service,
            transaction_manager=transaction_manager,
        )

    @provide
    def get_role_change_service(
        self,
        role_change_request_repository: RoleChangeRequestRepository,
        user_repository: UserRepository,
        role_repository: RoleRepository,
        transaction_manager: TransactionManager,
    ) -> RoleChangeService:
        """Provide role change domain service."""
        return RoleChangeService(
            role_change_request_repository=role_change_request_repository,
            user_repository=user_repository,
            role_repository=role_repository,
            transaction_manager=transaction_manager,
        )

    @provide
    def get_counter_service(
        self,
        subject_service: SubjectService,
        issue_repository: IssueRepository,
        group_repository: GroupRepository,
        vote_repository: VoteRepository,
        comment_repository: CommentRepository,
        user_service: UserService,
        transaction_manager: TransactionManager,
    ) -> CounterService:
        """Provide counter recount domain service."""
        return CounterService(
            subject_service=subject_service,
            user_service=user_service,
            issue_repository=issue_repository,
            group_repository=group_repository,
            vote_repository=vote_repository,
            comment_repository=comment_repository,
            transaction_manager=transaction_manager,
        )
