"""Application layer DI providers."""

from dishka import Scope, provide

from civic.application.usecase.comment import AddCommentUseCase, DeleteCommentUseCase
from civic.application.usecase.counter import RecountCountersUseCase
from civic.application.usecase.issue import (
    CreateIssueUseCase,
    ReassignIssueGroupUseCase,
)
from civic.application.usecase.join_request import (
    CancelJoinRequestUseCase,
    DecideJoinRequestUseCase,
    ListPendingJoinRequestsUseCase,
    SubmitJoinRequestUseCase,
)
from civic.application.usecase.role_change import (
    DecideRoleChangeRequestUseCase,
    ListPendingRoleChangeRequestsUseCase,
    SubmitRoleChangeRequestUseCase,
)
from civic.application.usecase.vote import RemoveVoteUseCase, ToggleVoteUseCase
from civic.domain.service import (
    CommentService,
    CounterService,
    JoinRequestService,
    MembershipService,
    RoleChangeService,
    VoteService,
)
from civic.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Vote use cases
    @provide
    def get_toggle_vote_use_case(self, vote_service: VoteService) -> ToggleVoteUseCase:
        return ToggleVoteUseCase(vote_service=vote_service)

    @provide
    def get_remove_vote_use_case(self, vote_service: VoteService) -> RemoveVoteUseCase:
        return RemoveVoteUseCase(vote_service=vote_service)

    # Comment use cases
    @provide
    def get_add_comment_use_case(
        self, comment_service: CommentService
    ) -> AddCommentUseCase:
        return AddCommentUseCase(comment_service=comment_service)

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        return DeleteCommentUseCase(comment_service=comment_service)

    # Issue use cases
    @provide
    def get_create_issue_use_case(
        self, membership_service: MembershipService
    ) -> CreateIssueUseCase:
        return CreateIssueUseCase(membership_service=membership_service)

    @provide
    def get_reassign_issue_group_use_case(
        self, membership_service: MembershipService
    ) -> ReassignIssueGroupUseCase:
        return ReassignIssueGroupUseCase(membership_service=membership_service)

    # Join request use cases
    @provide
    def get_submit_join_request_use_case(
        self, join_request_service: JoinRequestService
    ) -> SubmitJoinRequestUseCase:
        return SubmitJoinRequestUseCase(join_request_service=join_request_service)

    @provide
    def get_decide_join_request_use_case(
        self, join_request_service: JoinRequestService
    ) -> DecideJoinRequestUseCase:
        return DecideJoinRequestUseCase(join_request_service=join_request_service)

    @provide
    def get_cancel_join_request_use_case(
        self, join_request_service: JoinRequestService
    ) -> CancelJoinRequestUseCase:
        return CancelJoinRequestUseCase(join_request_service=join_request_service)

    @provide
    def get_list_pending_join_requests_use_case(
        self, join_request_service: JoinRequestService
    ) -> ListPendingJoinRequestsUseCase:
        return ListPendingJoinRequestsUseCase(join_request_service=join_request_service)

    # Role change use cases
    @provide
    def get_submit_role_change_request_use_case(
        self, role_change_service: RoleChangeService
    ) -> SubmitRoleChangeRequestUseCase:
        return SubmitRoleChangeRequestUseCase(role_change_service=role_change_service)

    @provide
    def get_decide_role_change_request_use_case(
        self, role_change_service: RoleChangeService
    ) -> DecideRoleChangeRequestUseCase:
        return DecideRoleChangeRequestUseCase(role_change_service=role_change_service)

    @provide
    def get_list_pending_role_change_requests_use_case(
        self, role_change_service: RoleChangeService
    ) -> ListPendingRoleChangeRequestsUseCase:
        return ListPendingRoleChangeRequestsUseCase(
            role_change_service=role_change_service
        )

    # Counter maintenance
    @provide
    def get_recount_counters_use_case(
        self, counter_service: CounterService
    ) -> RecountCountersUseCase:
        return RecountCountersUseCase(counter_service=counter_service)
