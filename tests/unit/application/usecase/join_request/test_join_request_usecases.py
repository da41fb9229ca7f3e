"""Unit tests for the join request use cases."""

import pytest

from civic.application.usecase.join_request import (
    CancelJoinRequestRequest,
    CancelJoinRequestUseCase,
    DecideJoinRequestRequest,
    DecideJoinRequestUseCase,
    ListPendingJoinRequestsRequest,
    ListPendingJoinRequestsUseCase,
    SubmitJoinRequestRequest,
    SubmitJoinRequestUseCase,
)
from civic.domain.error import ForbiddenError
from civic.domain.repository import IssueRepository
from civic.domain.service import JoinRequestService
from civic.domain.value import JoinDecision, JoinRequestStatus
from tests.factories import make_group, make_issue, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestJoinRequestUseCases:
    """Submit, decide, cancel and list flows through the use case layer."""

    @pytest.mark.asyncio
    async def test_submit_then_approve_links_issue(self, unit_env):
        # Arrange
        service = await unit_env.get(JoinRequestService)
        issue_repo = await unit_env.get(IssueRepository)
        submit = SubmitJoinRequestUseCase(join_request_service=service)
        decide = DecideJoinRequestUseCase(join_request_service=service)
        issue_owner = await make_user(unit_env)
        group_owner = await make_user(unit_env)
        issue = await make_issue(unit_env, issue_owner)
        group = await make_group(unit_env, group_owner)

        # Act
        submitted = await submit.execute(
            SubmitJoinRequestRequest(
                issue_id=str(issue.id),
                group_id=str(group.id),
                actor_id=str(group_owner.id),
            )
        )
        decided = await decide.execute(
            DecideJoinRequestRequest(
                request_id=submitted.request_id,
                actor_id=str(issue_owner.id),
                decision=JoinDecision.APPROVED,
            )
        )

        # Assert
        assert submitted.status == JoinRequestStatus.PENDING
        assert submitted.initiated_by_group is True
        assert decided.status == JoinRequestStatus.APPROVED
        assert decided.handled_at is not None
        assert (await issue_repo.find_by_id(issue.id)).group_id == group.id

    @pytest.mark.asyncio
    async def test_submit_by_stranger_is_forbidden(self, unit_env):
        # Arrange
        submit = SubmitJoinRequestUseCase(
            join_request_service=await unit_env.get(JoinRequestService)
        )
        owner = await make_user(unit_env)
        stranger = await make_user(unit_env)
        issue = await make_issue(unit_env, owner)
        group = await make_group(unit_env, owner)

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await submit.execute(
                SubmitJoinRequestRequest(
                    issue_id=str(issue.id),
                    group_id=str(group.id),
                    actor_id=str(stranger.id),
                )
            )

    @pytest.mark.asyncio
    async def test_cancelled_request_leaves_inbox(self, unit_env):
        # Arrange
        service = await unit_env.get(JoinRequestService)
        list_pending = ListPendingJoinRequestsUseCase(join_request_service=service)
        cancel = CancelJoinRequestUseCase(join_request_service=service)
        issue_owner = await make_user(unit_env)
        group_owner = await make_user(unit_env)
        issue = await make_issue(unit_env, issue_owner)
        group = await make_group(unit_env, group_owner)
        request = await service.submit(issue.id, group.id, issue_owner.id)
        inbox_request = ListPendingJoinRequestsRequest(actor_id=str(group_owner.id))
        before = await list_pending.execute(inbox_request)

        # Act
        cancelled = await cancel.execute(
            CancelJoinRequestRequest(request_id=str(request.id), actor_id=str(issue_owner.id))
        )
        after = await list_pending.execute(inbox_request)

        # Assert
        assert [r.request_id for r in before.requests] == [str(request.id)]
        assert cancelled.status == JoinRequestStatus.CANCELLED
        assert after.requests == []
