"""Unit tests for issue route handlers."""

import pytest

from civic.application.usecase.issue import CreateIssueUseCase, ReassignIssueGroupUseCase
from civic.domain.error import ForbiddenError
from civic.domain.repository import GroupRepository, IssueRepository
from civic.domain.service import MembershipService
from civic.interface.api.routes.issues import (
    CreateIssueBody,
    IssueGroupBody,
    create_issue,
    reassign_issue_group,
)
from tests.factories import make_group, make_issue, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestIssueRoutes:
    """Route handlers called directly with use cases from the test container."""

    @pytest.mark.asyncio
    async def test_create_issue_returns_zeroed_counters(self, unit_env):
        # Arrange
        use_case = CreateIssueUseCase(
            membership_service=await unit_env.get(MembershipService)
        )
        actor = await make_user(unit_env)

        # Act
        response = await create_issue(
            body=CreateIssueBody(
                title="Flooded underpass", description="Drain is blocked."
            ),
            actor_id=actor.id,
            create_issue_use_case=use_case,
        )

        # Assert
        assert response.owner_id == str(actor.id)
        assert response.group_id is None
        assert response.upvote_count == 0
        assert response.comment_count == 0

    @pytest.mark.asyncio
    async def test_owner_moves_issue_into_own_group(self, unit_env):
        # Arrange
        use_case = ReassignIssueGroupUseCase(
            membership_service=await unit_env.get(MembershipService)
        )
        issue_repo = await unit_env.get(IssueRepository)
        group_repo = await unit_env.get(GroupRepository)
        owner = await make_user(unit_env)
        group = await make_group(unit_env, owner)
        issue = await make_issue(unit_env, owner)

        # Act
        await reassign_issue_group(
            issue_id=issue.id,
            body=IssueGroupBody(group_id=group.id),
            actor_id=owner.id,
            reassign_use_case=use_case,
        )

        # Assert
        assert (await issue_repo.find_by_id(issue.id)).group_id == group.id
        assert (await group_repo.find_by_id(group.id)).issue_count == 1

    @pytest.mark.asyncio
    async def test_stranger_cannot_move_issue(self, unit_env):
        # Arrange
        use_case = ReassignIssueGroupUseCase(
            membership_service=await unit_env.get(MembershipService)
        )
        owner = await make_user(unit_env)
        stranger = await make_user(unit_env)
        group = await make_group(unit_env, stranger)
        issue = await make_issue(unit_env, owner)

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await reassign_issue_group(
                issue_id=issue.id,
                body=IssueGroupBody(group_id=group.id),
                actor_id=stranger.id,
                reassign_use_case=use_case,
            )
