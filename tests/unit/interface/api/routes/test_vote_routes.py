"""Unit tests for vote route handlers."""

import pytest

from civic.application.usecase.vote import RemoveVoteUseCase, ToggleVoteUseCase
from civic.domain.service import VoteService
from civic.interface.api.routes.votes import remove_group_vote, toggle_issue_vote
from tests.factories import make_group, make_issue, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestVoteRoutes:
    """Route handlers called directly with use cases from the test container."""

    @pytest.mark.asyncio
    async def test_toggle_issue_vote_uses_actor_weight(self, unit_env):
        # Arrange
        use_case = ToggleVoteUseCase(vote_service=await unit_env.get(VoteService))
        owner = await make_user(unit_env)
        actor = await make_user(unit_env, upvote_weight=2)
        issue = await make_issue(unit_env, owner)

        # Act
        response = await toggle_issue_vote(
            issue_id=issue.id,
            actor_id=actor.id,
            toggle_vote_use_case=use_case,
        )

        # Assert
        assert response.voted is True
        assert response.count == 2

    @pytest.mark.asyncio
    async def test_remove_group_vote_without_vote_is_noop(self, unit_env):
        # Arrange
        use_case = RemoveVoteUseCase(vote_service=await unit_env.get(VoteService))
        owner = await make_user(unit_env)
        group = await make_group(unit_env, owner, upvote_count=6)

        # Act
        response = await remove_group_vote(
            group_id=group.id,
            actor_id=owner.id,
            remove_vote_use_case=use_case,
        )

        # Assert
        assert response.voted is False
        assert response.count == 6
