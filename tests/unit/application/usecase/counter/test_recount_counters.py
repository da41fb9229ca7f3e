"""Unit tests for RecountCountersUseCase."""

import pytest

from civic.application.usecase.counter import (
    RecountCountersRequest,
    RecountCountersUseCase,
)
from civic.domain.repository import IssueRepository
from civic.domain.service import CounterService
from civic.domain.value import SubjectType
from tests.factories import make_issue, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRecountCountersUseCase:
    """Tests for RecountCountersUseCase."""

    @pytest.mark.asyncio
    async def test_reports_corrected_counters(self, unit_env):
        # Arrange
        use_case = RecountCountersUseCase(counter_service=await unit_env.get(CounterService))
        issue_repo = await unit_env.get(IssueRepository)
        owner = await make_user(unit_env)
        admin = await make_user(unit_env, is_admin=True)
        issue = await make_issue(unit_env, owner, upvote_count=9, comment_count=2)

        # Act
        response = await use_case.execute(
            RecountCountersRequest(
                subject_type=SubjectType.ISSUE,
                subject_id=str(issue.id),
                actor_id=str(admin.id),
            )
        )

        # Assert
        corrected = {c.counter: (c.stored, c.actual) for c in response.corrected}
        assert corrected == {"upvote_count": (9, 0), "comment_count": (2, 0)}
        stored = await issue_repo.find_by_id(issue.id)
        assert (stored.upvote_count, stored.comment_count) == (0, 0)

    @pytest.mark.asyncio
    async def test_second_recount_is_clean(self, unit_env):
        # Arrange
        use_case = RecountCountersUseCase(counter_service=await unit_env.get(CounterService))
        owner = await make_user(unit_env)
        admin = await make_user(unit_env, is_admin=True)
        issue = await make_issue(unit_env, owner, upvote_count=3)
        request = RecountCountersRequest(
            subject_type=SubjectType.ISSUE,
            subject_id=str(issue.id),
            actor_id=str(admin.id),
        )
        await use_case.execute(request)

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.corrected == []
