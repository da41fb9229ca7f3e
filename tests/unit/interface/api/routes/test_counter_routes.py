"""Unit tests for counter maintenance route handlers."""

import pytest

from civic.application.usecase.counter import RecountCountersUseCase
from civic.domain.error import ForbiddenError
from civic.domain.service import CounterService
from civic.interface.api.routes.counters import recount_counters
from tests.factories import make_group, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCounterRoutes:
    @pytest.mark.asyncio
    async def test_admin_recount_reports_drift(self, unit_env):
        # Arrange
        use_case = RecountCountersUseCase(counter_service=await unit_env.get(CounterService))
        admin = await make_user(unit_env, is_admin=True)
        group = await make_group(unit_env, admin, issue_count=2)

        # Act
        response = await recount_counters(
            collection="groups",
            subject_id=group.id,
            actor_id=admin.id,
            recount_use_case=use_case,
        )

        # Assert
        assert [(c.counter, c.stored, c.actual) for c in response.corrected] == [
            ("issue_count", 2, 0)
        ]

    @pytest.mark.asyncio
    async def test_group_owner_without_admin_flag_is_forbidden(self, unit_env):
        # Arrange
        use_case = RecountCountersUseCase(counter_service=await unit_env.get(CounterService))
        owner = await make_user(unit_env)
        group = await make_group(unit_env, owner, issue_count=2)

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await recount_counters(
                collection="groups",
                subject_id=group.id,
                actor_id=owner.id,
                recount_use_case=use_case,
            )
