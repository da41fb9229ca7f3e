"""Unit tests for MembershipService."""

from uuid import uuid4

import pytest

from civic.domain.error import ForbiddenError, NotFoundError, ValidationError
from civic.domain.repository import GroupRepository, IssueRepository
from civic.domain.service import MembershipService
from civic.domain.value import GroupId, IssueId, UserId
from tests.factories import make_group, make_issue, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateIssue:
    """Tests for create_issue method."""

    @pytest.mark.asyncio
    async def test_create_issue_without_group(self, unit_env):
        # Arrange
        membership_service = await unit_env.get(MembershipService)
        owner = await make_user(unit_env)

        # Act
        issue = await membership_service.create_issue(
            owner.id, "Pothole", "Deep pothole on Main Street"
        )

        # Assert
        assert issue.group_id is None
        assert issue.upvote_count == 0
        assert issue.comment_count == 0

    @pytest.mark.asyncio
    async def test_create_issue_in_group_increments_issue_count(self, unit_env):
        # Arrange
        membership_service = await unit_env.get(MembershipService)
        group_repo = await unit_env.get(GroupRepository)
        owner = await make_user(unit_env)
        group = await make_group(unit_env, owner)

        # Act
        issue = await membership_service.create_issue(
            owner.id, "Pothole", "Deep pothole on Main Street", group_id=group.id
        )

        # Assert
        assert issue.group_id == group.id
        assert (await group_repo.find_by_id(group.id)).issue_count == 1

    @pytest.mark.asyncio
    async def test_blank_title_is_rejected(self, unit_env):
        # Arrange
        membership_service = await unit_env.get(MembershipService)
        owner = await make_user(unit_env)

        # Act & Assert
        with pytest.raises(ValidationError):
            await membership_service.create_issue(owner.id, "  ", "Description")

    @pytest.mark.asyncio
    async def test_unknown_group_is_rejected(self, unit_env):
        # Arrange
        membership_service = await unit_env.get(MembershipService)
        issue_repo = await unit_env.get(IssueRepository)
        owner = await make_user(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Group not found"):
            await membership_service.create_issue(
                owner.id, "Pothole", "Description", group_id=GroupId(uuid4())
            )

        assert await issue_repo.find_by_owner(owner.id) == []

    @pytest.mark.asyncio
    async def test_unknown_owner_is_rejected(self, unit_env):
        # Arrange
        membership_service = await unit_env.get(MembershipService)
        issue_repo = await unit_env.get(IssueRepository)
        ghost = UserId(uuid4())

        # Act & Assert
        with pytest.raises(NotFoundError, match="User not found"):
            await membership_service.create_issue(ghost, "Pothole", "Description")

        assert await issue_repo.find_by_owner(ghost) == []


class TestReassignIssueGroup:
    """Tests for reassign_issue_group method."""

    @pytest.mark.asyncio
    async def test_move_between_groups_updates_both_counts(self, unit_env):
        # Arrange
        membership_service = await unit_env.get(MembershipService)
        group_repo = await unit_env.get(GroupRepository)
        issue_repo = await unit_env.get(IssueRepository)
        owner = await make_user(unit_env)
        old_group = await make_group(unit_env, owner, issue_count=1)
        new_group = await make_group(unit_env, owner)
        issue = await make_issue(unit_env, owner, group=old_group)

        # Act
        await membership_service.reassign_issue_group(issue.id, new_group.id, owner.id)

        # Assert
        assert (await issue_repo.find_by_id(issue.id)).group_id == new_group.id
        assert (await group_repo.find_by_id(old_group.id)).issue_count == 0
        assert (await group_repo.find_by_id(new_group.id)).issue_count == 1

    @pytest.mark.asyncio
    async def test_reassign_to_same_group_is_noop(self, unit_env):
        # Arrange
        membership_service = await unit_env.get(MembershipService)
        group_repo = await unit_env.get(GroupRepository)
        owner = await make_user(unit_env)
        group = await make_group(unit_env, owner, issue_count=1)
        issue = await make_issue(unit_env, owner, group=group)

        # Act
        await membership_service.reassign_issue_group(issue.id, group.id, owner.id)

        # Assert
        assert (await group_repo.find_by_id(group.id)).issue_count == 1

    @pytest.mark.asyncio
    async def test_remove_from_group(self, unit_env):
        # Arrange
        membership_service = await unit_env.get(MembershipService)
        group_repo = await unit_env.get(GroupRepository)
        issue_repo = await unit_env.get(IssueRepository)
        owner = await make_user(unit_env)
        group = await make_group(unit_env, owner, issue_count=1)
        issue = await make_issue(unit_env, owner, group=group)

        # Act
        await membership_service.reassign_issue_group(issue.id, None, owner.id)

        # Assert
        assert (await issue_repo.find_by_id(issue.id)).group_id is None
        assert (await group_repo.find_by_id(group.id)).issue_count == 0

    @pytest.mark.asyncio
    async def test_old_group_count_is_floored_at_zero(self, unit_env):
        # Arrange
        membership_service = await unit_env.get(MembershipService)
        group_repo = await unit_env.get(GroupRepository)
        owner = await make_user(unit_env)
        drifted = await make_group(unit_env, owner, issue_count=0)
        issue = await make_issue(unit_env, owner, group=drifted)

        # Act
        await membership_service.reassign_issue_group(issue.id, None, owner.id)

        # Assert
        assert (await group_repo.find_by_id(drifted.id)).issue_count == 0

    @pytest.mark.asyncio
    async def test_unknown_target_group_leaves_state_untouched(self, unit_env):
        # Arrange
        membership_service = await unit_env.get(MembershipService)
        group_repo = await unit_env.get(GroupRepository)
        issue_repo = await unit_env.get(IssueRepository)
        owner = await make_user(unit_env)
        group = await make_group(unit_env, owner, issue_count=1)
        issue = await make_issue(unit_env, owner, group=group)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await membership_service.reassign_issue_group(
                issue.id, GroupId(uuid4()), owner.id
            )

        assert (await issue_repo.find_by_id(issue.id)).group_id == group.id
        assert (await group_repo.find_by_id(group.id)).issue_count == 1

    @pytest.mark.asyncio
    async def test_unknown_issue_raises_not_found(self, unit_env):
        # Arrange
        membership_service = await unit_env.get(MembershipService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Issue not found"):
            await membership_service.reassign_issue_group(
                IssueId(uuid4()), None, UserId(uuid4())
            )

    @pytest.mark.asyncio
    async def test_only_issue_owner_may_reassign(self, unit_env):
        # Arrange
        membership_service = await unit_env.get(MembershipService)
        group_repo = await unit_env.get(GroupRepository)
        issue_repo = await unit_env.get(IssueRepository)
        owner = await make_user(unit_env)
        stranger = await make_user(unit_env)
        group = await make_group(unit_env, owner, issue_count=1)
        issue = await make_issue(unit_env, owner, group=group)

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await membership_service.reassign_issue_group(issue.id, None, stranger.id)

        assert (await issue_repo.find_by_id(issue.id)).group_id == group.id
        assert (await group_repo.find_by_id(group.id)).issue_count == 1

    @pytest.mark.asyncio
    async def test_moving_into_someone_elses_group_is_forbidden(self, unit_env):
        # Arrange
        membership_service = await unit_env.get(MembershipService)
        group_repo = await unit_env.get(GroupRepository)
        issue_repo = await unit_env.get(IssueRepository)
        issue_owner = await make_user(unit_env)
        group_owner = await make_user(unit_env)
        group = await make_group(unit_env, group_owner)
        issue = await make_issue(unit_env, issue_owner)

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await membership_service.reassign_issue_group(
                issue.id, group.id, issue_owner.id
            )

        assert (await issue_repo.find_by_id(issue.id)).group_id is None
        assert (await group_repo.find_by_id(group.id)).issue_count == 0

    @pytest.mark.asyncio
    async def test_group_owner_cannot_pull_in_foreign_issue(self, unit_env):
        # Arrange
        membership_service = await unit_env.get(MembershipService)
        issue_owner = await make_user(unit_env)
        group_owner = await make_user(unit_env)
        group = await make_group(unit_env, group_owner)
        issue = await make_issue(unit_env, issue_owner)

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await membership_service.reassign_issue_group(
                issue.id, group.id, group_owner.id
            )

    @pytest.mark.asyncio
    async def test_owner_may_leave_someone_elses_group(self, unit_env):
        # Arrange
        membership_service = await unit_env.get(MembershipService)
        group_repo = await unit_env.get(GroupRepository)
        issue_owner = await make_user(unit_env)
        group_owner = await make_user(unit_env)
        group = await make_group(unit_env, group_owner, issue_count=1)
        issue = await make_issue(unit_env, issue_owner, group=group)

        # Act
        await membership_service.reassign_issue_group(issue.id, None, issue_owner.id)

        # Assert
        assert (await group_repo.find_by_id(group.id)).issue_count == 0
