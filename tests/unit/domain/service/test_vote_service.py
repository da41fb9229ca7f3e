"""Unit tests for VoteService."""

import asyncio
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from civic.domain.error import ConflictError, NotFoundError
from civic.domain.repository import (
    GroupRepository,
    IssueRepository,
    TransactionManager,
    UserRepository,
    VoteRepository,
)
from civic.domain.repository.constraint import ConstraintViolation
from civic.domain.service import SubjectService, UserService, VoteService
from civic.domain.value import SubjectType
from civic.persistence.repository.inmemory import InMemoryVoteRepository
from tests.factories import make_group, make_issue, make_role, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class StaleReadVoteRepository(InMemoryVoteRepository):
    """Never sees an existing vote, as when a concurrent insert lands first."""

    async def find_by_subject_and_voter(self, subject_type, subject_id, voter_id):
        return None


class MissingVoterVoteRepository(InMemoryVoteRepository):
    """Rejects every insert with a foreign-key violation."""

    async def save(self, vote):
        raise IntegrityError(
            "INSERT INTO votes", None, ConstraintViolation("votes_voter_id_fkey")
        )


async def vote_service_with(unit_env, vote_repository) -> VoteService:
    return VoteService(
        vote_repository=vote_repository,
        subject_service=await unit_env.get(SubjectService),
        user_service=await unit_env.get(UserService),
        transaction_manager=await unit_env.get(TransactionManager),
    )


class TestToggleVote:
    """Tests for toggle_vote method."""

    @pytest.mark.asyncio
    async def test_first_toggle_casts_vote_with_role_weight(self, unit_env):
        """Casting stores the voter's role weight and adds it to the total."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        issue_repo = await unit_env.get(IssueRepository)
        owner = await make_user(unit_env)
        voter = await make_user(unit_env, upvote_weight=3)
        issue = await make_issue(unit_env, owner)

        # Act
        result = await vote_service.toggle_vote(SubjectType.ISSUE, issue.id, voter.id)

        # Assert
        assert result.voted is True
        assert result.count == 3
        vote = await vote_repo.find_by_subject_and_voter(SubjectType.ISSUE, issue.id, voter.id)
        assert vote is not None
        assert vote.weight == 3
        assert (await issue_repo.find_by_id(issue.id)).upvote_count == 3

    @pytest.mark.asyncio
    async def test_second_toggle_withdraws_vote(self, unit_env):
        """Toggling twice restores the ledger and the total."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        owner = await make_user(unit_env)
        voter = await make_user(unit_env, upvote_weight=2)
        issue = await make_issue(unit_env, owner)

        # Act
        await vote_service.toggle_vote(SubjectType.ISSUE, issue.id, voter.id)
        result = await vote_service.toggle_vote(SubjectType.ISSUE, issue.id, voter.id)

        # Assert
        assert result.voted is False
        assert result.count == 0
        assert await vote_repo.find_by_subject(SubjectType.ISSUE, issue.id) == []

    @pytest.mark.asyncio
    async def test_withdraw_subtracts_stored_weight_after_role_change(self, unit_env):
        """A role change between cast and withdraw must not skew the total."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        user_repo = await unit_env.get(UserRepository)
        owner = await make_user(unit_env)
        voter = await make_user(unit_env, upvote_weight=5)
        other = await make_user(unit_env, upvote_weight=1)
        issue = await make_issue(unit_env, owner)
        light_role = await make_role(unit_env, upvote_weight=1)

        await vote_service.toggle_vote(SubjectType.ISSUE, issue.id, voter.id)
        await vote_service.toggle_vote(SubjectType.ISSUE, issue.id, other.id)
        await user_repo.update_role(voter.id, light_role.id)

        # Act
        result = await vote_service.toggle_vote(SubjectType.ISSUE, issue.id, voter.id)

        # Assert
        assert result.voted is False
        assert result.count == 1

    @pytest.mark.asyncio
    async def test_votes_on_groups_move_group_total(self, unit_env):
        # Arrange
        vote_service = await unit_env.get(VoteService)
        group_repo = await unit_env.get(GroupRepository)
        owner = await make_user(unit_env)
        voter = await make_user(unit_env, upvote_weight=4)
        group = await make_group(unit_env, owner)

        # Act
        result = await vote_service.toggle_vote(SubjectType.GROUP, group.id, voter.id)

        # Assert
        assert result.count == 4
        assert (await group_repo.find_by_id(group.id)).upvote_count == 4

    @pytest.mark.asyncio
    async def test_concurrent_voters_are_all_counted(self, unit_env):
        """Toggles from distinct voters commute."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        issue_repo = await unit_env.get(IssueRepository)
        owner = await make_user(unit_env)
        issue = await make_issue(unit_env, owner)
        voters = [await make_user(unit_env, upvote_weight=w) for w in (1, 2, 3, 4)]

        # Act
        await asyncio.gather(
            *(vote_service.toggle_vote(SubjectType.ISSUE, issue.id, v.id) for v in voters)
        )

        # Assert
        assert (await issue_repo.find_by_id(issue.id)).upvote_count == 10

    @pytest.mark.asyncio
    async def test_concurrent_toggles_by_one_voter_serialize(self, unit_env):
        """Racing toggles from the same voter alternate cast and withdraw."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        issue_repo = await unit_env.get(IssueRepository)
        owner = await make_user(unit_env)
        voter = await make_user(unit_env, upvote_weight=3)
        issue = await make_issue(unit_env, owner)

        # Act
        results = await asyncio.gather(
            *(
                vote_service.toggle_vote(SubjectType.ISSUE, issue.id, voter.id)
                for _ in range(3)
            )
        )

        # Assert
        assert sorted(r.voted for r in results) == [False, True, True]
        assert sorted(r.count for r in results) == [0, 3, 3]
        assert len(await vote_repo.find_by_subject(SubjectType.ISSUE, issue.id)) == 1
        assert (await issue_repo.find_by_id(issue.id)).upvote_count == 3

    @pytest.mark.asyncio
    async def test_duplicate_insert_reaching_store_is_conflict(self, unit_env):
        # Arrange
        vote_service = await vote_service_with(unit_env, StaleReadVoteRepository())
        issue_repo = await unit_env.get(IssueRepository)
        owner = await make_user(unit_env)
        voter = await make_user(unit_env, upvote_weight=2)
        issue = await make_issue(unit_env, owner)
        await vote_service.toggle_vote(SubjectType.ISSUE, issue.id, voter.id)

        # Act & Assert
        with pytest.raises(ConflictError, match="Vote already recorded"):
            await vote_service.toggle_vote(SubjectType.ISSUE, issue.id, voter.id)

        assert (await issue_repo.find_by_id(issue.id)).upvote_count == 2

    @pytest.mark.asyncio
    async def test_other_integrity_errors_are_not_reported_as_duplicates(self, unit_env):
        # Arrange
        vote_service = await vote_service_with(unit_env, MissingVoterVoteRepository())
        issue_repo = await unit_env.get(IssueRepository)
        owner = await make_user(unit_env)
        voter = await make_user(unit_env)
        issue = await make_issue(unit_env, owner)

        # Act & Assert
        with pytest.raises(IntegrityError):
            await vote_service.toggle_vote(SubjectType.ISSUE, issue.id, voter.id)

        assert (await issue_repo.find_by_id(issue.id)).upvote_count == 0

    @pytest.mark.asyncio
    async def test_unknown_voter_falls_back_to_default_weight(self, unit_env):
        # Arrange
        vote_service = await unit_env.get(VoteService)
        owner = await make_user(unit_env)
        issue = await make_issue(unit_env, owner)

        # Act
        result = await vote_service.toggle_vote(SubjectType.ISSUE, issue.id, uuid4())

        # Assert
        assert result.voted is True
        assert result.count == 1

    @pytest.mark.asyncio
    async def test_missing_subject_raises_not_found(self, unit_env):
        # Arrange
        vote_service = await unit_env.get(VoteService)
        voter = await make_user(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Issue not found"):
            await vote_service.toggle_vote(SubjectType.ISSUE, uuid4(), voter.id)

    @pytest.mark.asyncio
    async def test_withdraw_clamps_drifted_total_at_zero(self, unit_env):
        """A total that drifted below the ledger never goes negative."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        issue_repo = await unit_env.get(IssueRepository)
        owner = await make_user(unit_env)
        voter = await make_user(unit_env, upvote_weight=3)
        issue = await make_issue(unit_env, owner)
        await vote_service.toggle_vote(SubjectType.ISSUE, issue.id, voter.id)
        await issue_repo.set_counters(issue.id, upvote_count=1, comment_count=0)

        # Act
        result = await vote_service.toggle_vote(SubjectType.ISSUE, issue.id, voter.id)

        # Assert
        assert result.count == 0
        assert (await issue_repo.find_by_id(issue.id)).upvote_count == 0


class TestRemoveVote:
    """Tests for remove_vote method."""

    @pytest.mark.asyncio
    async def test_remove_existing_vote(self, unit_env):
        # Arrange
        vote_service = await unit_env.get(VoteService)
        owner = await make_user(unit_env)
        voter = await make_user(unit_env, upvote_weight=2)
        issue = await make_issue(unit_env, owner)
        await vote_service.toggle_vote(SubjectType.ISSUE, issue.id, voter.id)

        # Act
        result = await vote_service.remove_vote(SubjectType.ISSUE, issue.id, voter.id)

        # Assert
        assert result.voted is False
        assert result.count == 0

    @pytest.mark.asyncio
    async def test_remove_without_vote_is_noop(self, unit_env):
        """Removing twice never casts a vote."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        owner = await make_user(unit_env)
        voter = await make_user(unit_env)
        issue = await make_issue(unit_env, owner, upvote_count=0)

        # Act
        first = await vote_service.remove_vote(SubjectType.ISSUE, issue.id, voter.id)
        second = await vote_service.remove_vote(SubjectType.ISSUE, issue.id, voter.id)

        # Assert
        assert first.voted is False and first.count == 0
        assert second.voted is False and second.count == 0
