"""Unit tests for join request and role change policy functions."""

from uuid import uuid4

from civic.domain.model import User
from civic.domain.service import policy
from civic.domain.value import RoleId, UserId

ISSUE_OWNER = UserId(uuid4())
GROUP_OWNER = UserId(uuid4())
STRANGER = UserId(uuid4())


class TestInitiatedByGroupFor:
    def test_group_owner_proposes_from_group_side(self):
        assert policy.initiated_by_group_for(GROUP_OWNER, ISSUE_OWNER, GROUP_OWNER) is True

    def test_issue_owner_proposes_from_issue_side(self):
        assert policy.initiated_by_group_for(ISSUE_OWNER, ISSUE_OWNER, GROUP_OWNER) is False

    def test_stranger_has_no_side(self):
        assert policy.initiated_by_group_for(STRANGER, ISSUE_OWNER, GROUP_OWNER) is None

    def test_owner_of_both_counts_as_group_side(self):
        assert policy.initiated_by_group_for(ISSUE_OWNER, ISSUE_OWNER, ISSUE_OWNER) is True


class TestIsSelfLink:
    def test_true_when_actor_owns_both(self):
        assert policy.is_self_link(ISSUE_OWNER, ISSUE_OWNER, ISSUE_OWNER)

    def test_false_when_owners_differ(self):
        assert not policy.is_self_link(ISSUE_OWNER, ISSUE_OWNER, GROUP_OWNER)

    def test_false_when_actor_is_not_the_shared_owner(self):
        assert not policy.is_self_link(STRANGER, ISSUE_OWNER, ISSUE_OWNER)


class TestCanDecideJoinRequest:
    """Only the non-initiating party decides."""

    def test_issue_owner_decides_group_initiated_request(self):
        assert policy.can_decide_join_request(ISSUE_OWNER, True, ISSUE_OWNER, GROUP_OWNER)
        assert not policy.can_decide_join_request(GROUP_OWNER, True, ISSUE_OWNER, GROUP_OWNER)

    def test_group_owner_decides_issue_initiated_request(self):
        assert policy.can_decide_join_request(GROUP_OWNER, False, ISSUE_OWNER, GROUP_OWNER)
        assert not policy.can_decide_join_request(ISSUE_OWNER, False, ISSUE_OWNER, GROUP_OWNER)

    def test_stranger_never_decides(self):
        for initiated_by_group in (True, False):
            assert not policy.can_decide_join_request(
                STRANGER, initiated_by_group, ISSUE_OWNER, GROUP_OWNER
            )


class TestCanCancelJoinRequest:
    def test_either_owner_may_cancel(self):
        assert policy.can_cancel_join_request(ISSUE_OWNER, ISSUE_OWNER, GROUP_OWNER)
        assert policy.can_cancel_join_request(GROUP_OWNER, ISSUE_OWNER, GROUP_OWNER)

    def test_stranger_may_not_cancel(self):
        assert not policy.can_cancel_join_request(STRANGER, ISSUE_OWNER, GROUP_OWNER)


class TestCanReviewRoleChange:
    def _user(self, is_admin: bool) -> User:
        return User(id=UserId(uuid4()), username="reviewer", role_id=RoleId(uuid4()), is_admin=is_admin)

    def test_admin_may_review(self):
        assert policy.can_review_role_change(self._user(is_admin=True))

    def test_regular_user_may_not_review(self):
        assert not policy.can_review_role_change(self._user(is_admin=False))

    def test_unknown_reviewer_may_not_review(self):
        assert not policy.can_review_role_change(None)


class TestCanReassignIssue:
    """Direct moves need the issue owner, and a target group they own."""

    def test_owner_may_remove_issue_from_group(self):
        assert policy.can_reassign_issue(ISSUE_OWNER, ISSUE_OWNER, None)

    def test_owner_may_move_into_own_group(self):
        assert policy.can_reassign_issue(ISSUE_OWNER, ISSUE_OWNER, ISSUE_OWNER)

    def test_owner_may_not_move_into_foreign_group(self):
        assert not policy.can_reassign_issue(ISSUE_OWNER, ISSUE_OWNER, GROUP_OWNER)

    def test_group_owner_may_not_move_foreign_issue(self):
        assert not policy.can_reassign_issue(GROUP_OWNER, ISSUE_OWNER, GROUP_OWNER)

    def test_stranger_may_not_remove_issue(self):
        assert not policy.can_reassign_issue(STRANGER, ISSUE_OWNER, None)


class TestCanRecountCounters:
    def test_admin_may_recount(self):
        admin = User(
            id=UserId(uuid4()), username="admin", role_id=RoleId(uuid4()), is_admin=True
        )
        assert policy.can_recount_counters(admin)

    def test_unknown_actor_may_not_recount(self):
        assert not policy.can_recount_counters(None)
