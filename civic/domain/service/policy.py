"""Authorization policy for issue membership and the review workflows.

Pure functions over ownership data: no persistence, no side effects.
Services load the owners and raise ``ForbiddenError`` when a check fails.
"""

from typing import Optional

from civic.domain.model.user import User
from civic.domain.value import UserId


def initiated_by_group_for(
    actor_id: UserId, issue_owner_id: UserId, group_owner_id: UserId
) -> Optional[bool]:
    """Work out which side a new join request comes from.

    Returns:
        True if the actor proposes as group owner, False if as issue
        owner, None if the actor owns neither side. An actor owning both
        counts as the group side.
    """
    if actor_id == group_owner_id:
        return True
    if actor_id == issue_owner_id:
        return False
    return None


def is_self_link(actor_id: UserId, issue_owner_id: UserId, group_owner_id: UserId) -> bool:
    """Whether one user owns the issue and the group and is the one asking."""
    return actor_id == issue_owner_id == group_owner_id


def can_decide_join_request(
    actor_id: UserId,
    initiated_by_group: bool,
    issue_owner_id: UserId,
    group_owner_id: UserId,
) -> bool:
    """Only the party that did not initiate the request may decide it."""
    decider = issue_owner_id if initiated_by_group else group_owner_id
    return actor_id == decider


def can_cancel_join_request(
    actor_id: UserId, issue_owner_id: UserId, group_owner_id: UserId
) -> bool:
    """Either owner may withdraw a pending request, whoever initiated it."""
    return actor_id in (issue_owner_id, group_owner_id)


def can_reassign_issue(
    actor_id: UserId, issue_owner_id: UserId, target_group_owner_id: Optional[UserId]
) -> bool:
    """Whether the actor may move an issue directly, outside the join workflow.

    Only the issue owner may, and only out of its group
    (``target_group_owner_id=None``) or into a group they own. Linking to
    someone else's group needs that owner's consent through a join request.
    """
    if actor_id != issue_owner_id:
        return False
    return target_group_owner_id is None or target_group_owner_id == actor_id


def is_administrator(user: Optional[User]) -> bool:
    return user is not None and user.is_admin


def can_review_role_change(reviewer: Optional[User]) -> bool:
    return is_administrator(reviewer)


def can_recount_counters(actor: Optional[User]) -> bool:
    return is_administrator(actor)
