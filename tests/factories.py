"""Builders for domain fixtures persisted in a test container."""

from datetime import datetime, timedelta
from uuid import uuid4

from civic.domain.model import Group, Issue, Role, User
from civic.domain.repository import (
    GroupRepository,
    IssueRepository,
    RoleRepository,
    UserRepository,
)
from civic.domain.value import GroupId, IssueId, RoleId, UserId


async def make_role(env, upvote_weight: int = 1, title: str | None = None) -> Role:
    """Persist a role in the test container."""
    role_repo = await env.get(RoleRepository)
    role = Role(
        id=RoleId(uuid4()),
        title=title or f"role-{upvote_weight}-{uuid4().hex[:6]}",
        upvote_weight=upvote_weight,
    )
    return await role_repo.save(role)


async def make_user(
    env, role: Role | None = None, is_admin: bool = False, upvote_weight: int = 1
) -> User:
    """Persist a user (and a role for them unless one is given)."""
    user_repo = await env.get(UserRepository)
    role = role or await make_role(env, upvote_weight=upvote_weight)
    user_id = UserId(uuid4())
    user = User(
        id=user_id,
        username=f"user-{user_id.hex[:8]}",
        role_id=role.id,
        is_admin=is_admin,
    )
    return await user_repo.save(user)


async def make_group(env, owner: User, issue_count: int = 0, **counters) -> Group:
    group_repo = await env.get(GroupRepository)
    group = Group(
        id=GroupId(uuid4()),
        name="Street lighting",
        owner_id=owner.id,
        issue_count=issue_count,
        **counters,
    )
    return await group_repo.save(group)


async def make_issue(
    env,
    owner: User,
    group: Group | None = None,
    posted_at: datetime | None = None,
    **counters,
) -> Issue:
    """Persist an issue; does not touch the group's issue_count."""
    issue_repo = await env.get(IssueRepository)
    issue = Issue(
        id=IssueId(uuid4()),
        title="Broken streetlight",
        description="The light on Elm Street has been out for a week.",
        owner_id=owner.id,
        group_id=group.id if group else None,
        posted_at=posted_at or datetime.now() - timedelta(hours=1),
        **counters,
    )
    return await issue_repo.save(issue)
