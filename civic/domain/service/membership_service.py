"""Membership domain service.

Owns the link between issues and groups and the ``issue_count`` each
group caches.
"""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from civic.domain.error import ForbiddenError, NotFoundError, ValidationError
from civic.domain.model.issue import Issue
from civic.domain.repository import GroupRepository, IssueRepository, TransactionManager
from civic.domain.value import GroupId, IssueId, UserId

from . import policy
from .base import Service
from .subject_service import warn_if_clamped
from .user_service import UserService


class MembershipService(Service):
    """Domain service for issue/group membership."""

    def __init__(
        self,
        issue_repository: IssueRepository,
        group_repository: GroupRepository,
        user_service: UserService,
        transaction_manager: TransactionManager,
    ) -> None:
        """Initialize membership service.

        Args:
            issue_repository: Issue repository
            group_repository: Group repository
            user_service: Resolves issue owners
            transaction_manager: Opens atomic blocks
        """
        self.issue_repository = issue_repository
        self.group_repository = group_repository
        self.user_service = user_service
        self.transaction_manager = transaction_manager

    async def create_issue(
        self,
        owner_id: UserId,
        title: str,
        description: str,
        group_id: Optional[GroupId] = None,
    ) -> Issue:
        """File a new issue, optionally straight into a group.

        Only the increment half of a reassignment applies here: there is
        no previous group.

        Raises:
            ValidationError: If title or description is blank
            NotFoundError: If the owner or the group does not exist
        """
        title = title.strip()
        description = description.strip()
        if not title or not description:
            raise ValidationError("Issue title and description are required")

        with logfire.span(
            "membership_service.create_issue",
            owner_id=str(owner_id),
            group_id=str(group_id) if group_id else None,
        ):
            async with self.transaction_manager.atomic():
                await self.user_service.require_user(owner_id)
                if group_id is not None:
                    group = await self.group_repository.find_by_id(group_id, for_update=True)
                    if group is None:
                        raise NotFoundError("Group", str(group_id))

                issue = Issue(
                    id=IssueId(uuid4()),
                    title=title,
                    description=description,
                    owner_id=owner_id,
                    group_id=group_id,
                    posted_at=datetime.now(),
                )
                saved = await self.issue_repository.save(issue)
                if group_id is not None:
                    await self.group_repository.adjust_issue_count(group_id, 1)

            logfire.info("Issue created", issue_id=str(saved.id))
            return saved

    async def reassign_issue_group(
        self, issue_id: IssueId, group_id: Optional[GroupId], actor_id: UserId
    ) -> None:
        """Move an issue into a group, to another group, or out of any group.

        This is the owner's direct move. The issue owner may take the issue
        out of its group or put it into a group they also own; linking to
        anyone else's group goes through a join request.

        Raises:
            NotFoundError: If the issue or the target group does not exist
            ForbiddenError: If the actor does not own the issue, or the
                target group belongs to someone else
        """
        with logfire.span(
            "membership_service.reassign_issue_group",
            issue_id=str(issue_id),
            group_id=str(group_id) if group_id else None,
            actor_id=str(actor_id),
        ):
            async with self.transaction_manager.atomic():
                issue = await self.issue_repository.find_by_id(issue_id, for_update=True)
                if issue is None:
                    raise NotFoundError("Issue", str(issue_id))

                target_owner_id = None
                if group_id is not None:
                    target = await self.group_repository.find_by_id(group_id)
                    if target is None:
                        raise NotFoundError("Group", str(group_id))
                    target_owner_id = target.owner_id

                if not policy.can_reassign_issue(actor_id, issue.owner_id, target_owner_id):
                    raise ForbiddenError(str(actor_id), "reassign issue", str(issue_id))

                await self.move_issue(issue, group_id)

    async def move_issue(self, issue: Issue, group_id: Optional[GroupId]) -> None:
        """Repoint ``issue`` and move both groups' counters.

        Must run inside an atomic block opened by the caller, with
        ``issue`` read under lock.

        Raises:
            NotFoundError: If the target group does not exist
        """
        previous = issue.group_id
        if previous == group_id:
            return

        # Lock both groups in a fixed order so two opposite moves cannot deadlock
        locked = {}
        for gid in sorted({g for g in (previous, group_id) if g is not None}, key=str):
            locked[gid] = await self.group_repository.find_by_id(gid, for_update=True)

        if group_id is not None and locked[group_id] is None:
            raise NotFoundError("Group", str(group_id))

        old_group = locked.get(previous) if previous is not None else None
        if old_group is not None:
            warn_if_clamped("issue_count", "group", old_group.id, old_group.issue_count, -1)
            await self.group_repository.adjust_issue_count(old_group.id, -1)
        if group_id is not None:
            await self.group_repository.adjust_issue_count(group_id, 1)
        await self.issue_repository.set_group(issue.id, group_id)

        logfire.info(
            "Issue group reassigned",
            issue_id=str(issue.id),
            from_group=str(previous) if previous else None,
            to_group=str(group_id) if group_id else None,
        )
