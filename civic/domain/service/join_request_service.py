"""Group join request domain service.

State machine: PENDING -> APPROVED | DECLINED | CANCELLED, all terminal.
"""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from civic.domain.error import ConflictError, ForbiddenError, NotFoundError
from civic.domain.model.group import Group
from civic.domain.model.issue import Issue
from civic.domain.model.join_request import GroupJoinRequest
from civic.domain.repository import (
    GroupRepository,
    IssueRepository,
    JoinRequestRepository,
    TransactionManager,
    constraint,
)
from civic.domain.value import (
    GroupId,
    IssueId,
    JoinDecision,
    JoinRequestId,
    JoinRequestStatus,
    UserId,
)

from . import policy
from .base import Service
from .membership_service import MembershipService


class JoinRequestService(Service):
    """Domain service for the bilateral issue/group join workflow."""

    def __init__(
        self,
        join_request_repository: JoinRequestRepository,
        issue_repository: IssueRepository,
        group_repository: GroupRepository,
        membership_service: MembershipService,
        transaction_manager: TransactionManager,
    ) -> None:
        """Initialize join request service.

        Args:
            join_request_repository: Join request repository
            issue_repository: Issue repository
            group_repository: Group repository
            membership_service: Applies approved links to the membership counter
            transaction_manager: Opens atomic blocks
        """
        self.join_request_repository = join_request_repository
        self.issue_repository = issue_repository
        self.group_repository = group_repository
        self.membership_service = membership_service
        self.transaction_manager = transaction_manager

    async def submit(
        self, issue_id: IssueId, group_id: GroupId, actor_id: UserId
    ) -> GroupJoinRequest:
        """Propose linking an issue to a group.

        The actor's ownership decides the request's side. When the actor
        owns both the issue and the group there is nobody else to ask:
        the request is stored already approved and the issue moves into
        the group in the same atomic block.

        Args:
            issue_id: Issue to link
            group_id: Target group
            actor_id: Proposing user

        Returns:
            The created request (PENDING, or APPROVED when self-linked)

        Raises:
            NotFoundError: If the issue or group does not exist
            ForbiddenError: If the actor owns neither side
            ConflictError: If the issue is already in the group, or a
                pending request for the pair exists
        """
        with logfire.span(
            "join_request_service.submit",
            issue_id=str(issue_id),
            group_id=str(group_id),
            actor_id=str(actor_id),
        ):
            try:
                async with self.transaction_manager.atomic():
                    issue, group = await self._load_pair(issue_id, group_id)

                    initiated_by_group = policy.initiated_by_group_for(
                        actor_id, issue.owner_id, group.owner_id
                    )
                    if initiated_by_group is None:
                        raise ForbiddenError(
                            str(actor_id), "link issue to group", str(group_id)
                        )

                    if issue.group_id == group.id:
                        raise ConflictError("Issue already belongs to this group")

                    if await self.join_request_repository.find_pending(issue_id, group_id):
                        raise ConflictError(
                            "A pending join request already exists for this issue and group"
                        )

                    now = datetime.now()
                    if policy.is_self_link(actor_id, issue.owner_id, group.owner_id):
                        request = GroupJoinRequest(
                            id=JoinRequestId(uuid4()),
                            issue_id=issue_id,
                            group_id=group_id,
                            initiated_by_group=initiated_by_group,
                            status=JoinRequestStatus.APPROVED,
                            requested_at=now,
                            handled_at=now,
                        )
                        saved = await self.join_request_repository.save(request)
                        await self.membership_service.move_issue(issue, group.id)
                        logfire.info("Join request auto-approved", request_id=str(saved.id))
                        return saved

                    request = GroupJoinRequest(
                        id=JoinRequestId(uuid4()),
                        issue_id=issue_id,
                        group_id=group_id,
                        initiated_by_group=initiated_by_group,
                        requested_at=now,
                    )
                    saved = await self.join_request_repository.save(request)
                    logfire.info(
                        "Join request submitted",
                        request_id=str(saved.id),
                        initiated_by_group=initiated_by_group,
                    )
                    return saved
            except IntegrityError as e:
                if not constraint.violates(e, constraint.PENDING_JOIN_REQUEST):
                    raise
                logfire.warn(
                    "Duplicate pending join request",
                    issue_id=str(issue_id),
                    group_id=str(group_id),
                )
                raise ConflictError(
                    "A pending join request already exists for this issue and group"
                )

    async def decide(
        self, request_id: JoinRequestId, actor_id: UserId, decision: JoinDecision
    ) -> GroupJoinRequest:
        """Approve or decline a pending request.

        Only the non-initiating party may decide. Approval moves the issue
        into the group within the same atomic block as the status change.

        Raises:
            NotFoundError: If the request does not exist
            ConflictError: If the request is no longer pending
            ForbiddenError: If the actor is not the deciding party
        """
        with logfire.span(
            "join_request_service.decide",
            request_id=str(request_id),
            actor_id=str(actor_id),
            decision=decision.value,
        ):
            async with self.transaction_manager.atomic():
                request = await self._require_pending(request_id)
                issue, group = await self._load_pair(request.issue_id, request.group_id)

                if not policy.can_decide_join_request(
                    actor_id, request.initiated_by_group, issue.owner_id, group.owner_id
                ):
                    raise ForbiddenError(str(actor_id), "decide join request", str(request_id))

                updated = await self.join_request_repository.update_status(
                    request_id, decision.status, datetime.now()
                )
                if decision == JoinDecision.APPROVED:
                    await self.membership_service.move_issue(issue, group.id)

            logfire.info(
                "Join request decided",
                request_id=str(request_id),
                status=updated.status.value,
            )
            return updated

    async def cancel(self, request_id: JoinRequestId, actor_id: UserId) -> GroupJoinRequest:
        """Withdraw a pending request.

        Either owner may cancel, whoever initiated it.

        Raises:
            NotFoundError: If the request does not exist
            ConflictError: If the request is no longer pending
            ForbiddenError: If the actor owns neither side
        """
        with logfire.span(
            "join_request_service.cancel",
            request_id=str(request_id),
            actor_id=str(actor_id),
        ):
            async with self.transaction_manager.atomic():
                request = await self._require_pending(request_id)
                issue, group = await self._load_pair(request.issue_id, request.group_id)

                if not policy.can_cancel_join_request(
                    actor_id, issue.owner_id, group.owner_id
                ):
                    raise ForbiddenError(str(actor_id), "cancel join request", str(request_id))

                updated = await self.join_request_repository.update_status(
                    request_id, JoinRequestStatus.CANCELLED, datetime.now()
                )

            logfire.info("Join request cancelled", request_id=str(request_id))
            return updated

    async def list_pending_for(self, actor_id: UserId) -> list[GroupJoinRequest]:
        """List pending requests awaiting the actor's decision, newest first."""
        issues = {i.id: i for i in await self.issue_repository.find_by_owner(actor_id)}
        groups = {g.id: g for g in await self.group_repository.find_by_owner(actor_id)}
        candidates = await self.join_request_repository.find_pending_involving(
            issues.keys(), groups.keys()
        )
        # Initiated by the group: the issue owner decides, and vice versa
        return [
            r
            for r in candidates
            if (r.initiated_by_group and r.issue_id in issues)
            or (not r.initiated_by_group and r.group_id in groups)
        ]

    async def _require_pending(self, request_id: JoinRequestId) -> GroupJoinRequest:
        request = await self.join_request_repository.find_by_id(request_id, for_update=True)
        if request is None:
            raise NotFoundError("Join request", str(request_id))
        if not request.is_pending:
            raise ConflictError(f"Join request is already {request.status.value}")
        return request

    async def _load_pair(self, issue_id: IssueId, group_id: GroupId) -> tuple[Issue, Group]:
        issue = await self.issue_repository.find_by_id(issue_id, for_update=True)
        if issue is None:
            raise NotFoundError("Issue", str(issue_id))
        group = await self.group_repository.find_by_id(group_id)
        if group is None:
            raise NotFoundError("Group", str(group_id))
        return issue, group
