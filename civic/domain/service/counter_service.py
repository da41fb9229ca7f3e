"""Counter reconciliation service.

The denormalized counters are caches. Recomputing them from the vote,
comment and issue rows is always a valid correction.
"""

from uuid import UUID

import logfire

from civic.domain.error import ForbiddenError
from civic.domain.model.group import Group
from civic.domain.repository import (
    CommentRepository,
    GroupRepository,
    IssueRepository,
    TransactionManager,
    VoteRepository,
)
from civic.domain.value import CounterDrift, GroupId, IssueId, SubjectType, UserId

from . import policy
from .base import Service
from .subject_service import SubjectService
from .user_service import UserService


class CounterService(Service):
    """Domain service that recounts a subject's cached aggregates."""

    def __init__(
        self,
        subject_service: SubjectService,
        user_service: UserService,
        issue_repository: IssueRepository,
        group_repository: GroupRepository,
        vote_repository: VoteRepository,
        comment_repository: CommentRepository,
        transaction_manager: TransactionManager,
    ) -> None:
        self.subject_service = subject_service
        self.user_service = user_service
        self.issue_repository = issue_repository
        self.group_repository = group_repository
        self.vote_repository = vote_repository
        self.comment_repository = comment_repository
        self.transaction_manager = transaction_manager

    async def recount(
        self, subject_type: SubjectType, subject_id: UUID, actor_id: UserId
    ) -> list[CounterDrift]:
        """Recompute and store a subject's counters.

        Args:
            subject_type: Issue or group
            subject_id: Subject ID
            actor_id: Requesting user; must be an administrator

        Returns:
            One entry per counter whose stored value was wrong (empty if
            everything matched)

        Raises:
            ForbiddenError: If the actor is not an administrator
            NotFoundError: If the subject does not exist
        """
        with logfire.span(
            "counter_service.recount",
            subject_type=subject_type.value,
            subject_id=str(subject_id),
            actor_id=str(actor_id),
        ):
            actor = await self.user_service.get_user_by_id(actor_id)
            if not policy.can_recount_counters(actor):
                raise ForbiddenError(str(actor_id), "recount counters of", str(subject_id))

            async with self.transaction_manager.atomic():
                subject = await self.subject_service.require_subject(
                    subject_type, subject_id, for_update=True
                )
                upvotes = await self.vote_repository.sum_weight_by_subject(
                    subject_type, subject_id
                )
                comments = await self.comment_repository.count_by_subject(
                    subject_type, subject_id
                )

                observed = [
                    ("upvote_count", subject.upvote_count, upvotes),
                    ("comment_count", subject.comment_count, comments),
                ]
                issues = 0
                if isinstance(subject, Group):
                    issues = await self.issue_repository.count_by_group(GroupId(subject_id))
                    observed.append(("issue_count", subject.issue_count, issues))

                drifts = [
                    CounterDrift(counter=name, stored=stored, actual=actual)
                    for name, stored, actual in observed
                    if stored != actual
                ]
                if not drifts:
                    return []

                if subject_type == SubjectType.ISSUE:
                    await self.issue_repository.set_counters(
                        IssueId(subject_id), upvotes, comments
                    )
                else:
                    await self.group_repository.set_counters(
                        GroupId(subject_id), upvotes, comments, issues
                    )

            for drift in drifts:
                logfire.warn(
                    "Counter drift corrected",
                    subject_type=subject_type.value,
                    subject_id=str(subject_id),
                    counter=drift.counter,
                    stored=drift.stored,
                    actual=drift.actual,
                )
            return drifts
