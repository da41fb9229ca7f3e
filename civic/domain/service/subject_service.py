"""Subject domain service.

Issues and groups both carry ``upvote_count`` and ``comment_count``.
This service dispatches on ``SubjectType`` so vote and comment logic is
written once.
"""

from uuid import UUID

import logfire

from civic.domain.error import NotFoundError
from civic.domain.model.subject import Subject
from civic.domain.repository import GroupRepository, IssueRepository, SubjectRepository
from civic.domain.value import SubjectType

from .base import Service


def warn_if_clamped(
    counter: str, subject_type: str, subject_id: UUID, current: int, delta: int
) -> None:
    """Log when a counter adjustment would have gone below zero.

    The store floors the value at 0; reaching the floor means the cache
    had drifted from its source rows.
    """
    if current + delta < 0:
        logfire.warn(
            "Counter clamp triggered",
            counter=counter,
            subject_type=subject_type,
            subject_id=str(subject_id),
            current=current,
            delta=delta,
        )


class SubjectService(Service):
    """Domain service for issue/group counters."""

    def __init__(
        self, issue_repository: IssueRepository, group_repository: GroupRepository
    ) -> None:
        """Initialize subject service.

        Args:
            issue_repository: Issue repository
            group_repository: Group repository
        """
        self.issue_repository = issue_repository
        self.group_repository = group_repository

    def repository_for(self, subject_type: SubjectType) -> SubjectRepository:
        if subject_type == SubjectType.ISSUE:
            return self.issue_repository
        return self.group_repository

    async def get_subject(
        self, subject_type: SubjectType, subject_id: UUID, for_update: bool = False
    ) -> Subject | None:
        """Get an issue or group by ID.

        Args:
            subject_type: Which table to look in
            subject_id: Subject ID
            for_update: Lock the row for the rest of the transaction

        Returns:
            Subject if found, None otherwise
        """
        repository = self.repository_for(subject_type)
        return await repository.find_by_id(subject_id, for_update=for_update)

    async def require_subject(
        self, subject_type: SubjectType, subject_id: UUID, for_update: bool = False
    ) -> Subject:
        """Get an issue or group by ID, failing if absent.

        Raises:
            NotFoundError: If the subject does not exist
        """
        subject = await self.get_subject(subject_type, subject_id, for_update)
        if subject is None:
            logfire.warn(
                "Subject not found",
                subject_type=subject_type.value,
                subject_id=str(subject_id),
            )
            raise NotFoundError(subject_type.value.capitalize(), str(subject_id))
        return subject

    async def adjust_upvote_count(
        self, subject_type: SubjectType, subject: Subject, delta: int
    ) -> int:
        """Move a subject's upvote total by ``delta`` (floored at 0).

        ``subject`` must have been read under lock in the current
        transaction so the clamp check sees the stored value.

        Returns:
            New upvote count
        """
        warn_if_clamped(
            "upvote_count", subject_type.value, subject.id, subject.upvote_count, delta
        )
        repository = self.repository_for(subject_type)
        return await repository.adjust_upvote_count(subject.id, delta)

    async def adjust_comment_count(
        self, subject_type: SubjectType, subject: Subject, delta: int
    ) -> int:
        """Move a subject's comment total by ``delta`` (floored at 0).

        Returns:
            New comment count
        """
        warn_if_clamped(
            "comment_count", subject_type.value, subject.id, subject.comment_count, delta
        )
        repository = self.repository_for(subject_type)
        return await repository.adjust_comment_count(subject.id, delta)
