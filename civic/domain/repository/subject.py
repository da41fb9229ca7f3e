"""Shared contract for repositories of vote/comment subjects."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar
from uuid import UUID

from civic.domain.model.subject import Subject

S = TypeVar("S", bound=Subject)


class SubjectRepository(ABC, Generic[S]):
    """Repository for an entity carrying ``upvote_count`` and ``comment_count``.

    Counters are only ever moved by relative adjustments so that
    concurrent updates from different voters commute. Adjustments are
    floored at 0.
    """

    @abstractmethod
    async def find_by_id(self, subject_id: UUID, for_update: bool = False) -> Optional[S]:
        """Find a subject by ID.

        Args:
            subject_id: Subject identifier
            for_update: Lock the row until the surrounding transaction ends

        Returns:
            The subject if found, None otherwise
        """
        pass

    @abstractmethod
    async def adjust_upvote_count(self, subject_id: UUID, delta: int) -> int:
        """Add ``delta`` to the upvote counter, floored at 0.

        Returns:
            The stored count after the adjustment
        """
        pass

    @abstractmethod
    async def adjust_comment_count(self, subject_id: UUID, delta: int) -> int:
        """Add ``delta`` to the comment counter, floored at 0.

        Returns:
            The stored count after the adjustment
        """
        pass
