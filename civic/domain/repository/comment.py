"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from civic.domain.model.comment import Comment
from civic.domain.value import CommentId, SubjectType


class CommentRepository(ABC):
    """Repository for Comment entity.

    The comment rows are the source of truth; the subject's
    ``comment_count`` is a cache of ``count_by_subject``.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        pass

    @abstractmethod
    async def find_by_subject(
        self, subject_type: SubjectType, subject_id: UUID
    ) -> List[Comment]:
        """Find all comments on a subject, oldest first."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment.

        Returns:
            True if a comment was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def count_by_subject(self, subject_type: SubjectType, subject_id: UUID) -> int:
        """Count comments on a subject."""
        pass
