"""In-memory comment repository for testing."""

from typing import Optional
from uuid import UUID

from civic.domain.model.comment import Comment
from civic.domain.repository.comment import CommentRepository
from civic.domain.value import CommentId, SubjectType

from .base import InMemoryRepository


class InMemoryCommentRepository(InMemoryRepository[Comment], CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        return self._rows.get(comment_id)

    async def find_by_subject(
        self, subject_type: SubjectType, subject_id: UUID
    ) -> list[Comment]:
        comments = [
            c
            for c in self._rows.values()
            if c.subject_type == subject_type and c.subject_id == subject_id
        ]
        comments.sort(key=lambda c: c.posted_at)
        return comments

    async def save(self, comment: Comment) -> Comment:
        self._rows[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        return self._rows.pop(comment_id, None) is not None

    async def count_by_subject(self, subject_type: SubjectType, subject_id: UUID) -> int:
        return len(await self.find_by_subject(subject_type, subject_id))
