"""Counter handling shared by the in-memory issue and group repositories."""

from typing import Optional
from uuid import UUID

from .base import InMemoryRepository, T


class InMemorySubjectRepository(InMemoryRepository[T]):
    """Subject lookup and floored counter adjustments."""

    async def find_by_id(self, subject_id: UUID, for_update: bool = False) -> Optional[T]:
        # Locking is the transaction manager's job here
        return self._rows.get(subject_id)

    async def adjust_upvote_count(self, subject_id: UUID, delta: int) -> int:
        return self._adjust("upvote_count", subject_id, delta)

    async def adjust_comment_count(self, subject_id: UUID, delta: int) -> int:
        return self._adjust("comment_count", subject_id, delta)

    def _adjust(self, field: str, subject_id: UUID, delta: int) -> int:
        subject = self._rows.get(subject_id)
        if subject is None:
            return 0
        value = max(getattr(subject, field) + delta, 0)
        self._rows[subject_id] = subject.evolve(**{field: value})  # type: ignore[attr-defined]
        return value
