"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional
from uuid import UUID

import logfire
from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from civic.domain.model import Comment
from civic.domain.repository import CommentRepository
from civic.domain.value import CommentId, SubjectType
from civic.persistence.mappers import comment_to_dict, row_to_comment
from civic.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _subject_clause(self, subject_type: SubjectType, subject_id: UUID):
        return and_(
            comments_table.c.subject_type == subject_type.value,
            comments_table.c.subject_id == subject_id,
        )

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_subject(
        self, subject_type: SubjectType, subject_id: UUID
    ) -> List[Comment]:
        """Find all comments on a subject, oldest first."""
        with logfire.span(
            "comment_repository.find_by_subject",
            subject_type=subject_type.value,
            subject_id=str(subject_id),
        ):
            stmt = (
                select(comments_table)
                .where(self._subject_clause(subject_type, subject_id))
                .order_by(comments_table.c.posted_at)
            )
            result = await self.session.execute(stmt)
            return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = insert(comments_table).values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        stmt = delete(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_by_subject(self, subject_type: SubjectType, subject_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(self._subject_clause(subject_type, subject_id))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
