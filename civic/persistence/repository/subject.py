"""Shared PostgreSQL plumbing for issue and group repositories."""

from typing import Any, Callable, Dict, Generic, Optional, TypeVar
from uuid import UUID

import logfire
from sqlalchemy import Table, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from civic.domain.model.subject import Subject

S = TypeVar("S", bound=Subject)


class PostgresSubjectRepository(Generic[S]):
    """Lookup and counter adjustment for a table with subject counters.

    Adjustments are relative ``UPDATE ... SET col = GREATEST(col + delta, 0)``
    statements, so concurrent adjustments from different transactions
    commute without a read-modify-write race.
    """

    table: Table
    row_mapper: Callable[[Dict[str, Any]], S]

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, subject_id: UUID, for_update: bool = False) -> Optional[S]:
        stmt = select(self.table).where(self.table.c.id == subject_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return self.row_mapper(row._asdict()) if row else None

    async def adjust_upvote_count(self, subject_id: UUID, delta: int) -> int:
        return await self._adjust("upvote_count", subject_id, delta)

    async def adjust_comment_count(self, subject_id: UUID, delta: int) -> int:
        return await self._adjust("comment_count", subject_id, delta)

    async def _adjust(self, column_name: str, subject_id: UUID, delta: int) -> int:
        column = self.table.c[column_name]
        stmt = (
            update(self.table)
            .where(self.table.c.id == subject_id)
            .values({column_name: func.greatest(column + delta, 0)})
            .returning(column)
        )
        result = await self.session.execute(stmt)
        value = result.scalar_one_or_none()
        if value is None:
            logfire.warn(
                "Counter adjustment on missing row",
                table=self.table.name,
                column=column_name,
                subject_id=str(subject_id),
            )
            return 0
        return value
