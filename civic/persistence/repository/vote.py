"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from civic.domain.model import Vote
from civic.domain.repository import VoteRepository
from civic.domain.value import SubjectType, UserId, VoteId
from civic.persistence.mappers import row_to_vote, vote_to_dict
from civic.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_subject_and_voter(
        self,
        subject_type: SubjectType,
        subject_id: UUID,
        voter_id: UserId,
    ) -> Optional[Vote]:
        """Find a voter's vote on a specific subject."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.subject_type == subject_type.value,
                votes_table.c.subject_id == subject_id,
                votes_table.c.voter_id == voter_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_subject(
        self, subject_type: SubjectType, subject_id: UUID
    ) -> List[Vote]:
        stmt = select(votes_table).where(
            and_(
                votes_table.c.subject_type == subject_type.value,
                votes_table.c.subject_id == subject_id,
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create)."""
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote."""
        stmt = delete(votes_table).where(votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def sum_weight_by_subject(
        self, subject_type: SubjectType, subject_id: UUID
    ) -> int:
        stmt = select(func.coalesce(func.sum(votes_table.c.weight), 0)).where(
            and_(
                votes_table.c.subject_type == subject_type.value,
                votes_table.c.subject_id == subject_id,
            )
        )
        result = await self.session.execute(stmt)
        return int(result.scalar() or 0)
