"""PostgreSQL implementation of Group repository."""

from typing import List

from sqlalchemy import func, insert, select, update

from civic.domain.model import Group
from civic.domain.repository import GroupRepository
from civic.domain.value import GroupId, UserId
from civic.persistence.mappers import group_to_dict, row_to_group
from civic.persistence.tables import groups_table

from .subject import PostgresSubjectRepository


class PostgresGroupRepository(PostgresSubjectRepository[Group], GroupRepository):
    """PostgreSQL implementation of GroupRepository."""

    table = groups_table
    row_mapper = staticmethod(row_to_group)

    async def save(self, group: Group) -> Group:
        """Insert a new group."""
        stmt = insert(groups_table).values(**group_to_dict(group))
        await self.session.execute(stmt)
        await self.session.flush()
        return group

    async def find_by_owner(self, owner_id: UserId) -> List[Group]:
        stmt = select(groups_table).where(groups_table.c.owner_id == owner_id)
        result = await self.session.execute(stmt)
        return [row_to_group(row._asdict()) for row in result.fetchall()]

    async def adjust_issue_count(self, group_id: GroupId, delta: int) -> int:
        """Atomically move the member issue counter, floored at 0."""
        stmt = (
            update(groups_table)
            .where(groups_table.c.id == group_id)
            .values(issue_count=func.greatest(groups_table.c.issue_count + delta, 0))
            .returning(groups_table.c.issue_count)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() or 0

    async def set_counters(
        self,
        group_id: GroupId,
        upvote_count: int,
        comment_count: int,
        issue_count: int,
    ) -> None:
        stmt = (
            update(groups_table)
            .where(groups_table.c.id == group_id)
            .values(
                upvote_count=upvote_count,
                comment_count=comment_count,
                issue_count=issue_count,
            )
        )
        await self.session.execute(stmt)
