"""PostgreSQL implementation of Issue repository."""

from typing import List, Optional

from sqlalchemy import func, insert, select, update

from civic.domain.model import Issue
from civic.domain.repository import IssueRepository
from civic.domain.value import GroupId, IssueId, UserId
from civic.persistence.mappers import issue_to_dict, row_to_issue
from civic.persistence.tables import issues_table

from .subject import PostgresSubjectRepository


class PostgresIssueRepository(PostgresSubjectRepository[Issue], IssueRepository):
    """PostgreSQL implementation of IssueRepository."""

    table = issues_table
    row_mapper = staticmethod(row_to_issue)

    async def save(self, issue: Issue) -> Issue:
        """Insert a new issue."""
        stmt = insert(issues_table).values(**issue_to_dict(issue))
        await self.session.execute(stmt)
        await self.session.flush()
        return issue

    async def find_by_owner(self, owner_id: UserId) -> List[Issue]:
        stmt = (
            select(issues_table)
            .where(issues_table.c.owner_id == owner_id)
            .order_by(issues_table.c.posted_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_issue(row._asdict()) for row in result.fetchall()]

    async def set_group(self, issue_id: IssueId, group_id: Optional[GroupId]) -> None:
        stmt = (
            update(issues_table)
            .where(issues_table.c.id == issue_id)
            .values(group_id=group_id)
        )
        await self.session.execute(stmt)

    async def count_by_group(self, group_id: GroupId) -> int:
        stmt = (
            select(func.count())
            .select_from(issues_table)
            .where(issues_table.c.group_id == group_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def set_counters(
        self, issue_id: IssueId, upvote_count: int, comment_count: int
    ) -> None:
        stmt = (
            update(issues_table)
            .where(issues_table.c.id == issue_id)
            .values(upvote_count=upvote_count, comment_count=comment_count)
        )
        await self.session.execute(stmt)
