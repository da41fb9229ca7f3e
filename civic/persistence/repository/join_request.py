"""PostgreSQL implementation of GroupJoinRequest repository."""

from datetime import datetime
from typing import Collection, List, Optional

from sqlalchemy import and_, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from civic.domain.model import GroupJoinRequest
from civic.domain.repository import JoinRequestRepository
from civic.domain.value import GroupId, IssueId, JoinRequestId, JoinRequestStatus
from civic.persistence.mappers import join_request_to_dict, row_to_join_request
from civic.persistence.tables import group_join_requests_table

_pending = group_join_requests_table.c.status == JoinRequestStatus.PENDING.value


class PostgresJoinRequestRepository(JoinRequestRepository):
    """PostgreSQL implementation of JoinRequestRepository.

    The partial unique index on pending (issue_id, group_id) turns a racing
    duplicate submission into an IntegrityError on insert.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(
        self, request_id: JoinRequestId, for_update: bool = False
    ) -> Optional[GroupJoinRequest]:
        stmt = select(group_join_requests_table).where(
            group_join_requests_table.c.id == request_id
        )
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_join_request(row._asdict()) if row else None

    async def find_pending(
        self, issue_id: IssueId, group_id: GroupId
    ) -> Optional[GroupJoinRequest]:
        stmt = select(group_join_requests_table).where(
            and_(
                group_join_requests_table.c.issue_id == issue_id,
                group_join_requests_table.c.group_id == group_id,
                _pending,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_join_request(row._asdict()) if row else None

    async def find_pending_involving(
        self,
        issue_ids: Collection[IssueId],
        group_ids: Collection[GroupId],
    ) -> List[GroupJoinRequest]:
        if not issue_ids and not group_ids:
            return []

        stmt = (
            select(group_join_requests_table)
            .where(
                and_(
                    _pending,
                    or_(
                        group_join_requests_table.c.issue_id.in_(list(issue_ids)),
                        group_join_requests_table.c.group_id.in_(list(group_ids)),
                    ),
                )
            )
            .order_by(group_join_requests_table.c.requested_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_join_request(row._asdict()) for row in result.fetchall()]

    async def save(self, request: GroupJoinRequest) -> GroupJoinRequest:
        stmt = insert(group_join_requests_table).values(**join_request_to_dict(request))
        await self.session.execute(stmt)
        await self.session.flush()
        return request

    async def update_status(
        self,
        request_id: JoinRequestId,
        status: JoinRequestStatus,
        handled_at: datetime,
    ) -> GroupJoinRequest:
        stmt = (
            update(group_join_requests_table)
            .where(group_join_requests_table.c.id == request_id)
            .values(status=status.value, handled_at=handled_at)
            .returning(group_join_requests_table)
        )
        result = await self.session.execute(stmt)
        return row_to_join_request(result.one()._asdict())
