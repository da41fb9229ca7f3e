"""PostgreSQL implementation of RoleChangeRequest repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import and_, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from civic.domain.model import RoleChangeRequest
from civic.domain.repository import RoleChangeRequestRepository
from civic.domain.value import RoleChangeRequestId, RoleChangeStatus, UserId
from civic.persistence.mappers import (
    role_change_request_to_dict,
    row_to_role_change_request,
)
from civic.persistence.tables import role_change_requests_table

_pending = role_change_requests_table.c.status == RoleChangeStatus.PENDING.value


class PostgresRoleChangeRequestRepository(RoleChangeRequestRepository):
    """PostgreSQL implementation of RoleChangeRequestRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(
        self, request_id: RoleChangeRequestId, for_update: bool = False
    ) -> Optional[RoleChangeRequest]:
        stmt = select(role_change_requests_table).where(
            role_change_requests_table.c.id == request_id
        )
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_role_change_request(row._asdict()) if row else None

    async def find_pending_by_user(self, user_id: UserId) -> Optional[RoleChangeRequest]:
        stmt = select(role_change_requests_table).where(
            and_(role_change_requests_table.c.user_id == user_id, _pending)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_role_change_request(row._asdict()) if row else None

    async def find_pending(self) -> List[RoleChangeRequest]:
        stmt = (
            select(role_change_requests_table)
            .where(_pending)
            .order_by(role_change_requests_table.c.submitted_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_role_change_request(row._asdict()) for row in result.fetchall()]

    async def save(self, request: RoleChangeRequest) -> RoleChangeRequest:
        stmt = insert(role_change_requests_table).values(
            **role_change_request_to_dict(request)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return request

    async def update_review(
        self,
        request_id: RoleChangeRequestId,
        status: RoleChangeStatus,
        reviewed_at: datetime,
        reviewer_id: UserId,
    ) -> RoleChangeRequest:
        stmt = (
            update(role_change_requests_table)
            .where(role_change_requests_table.c.id == request_id)
            .values(status=status.value, reviewed_at=reviewed_at, reviewer_id=reviewer_id)
            .returning(role_change_requests_table)
        )
        result = await self.session.execute(stmt)
        return row_to_role_change_request(result.one()._asdict())
