"""PostgreSQL implementation of Role repository."""

from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from civic.domain.model import Role
from civic.domain.repository import RoleRepository
from civic.domain.value import RoleId
from civic.persistence.mappers import role_to_dict, row_to_role
from civic.persistence.tables import roles_table


class PostgresRoleRepository(RoleRepository):
    """PostgreSQL implementation of RoleRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, role_id: RoleId) -> Optional[Role]:
        stmt = select(roles_table).where(roles_table.c.id == role_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_role(row._asdict()) if row else None

    async def save(self, role: Role) -> Role:
        stmt = insert(roles_table).values(**role_to_dict(role))
        await self.session.execute(stmt)
        await self.session.flush()
        return role
