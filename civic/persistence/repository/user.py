"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from civic.domain.model import User
from civic.domain.repository import UserRepository
from civic.domain.value import RoleId, UserId
from civic.persistence.mappers import row_to_user, user_to_dict
from civic.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId, for_update: bool = False) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def save(self, user: User) -> User:
        """Insert a new user."""
        stmt = insert(users_table).values(**user_to_dict(user))
        await self.session.execute(stmt)
        await self.session.flush()
        return user

    async def update_role(self, user_id: UserId, role_id: RoleId) -> None:
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values(role_id=role_id)
        )
        await self.session.execute(stmt)
