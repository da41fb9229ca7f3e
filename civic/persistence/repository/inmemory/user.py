"""In-memory user repository for testing."""

from typing import Optional

from civic.domain.model.user import User
from civic.domain.repository.user import UserRepository
from civic.domain.value import RoleId, UserId

from .base import InMemoryRepository


class InMemoryUserRepository(InMemoryRepository[User], UserRepository):
    """In-memory implementation of UserRepository for testing."""

    async def find_by_id(self, user_id: UserId, for_update: bool = False) -> Optional[User]:
        return self._rows.get(user_id)

    async def save(self, user: User) -> User:
        self._rows[user.id] = user
        return user

    async def update_role(self, user_id: UserId, role_id: RoleId) -> None:
        user = self._rows.get(user_id)
        if user is not None:
            self._rows[user_id] = user.evolve(role_id=role_id)
