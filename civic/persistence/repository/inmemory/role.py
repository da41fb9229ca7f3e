"""In-memory role repository for testing."""

from typing import Optional

from civic.domain.model.role import Role
from civic.domain.repository.role import RoleRepository
from civic.domain.value import RoleId

from .base import InMemoryRepository


class InMemoryRoleRepository(InMemoryRepository[Role], RoleRepository):
    """In-memory implementation of RoleRepository for testing."""

    async def find_by_id(self, role_id: RoleId) -> Optional[Role]:
        return self._rows.get(role_id)

    async def save(self, role: Role) -> Role:
        self._rows[role.id] = role
        return role
