"""Role repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from civic.domain.model.role import Role
from civic.domain.value import RoleId


class RoleRepository(ABC):
    """Repository for Role entity."""

    @abstractmethod
    async def find_by_id(self, role_id: RoleId) -> Optional[Role]:
        """Find a role by ID."""
        pass

    @abstractmethod
    async def save(self, role: Role) -> Role:
        """Insert a new role."""
        pass
