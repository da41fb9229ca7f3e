"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from civic.domain.model.user import User
from civic.domain.value import RoleId, UserId


class UserRepository(ABC):
    """Repository for User entity."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId, for_update: bool = False) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier
            for_update: Lock the row until the surrounding transaction ends

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert a new user."""
        pass

    @abstractmethod
    async def update_role(self, user_id: UserId, role_id: RoleId) -> None:
        """Assign a new role to a user."""
        pass
