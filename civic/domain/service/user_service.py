"""User domain service."""

import logfire

from civic.domain.error import NotFoundError
from civic.domain.model.user import User
from civic.domain.repository import RoleRepository, UserRepository
from civic.domain.value import UserId

from .base import Service


class UserService(Service):
    """Domain service for user and role lookups."""

    def __init__(
        self,
        user_repository: UserRepository,
        role_repository: RoleRepository,
        default_vote_weight: int = 1,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            role_repository: Role repository
            default_vote_weight: Weight used when a voter's role cannot be resolved
        """
        self.user_repository = user_repository
        self.role_repository = role_repository
        self.default_vote_weight = default_vote_weight

    async def get_user_by_id(self, user_id: UserId, for_update: bool = False) -> User | None:
        """Get a user by ID.

        Args:
            user_id: User ID
            for_update: Lock the row for the rest of the transaction

        Returns:
            User if found, None otherwise
        """
        return await self.user_repository.find_by_id(user_id, for_update=for_update)

    async def require_user(self, user_id: UserId, for_update: bool = False) -> User:
        """Get a user by ID, failing if absent.

        Raises:
            NotFoundError: If the user does not exist
        """
        user = await self.get_user_by_id(user_id, for_update=for_update)
        if user is None:
            raise NotFoundError("User", str(user_id))
        return user

    async def resolve_vote_weight(self, user_id: UserId) -> int:
        """Resolve the weight a new vote by this user carries.

        The weight comes from the user's current role. An orphaned user or
        role falls back to the default weight instead of failing the vote;
        each fallback is logged as a referential-integrity signal.

        Args:
            user_id: Voter ID

        Returns:
            Vote weight (>= 1)
        """
        with logfire.span("user_service.resolve_vote_weight", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                logfire.warn(
                    "Vote weight fallback: voter not found",
                    user_id=str(user_id),
                    weight=self.default_vote_weight,
                )
                return self.default_vote_weight

            role = await self.role_repository.find_by_id(user.role_id)
            if role is None:
                logfire.warn(
                    "Vote weight fallback: role not found",
                    user_id=str(user_id),
                    role_id=str(user.role_id),
                    weight=self.default_vote_weight,
                )
                return self.default_vote_weight

            return role.upvote_weight
