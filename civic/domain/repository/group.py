"""Group repository interface."""

from abc import abstractmethod
from typing import List

from civic.domain.model.group import Group
from civic.domain.repository.subject import SubjectRepository
from civic.domain.value import GroupId, UserId


class GroupRepository(SubjectRepository[Group]):
    """Repository for Group entity."""

    @abstractmethod
    async def save(self, group: Group) -> Group:
        """Insert a new group."""
        pass

    @abstractmethod
    async def find_by_owner(self, owner_id: UserId) -> List[Group]:
        """Find all groups owned by a user."""
        pass

    @abstractmethod
    async def adjust_issue_count(self, group_id: GroupId, delta: int) -> int:
        """Add ``delta`` to the member issue counter, floored at 0.

        Returns:
            The stored count after the adjustment
        """
        pass

    @abstractmethod
    async def set_counters(
        self,
        group_id: GroupId,
        upvote_count: int,
        comment_count: int,
        issue_count: int,
    ) -> None:
        """Overwrite counters with recomputed values.

        Only used by the recount correction.
        """
        pass
