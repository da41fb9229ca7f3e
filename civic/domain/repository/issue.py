"""Issue repository interface."""

from abc import abstractmethod
from typing import List, Optional

from civic.domain.model.issue import Issue
from civic.domain.repository.subject import SubjectRepository
from civic.domain.value import GroupId, IssueId, UserId


class IssueRepository(SubjectRepository[Issue]):
    """Repository for Issue entity."""

    @abstractmethod
    async def save(self, issue: Issue) -> Issue:
        """Insert a new issue."""
        pass

    @abstractmethod
    async def find_by_owner(self, owner_id: UserId) -> List[Issue]:
        """Find all issues filed by a user."""
        pass

    @abstractmethod
    async def set_group(self, issue_id: IssueId, group_id: Optional[GroupId]) -> None:
        """Point an issue at a group (or at none).

        Callers are responsible for moving the groups' ``issue_count`` in
        the same transaction.
        """
        pass

    @abstractmethod
    async def count_by_group(self, group_id: GroupId) -> int:
        """Count issues currently assigned to a group."""
        pass

    @abstractmethod
    async def set_counters(
        self, issue_id: IssueId, upvote_count: int, comment_count: int
    ) -> None:
        """Overwrite counters with recomputed values.

        Only used by the recount correction.
        """
        pass
