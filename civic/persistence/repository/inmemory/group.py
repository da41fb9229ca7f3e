"""In-memory group repository for testing."""

from civic.domain.model.group import Group
from civic.domain.repository.group import GroupRepository
from civic.domain.value import GroupId, UserId

from .subject import InMemorySubjectRepository


class InMemoryGroupRepository(InMemorySubjectRepository[Group], GroupRepository):
    """In-memory implementation of GroupRepository for testing."""

    async def save(self, group: Group) -> Group:
        self._rows[group.id] = group
        return group

    async def find_by_owner(self, owner_id: UserId) -> list[Group]:
        return [g for g in self._rows.values() if g.owner_id == owner_id]

    async def adjust_issue_count(self, group_id: GroupId, delta: int) -> int:
        return self._adjust("issue_count", group_id, delta)

    async def set_counters(
        self,
        group_id: GroupId,
        upvote_count: int,
        comment_count: int,
        issue_count: int,
    ) -> None:
        group = self._rows.get(group_id)
        if group is not None:
            self._rows[group_id] = group.evolve(
                upvote_count=upvote_count,
                comment_count=comment_count,
                issue_count=issue_count,
            )
