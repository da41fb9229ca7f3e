"""In-memory issue repository for testing."""

from typing import Optional

from civic.domain.model.issue import Issue
from civic.domain.repository.issue import IssueRepository
from civic.domain.value import GroupId, IssueId, UserId

from .subject import InMemorySubjectRepository


class InMemoryIssueRepository(InMemorySubjectRepository[Issue], IssueRepository):
    """In-memory implementation of IssueRepository for testing."""

    async def save(self, issue: Issue) -> Issue:
        self._rows[issue.id] = issue
        return issue

    async def find_by_owner(self, owner_id: UserId) -> list[Issue]:
        issues = [i for i in self._rows.values() if i.owner_id == owner_id]
        issues.sort(key=lambda i: i.posted_at, reverse=True)
        return issues

    async def set_group(self, issue_id: IssueId, group_id: Optional[GroupId]) -> None:
        issue = self._rows.get(issue_id)
        if issue is not None:
            self._rows[issue_id] = issue.evolve(group_id=group_id)

    async def count_by_group(self, group_id: GroupId) -> int:
        return sum(1 for i in self._rows.values() if i.group_id == group_id)

    async def set_counters(
        self, issue_id: IssueId, upvote_count: int, comment_count: int
    ) -> None:
        issue = self._rows.get(issue_id)
        if issue is not None:
            self._rows[issue_id] = issue.evolve(
                upvote_count=upvote_count, comment_count=comment_count
            )
