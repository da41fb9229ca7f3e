"""In-memory vote repository for testing."""

from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from civic.domain.model.vote import Vote
from civic.domain.repository.constraint import VOTE_SUBJECT_VOTER, ConstraintViolation
from civic.domain.repository.vote import VoteRepository
from civic.domain.value import SubjectType, UserId, VoteId

from .base import InMemoryRepository


class InMemoryVoteRepository(InMemoryRepository[Vote], VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    async def find_by_subject_and_voter(
        self,
        subject_type: SubjectType,
        subject_id: UUID,
        voter_id: UserId,
    ) -> Optional[Vote]:
        """Find a vote by subject and voter."""
        for vote in self._rows.values():
            if (
                vote.subject_type == subject_type
                and vote.subject_id == subject_id
                and vote.voter_id == voter_id
            ):
                return vote
        return None

    async def find_by_subject(
        self, subject_type: SubjectType, subject_id: UUID
    ) -> list[Vote]:
        return [
            v
            for v in self._rows.values()
            if v.subject_type == subject_type and v.subject_id == subject_id
        ]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If the voter already has a vote on the subject
        """
        existing = await self.find_by_subject_and_voter(
            vote.subject_type, vote.subject_id, vote.voter_id
        )
        if existing:
            raise IntegrityError(
                "INSERT INTO votes", None, ConstraintViolation(VOTE_SUBJECT_VOTER)
            )

        self._rows[vote.id] = vote
        return vote

    async def delete(self, vote_id: VoteId) -> bool:
        return self._rows.pop(vote_id, None) is not None

    async def sum_weight_by_subject(
        self, subject_type: SubjectType, subject_id: UUID
    ) -> int:
        return sum(v.weight for v in await self.find_by_subject(subject_type, subject_id))
