"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from civic.domain.model.vote import Vote
from civic.domain.value import SubjectType, UserId, VoteId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for the weighted vote ledger.
    """

    @abstractmethod
    async def find_by_subject_and_voter(
        self,
        subject_type: SubjectType,
        subject_id: UUID,
        voter_id: UserId,
    ) -> Optional[Vote]:
        """Find a voter's vote on a specific subject.

        Args:
            subject_type: Type of subject (issue or group)
            subject_id: ID of the subject
            voter_id: The voter's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_subject(
        self, subject_type: SubjectType, subject_id: UUID
    ) -> List[Vote]:
        """Find all votes on a subject."""
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        Raises:
            IntegrityError: If the voter already has a vote on the subject
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote.

        Returns:
            True if a vote was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def sum_weight_by_subject(
        self, subject_type: SubjectType, subject_id: UUID
    ) -> int:
        """Sum the stored weights of all votes on a subject.

        This is the value ``upvote_count`` caches.
        """
        pass
