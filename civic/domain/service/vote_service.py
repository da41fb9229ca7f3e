"""Vote domain service."""

from datetime import datetime
from uuid import UUID, uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from civic.domain.error import ConflictError
from civic.domain.model.vote import Vote
from civic.domain.repository import TransactionManager, VoteRepository, constraint
from civic.domain.value import SubjectType, ToggleResult, UserId, VoteId

from .base import Service
from .subject_service import SubjectService
from .user_service import UserService


class VoteService(Service):
    """Domain service for the weighted vote ledger.

    Every vote row and the subject's ``upvote_count`` move together in one
    atomic block. The subject row is locked first, so toggles on the same
    subject serialize while the counter updates themselves stay relative
    (and therefore commutative).
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        subject_service: SubjectService,
        user_service: UserService,
        transaction_manager: TransactionManager,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            subject_service: Subject domain service
            user_service: User domain service
            transaction_manager: Opens atomic blocks
        """
        self.vote_repository = vote_repository
        self.subject_service = subject_service
        self.user_service = user_service
        self.transaction_manager = transaction_manager

    async def toggle_vote(
        self, subject_type: SubjectType, subject_id: UUID, voter_id: UserId
    ) -> ToggleResult:
        """Cast the voter's vote, or withdraw it if one exists.

        Casting captures the voter's current role weight on the vote row.
        Withdrawing subtracts the stored weight, not the current one.

        Args:
            subject_type: Issue or group
            subject_id: Subject ID
            voter_id: Voting user

        Returns:
            Whether the voter now has a vote, and the new upvote total

        Raises:
            NotFoundError: If the subject does not exist
            ConflictError: If a concurrent duplicate insert reached the store
        """
        with logfire.span(
            "vote_service.toggle_vote",
            subject_type=subject_type.value,
            subject_id=str(subject_id),
            voter_id=str(voter_id),
        ):
            try:
                async with self.transaction_manager.atomic():
                    subject = await self.subject_service.require_subject(
                        subject_type, subject_id, for_update=True
                    )

                    existing = await self.vote_repository.find_by_subject_and_voter(
                        subject_type, subject_id, voter_id
                    )
                    if existing:
                        await self.vote_repository.delete(existing.id)
                        count = await self.subject_service.adjust_upvote_count(
                            subject_type, subject, -existing.weight
                        )
                        logfire.info(
                            "Vote withdrawn",
                            subject_id=str(subject_id),
                            voter_id=str(voter_id),
                            weight=existing.weight,
                            count=count,
                        )
                        return ToggleResult(voted=False, count=count)

                    weight = await self.user_service.resolve_vote_weight(voter_id)
                    vote = Vote(
                        id=VoteId(uuid4()),
                        subject_type=subject_type,
                        subject_id=subject_id,
                        voter_id=voter_id,
                        weight=weight,
                        cast_at=datetime.now(),
                    )
                    await self.vote_repository.save(vote)
                    count = await self.subject_service.adjust_upvote_count(
                        subject_type, subject, weight
                    )
                    logfire.info(
                        "Vote cast",
                        subject_id=str(subject_id),
                        voter_id=str(voter_id),
                        weight=weight,
                        count=count,
                    )
                    return ToggleResult(voted=True, count=count)
            except IntegrityError as e:
                if not constraint.violates(e, constraint.VOTE_SUBJECT_VOTER):
                    raise
                logfire.warn(
                    "Duplicate vote attempt",
                    subject_id=str(subject_id),
                    voter_id=str(voter_id),
                )
                raise ConflictError("Vote already recorded for this subject")

    async def remove_vote(
        self, subject_type: SubjectType, subject_id: UUID, voter_id: UserId
    ) -> ToggleResult:
        """Withdraw the voter's vote if there is one.

        Unlike ``toggle_vote`` this never casts; removing a vote that does
        not exist leaves the count untouched.

        Returns:
            ``voted=False`` and the upvote total after removal

        Raises:
            NotFoundError: If the subject does not exist
        """
        with logfire.span(
            "vote_service.remove_vote",
            subject_type=subject_type.value,
            subject_id=str(subject_id),
            voter_id=str(voter_id),
        ):
            async with self.transaction_manager.atomic():
                subject = await self.subject_service.require_subject(
                    subject_type, subject_id, for_update=True
                )
                existing = await self.vote_repository.find_by_subject_and_voter(
                    subject_type, subject_id, voter_id
                )
                if existing is None:
                    logfire.info(
                        "No vote to remove",
                        subject_id=str(subject_id),
                        voter_id=str(voter_id),
                    )
                    return ToggleResult(voted=False, count=subject.upvote_count)

                await self.vote_repository.delete(existing.id)
                count = await self.subject_service.adjust_upvote_count(
                    subject_type, subject, -existing.weight
                )
                return ToggleResult(voted=False, count=count)
