"""Toggle vote use case."""

from uuid import UUID

from pydantic import BaseModel

from civic.application.usecase.base import BaseUseCase
from civic.domain.service import VoteService
from civic.domain.value import SubjectType, UserId


class ToggleVoteRequest(BaseModel):
    """Toggle vote request."""

    subject_type: SubjectType
    subject_id: str  # UUID string
    voter_id: str  # User ID from the identity provider


class ToggleVoteResponse(BaseModel):
    """Toggle vote response."""

    voted: bool
    count: int


class ToggleVoteUseCase(BaseUseCase[ToggleVoteRequest, ToggleVoteResponse]):
    """Use case for casting or withdrawing a vote on an issue or group."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize toggle vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: ToggleVoteRequest) -> ToggleVoteResponse:
        """Execute toggle vote flow.

        Args:
            request: Toggle vote request

        Returns:
            Whether the voter now has a vote, and the subject's new total

        Raises:
            NotFoundError: If the subject does not exist
            ConflictError: If a concurrent duplicate vote reached the store
        """
        result = await self.vote_service.toggle_vote(
            subject_type=request.subject_type,
            subject_id=UUID(request.subject_id),
            voter_id=UserId(UUID(request.voter_id)),
        )
        return ToggleVoteResponse(voted=result.voted, count=result.count)
