"""Remove vote use case."""

from uuid import UUID

from pydantic import BaseModel

from civic.application.usecase.base import BaseUseCase
from civic.domain.service import VoteService
from civic.domain.value import SubjectType, UserId


class RemoveVoteRequest(BaseModel):
    """Remove vote request."""

    subject_type: SubjectType
    subject_id: str  # UUID string
    voter_id: str


class RemoveVoteResponse(BaseModel):
    """Remove vote response."""

    voted: bool
    count: int


class RemoveVoteUseCase(BaseUseCase[RemoveVoteRequest, RemoveVoteResponse]):
    """Use case for withdrawing a vote without ever casting one."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: RemoveVoteRequest) -> RemoveVoteResponse:
        result = await self.vote_service.remove_vote(
            subject_type=request.subject_type,
            subject_id=UUID(request.subject_id),
            voter_id=UserId(UUID(request.voter_id)),
        )
        return RemoveVoteResponse(voted=result.voted, count=result.count)
