"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from civic.application.usecase.base import BaseUseCase
from civic.domain.service import CommentService
from civic.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    actor_id: str


class DeleteCommentUseCase(BaseUseCase[DeleteCommentRequest, None]):
    """Use case for deleting one's own comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        await self.comment_service.delete_comment(
            comment_id=CommentId(UUID(request.comment_id)),
            actor_id=UserId(UUID(request.actor_id)),
        )
