"""Add comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from civic.application.usecase.base import BaseUseCase
from civic.domain.service import CommentService
from civic.domain.value import SubjectType, UserId


class AddCommentRequest(BaseModel):
    """Add comment request."""

    subject_type: SubjectType
    subject_id: str  # UUID string
    author_id: str  # User ID from the identity provider
    content: str


class AddCommentResponse(BaseModel):
    """Add comment response."""

    comment_id: str
    subject_type: SubjectType
    subject_id: str
    author_id: str
    content: str
    posted_at: datetime


class AddCommentUseCase(BaseUseCase[AddCommentRequest, AddCommentResponse]):
    """Use case for commenting on an issue or group."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize add comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: AddCommentRequest) -> AddCommentResponse:
        """Execute add comment flow.

        Steps:
        1. Validate content (non-empty after trimming)
        2. Insert the comment and bump the subject's comment count atomically

        Raises:
            ValidationError: If content is blank
            NotFoundError: If the subject does not exist
        """
        comment = await self.comment_service.add_comment(
            subject_type=request.subject_type,
            subject_id=UUID(request.subject_id),
            author_id=UserId(UUID(request.author_id)),
            content=request.content,
        )

        return AddCommentResponse(
            comment_id=str(comment.id),
            subject_type=comment.subject_type,
            subject_id=str(comment.subject_id),
            author_id=str(comment.author_id),
            content=comment.content,
            posted_at=comment.posted_at,
        )
