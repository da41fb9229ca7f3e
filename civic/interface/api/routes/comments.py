"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel

from civic.application.usecase.comment import (
    AddCommentRequest,
    AddCommentResponse,
    AddCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from civic.domain.value import SubjectType

from .actor import ActorId

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CommentBody(BaseModel):
    """Comment request body."""

    content: str


@router.post(
    "/issues/{issue_id}/comments",
    response_model=AddCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_issue_comment(
    issue_id: UUID,
    body: CommentBody,
    actor_id: ActorId,
    add_comment_use_case: FromDishka[AddCommentUseCase],
) -> AddCommentResponse:
    """Comment on an issue."""
    request = AddCommentRequest(
        subject_type=SubjectType.ISSUE,
        subject_id=str(issue_id),
        author_id=str(actor_id),
        content=body.content,
    )
    return await add_comment_use_case.execute(request)


@router.post(
    "/groups/{group_id}/comments",
    response_model=AddCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_group_comment(
    group_id: UUID,
    body: CommentBody,
    actor_id: ActorId,
    add_comment_use_case: FromDishka[AddCommentUseCase],
) -> AddCommentResponse:
    """Comment on a group."""
    request = AddCommentRequest(
        subject_type=SubjectType.GROUP,
        subject_id=str(group_id),
        author_id=str(actor_id),
        content=body.content,
    )
    return await add_comment_use_case.execute(request)


@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: UUID,
    actor_id: ActorId,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> None:
    """Delete one of the actor's own comments."""
    await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=str(comment_id), actor_id=str(actor_id))
    )
