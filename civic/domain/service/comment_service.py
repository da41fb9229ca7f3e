"""Comment domain service."""

from datetime import datetime
from uuid import UUID, uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from civic.domain.error import ForbiddenError, NotFoundError, ValidationError
from civic.domain.model.comment import Comment
from civic.domain.repository import CommentRepository, TransactionManager
from civic.domain.value import CommentContent, CommentId, SubjectType, UserId

from .base import Service
from .subject_service import SubjectService
from .user_service import UserService


class CommentService(Service):
    """Domain service for comments and the comment counter."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        subject_service: SubjectService,
        user_service: UserService,
        transaction_manager: TransactionManager,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            subject_service: Subject domain service
            user_service: Resolves comment authors
            transaction_manager: Opens atomic blocks
        """
        self.comment_repository = comment_repository
        self.subject_service = subject_service
        self.user_service = user_service
        self.transaction_manager = transaction_manager

    async def add_comment(
        self,
        subject_type: SubjectType,
        subject_id: UUID,
        author_id: UserId,
        content: str,
    ) -> Comment:
        """Comment on an issue or group.

        Args:
            subject_type: Issue or group
            subject_id: Subject ID
            author_id: Comment author
            content: Comment text (stripped before storing)

        Returns:
            Created comment

        Raises:
            ValidationError: If content is empty after trimming
            NotFoundError: If the author or the subject does not exist
        """
        try:
            text = CommentContent(content).root
        except PydanticValidationError as e:
            raise ValidationError(e.errors()[0]["msg"]) from e

        with logfire.span(
            "comment_service.add_comment",
            subject_type=subject_type.value,
            subject_id=str(subject_id),
            author_id=str(author_id),
        ):
            async with self.transaction_manager.atomic():
                await self.user_service.require_user(author_id)
                subject = await self.subject_service.require_subject(
                    subject_type, subject_id, for_update=True
                )
                comment = Comment(
                    id=CommentId(uuid4()),
                    subject_type=subject_type,
                    subject_id=subject_id,
                    author_id=author_id,
                    content=text,
                    posted_at=datetime.now(),
                )
                saved = await self.comment_repository.save(comment)
                count = await self.subject_service.adjust_comment_count(
                    subject_type, subject, 1
                )

            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                subject_id=str(subject_id),
                comment_count=count,
            )
            return saved

    async def delete_comment(self, comment_id: CommentId, actor_id: UserId) -> None:
        """Delete a comment and decrement its subject's comment counter.

        Only the comment's author may delete it.

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If the actor did not write the comment
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            actor_id=str(actor_id),
        ):
            async with self.transaction_manager.atomic():
                comment = await self.comment_repository.find_by_id(comment_id)
                if comment is None:
                    raise NotFoundError("Comment", str(comment_id))
                if comment.author_id != actor_id:
                    raise ForbiddenError(str(actor_id), "delete comment", str(comment_id))

                subject = await self.subject_service.get_subject(
                    comment.subject_type, comment.subject_id, for_update=True
                )
                deleted = await self.comment_repository.delete(comment_id)
                if not deleted:
                    # Removed by a concurrent request between lookup and delete
                    raise NotFoundError("Comment", str(comment_id))

                # comments.subject_id is polymorphic with no foreign key, so the
                # subject may already be deleted
                if subject is not None:
                    await self.subject_service.adjust_comment_count(
                        comment.subject_type, subject, -1
                    )

            logfire.info("Comment deleted", comment_id=str(comment_id))
