"""Comment entity."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from civic.domain.model.common import DomainModel
from civic.domain.value import CommentId, SubjectType, UserId


class Comment(DomainModel):
    """Comment entity.

    Polymorphic reference to its subject (issue or group). Creating or
    deleting a comment is the only thing that moves the subject's
    ``comment_count``.
    """

    id: CommentId
    subject_type: SubjectType
    subject_id: UUID  # IssueId or GroupId (both are UUIDs)
    author_id: UserId
    content: str = Field(min_length=1, max_length=5000)
    posted_at: datetime = Field(default_factory=datetime.now)
