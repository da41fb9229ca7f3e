"""Domain value objects for the civic backend.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import Field, field_validator

from civic.domain.value.common import RootValueObject, ValueObject


class SubjectType(str, Enum):
    """Type of entity that carries votes and comments."""

    ISSUE = "issue"
    GROUP = "group"


class JoinRequestStatus(str, Enum):
    """Lifecycle of a group join request.

    PENDING is the only non-terminal state.
    """

    PENDING = "pending"
    APPROVED = "approved"
    DECLINED = "declined"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self is not JoinRequestStatus.PENDING


class JoinDecision(str, Enum):
    """Decision the non-initiating party can take on a join request."""

    APPROVED = "approved"
    DECLINED = "declined"

    @property
    def status(self) -> JoinRequestStatus:
        return JoinRequestStatus(self.value)


class RoleChangeStatus(str, Enum):
    """Lifecycle of a role change request."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class RoleChangeDecision(str, Enum):
    """Decision an administrator can take on a role change request."""

    APPROVED = "approved"
    REJECTED = "rejected"

    @property
    def status(self) -> RoleChangeStatus:
        return RoleChangeStatus(self.value)


class CommentContent(RootValueObject[str]):
    """Comment body.

    Surrounding whitespace is stripped; the remaining text must be 1-5000
    characters.
    """

    @field_validator("root")
    @classmethod
    def validate_content(cls, v: str) -> str:
        """Strip and validate comment content."""
        v = v.strip()
        if not v:
            raise ValueError("Comment content must not be empty")
        if len(v) > 5000:
            raise ValueError("Comment content must be at most 5000 characters")
        return v


class ToggleResult(ValueObject):
    """Outcome of a vote toggle.

    ``voted`` tells whether the voter now has a vote on the subject and
    ``count`` is the subject's upvote total after the toggle.
    """

    voted: bool
    count: int = Field(ge=0)


class CounterDrift(ValueObject):
    """Difference between a stored counter and its recomputed value."""

    counter: str
    stored: int
    actual: int

    @property
    def delta(self) -> int:
        return self.actual - self.stored
