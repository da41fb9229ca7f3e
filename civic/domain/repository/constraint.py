"""Named uniqueness constraints the store enforces.

Services turn a violation of one of these into ``ConflictError``. Any
other ``IntegrityError`` (a missing foreign key row, a failed check) is a
different failure and propagates unchanged.
"""

from typing import Optional

from sqlalchemy.exc import IntegrityError

VOTE_SUBJECT_VOTER = "uq_vote_subject_voter"
PENDING_JOIN_REQUEST = "idx_group_join_requests_unique_pending"
PENDING_ROLE_CHANGE_REQUEST = "idx_role_change_requests_unique_pending_user"


class ConstraintViolation(Exception):
    """Driver-level error carrying the name of the violated constraint.

    Stores without a database driver attach one of these as the
    ``orig`` of the ``IntegrityError`` they raise.
    """

    def __init__(self, constraint_name: str):
        self.constraint_name = constraint_name
        super().__init__(f"duplicate key value violates unique constraint {constraint_name!r}")


def violated_constraint(error: IntegrityError) -> Optional[str]:
    """Name of the constraint behind ``error``, if the driver reports one.

    asyncpg exposes it as ``constraint_name`` on the exception that the
    SQLAlchemy adapter wraps.
    """
    orig = error.orig
    for candidate in (orig, getattr(orig, "__cause__", None)):
        name = getattr(candidate, "constraint_name", None)
        if name:
            return name
    return None


def violates(error: IntegrityError, constraint_name: str) -> bool:
    return violated_constraint(error) == constraint_name
