"""Unit tests for constraint name extraction from IntegrityError."""

from sqlalchemy.exc import IntegrityError

from civic.domain.repository import constraint


class UniqueViolationError(Exception):
    """Shaped like asyncpg's error: the constraint name is an attribute."""

    def __init__(self, constraint_name: str):
        self.constraint_name = constraint_name
        super().__init__("duplicate key value")


class AdaptedIntegrityError(Exception):
    """Shaped like the SQLAlchemy asyncpg adapter's DBAPI error."""


def _adapted(constraint_name: str) -> IntegrityError:
    orig = AdaptedIntegrityError("duplicate key value")
    orig.__cause__ = UniqueViolationError(constraint_name)
    return IntegrityError("INSERT INTO votes", None, orig)


class TestViolatedConstraint:
    def test_reads_name_from_driver_cause(self):
        error = _adapted(constraint.VOTE_SUBJECT_VOTER)

        assert constraint.violated_constraint(error) == "uq_vote_subject_voter"

    def test_reads_name_from_in_memory_violation(self):
        error = IntegrityError(
            "INSERT INTO group_join_requests",
            None,
            constraint.ConstraintViolation(constraint.PENDING_JOIN_REQUEST),
        )

        assert constraint.violates(error, constraint.PENDING_JOIN_REQUEST)

    def test_unnamed_error_matches_nothing(self):
        error = IntegrityError("INSERT INTO votes", None, Exception("boom"))

        assert constraint.violated_constraint(error) is None
        assert not constraint.violates(error, constraint.VOTE_SUBJECT_VOTER)

    def test_foreign_key_is_not_the_vote_uniqueness(self):
        error = _adapted("comments_author_id_fkey")

        assert not constraint.violates(error, constraint.VOTE_SUBJECT_VOTER)
