"""Base model for all domain entities."""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

M = TypeVar("M", bound="DomainModel")


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are frozen. A state change builds a new instance with
    ``evolve`` and is written back through a repository.
    """

    model_config = ConfigDict(frozen=True)

    def evolve(self: M, **changes: Any) -> M:
        """Return a copy with ``changes`` applied, re-running validation.

        Unlike ``model_copy(update=...)`` this rejects a copy that breaks a
        field constraint or model validator, e.g. a terminal join request
        without ``handled_at``.
        """
        return type(self).model_validate({**self.model_dump(), **changes})
