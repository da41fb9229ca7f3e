"""Value object bases.

Value objects are frozen pydantic models compared by value. Single-field
values (such as comment text) wrap a primitive in a ``RootModel`` so
that they dump back to the bare primitive.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel

T = TypeVar("T")


class ValueObject(BaseModel):
    """Immutable multi-field value."""

    model_config = ConfigDict(frozen=True)


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable wrapper around one primitive, exposed as ``.root``."""

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
