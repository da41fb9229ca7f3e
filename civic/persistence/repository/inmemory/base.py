"""Row storage shared by the in-memory repositories."""

from typing import Any, Dict, Generic, TypeVar
from uuid import UUID

T = TypeVar("T")


class InMemoryRepository(Generic[T]):
    """Keeps entities in a dict keyed by ID.

    Entities are frozen, so a shallow copy of the dict is a full snapshot.
    The in-memory transaction manager uses ``snapshot``/``restore`` to roll
    back a failed atomic block.
    """

    def __init__(self) -> None:
        self._rows: Dict[UUID, T] = {}

    def snapshot(self) -> Dict[UUID, Any]:
        return dict(self._rows)

    def restore(self, snapshot: Dict[UUID, Any]) -> None:
        self._rows = snapshot
