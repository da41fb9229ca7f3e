"""Transaction boundary interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionManager(ABC):
    """Opens atomic units of work.

    Everything a core operation reads and writes inside ``atomic()`` is
    applied together or not at all, and no concurrent operation touching
    the same rows observes an intermediate state.
    """

    @abstractmethod
    def atomic(self) -> AbstractAsyncContextManager[None]:
        """Open an atomic block.

        Usage:
            async with transaction_manager.atomic():
                ...

        Blocks may nest; an inner block joins the outer one.
        """
        pass
