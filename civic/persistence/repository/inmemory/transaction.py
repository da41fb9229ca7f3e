"""In-memory transaction manager for testing."""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional, Sequence

from civic.domain.repository import TransactionManager

from .base import InMemoryRepository


class InMemoryTransactionManager(TransactionManager):
    """Serializes atomic blocks with a lock and rolls back on error.

    The lock is re-entrant for the task holding it, so services may nest
    atomic blocks the way savepoints nest in PostgreSQL.
    """

    def __init__(self, repositories: Sequence[InMemoryRepository] = ()) -> None:
        self._repositories = list(repositories)
        self._lock = asyncio.Lock()
        self._owner: Optional[asyncio.Task] = None
        self._depth = 0

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        task = asyncio.current_task()
        if self._owner is not task:
            await self._lock.acquire()
            self._owner = task

        self._depth += 1
        snapshots = [repo.snapshot() for repo in self._repositories]
        try:
            yield
        except BaseException:
            for repo, snapshot in zip(self._repositories, snapshots):
                repo.restore(snapshot)
            raise
        finally:
            self._depth -= 1
            if self._depth == 0:
                self._owner = None
                self._lock.release()
