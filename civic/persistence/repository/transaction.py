"""PostgreSQL transaction manager."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession

from civic.domain.repository import TransactionManager


class PostgresTransactionManager(TransactionManager):
    """Runs atomic blocks as savepoints inside the request session.

    The request-scoped session owns the outer transaction and commits it
    when the request succeeds. A failing block rolls back to its
    savepoint, so nothing it wrote survives even if the caller handles the
    error and carries on.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        async with self.session.begin_nested():
            yield
