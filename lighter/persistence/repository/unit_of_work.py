"""PostgreSQL implementation of UnitOfWork."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from lighter.domain.repository import UnitOfWork


class PostgresUnitOfWork(UnitOfWork):
    """Runs an atomic block inside a SAVEPOINT of the request session.

    The request session commits whenever the route returns a response,
    including error responses, so a failed block is rolled back to its
    savepoint here rather than left to the outer transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize unit of work with database session.

        Args:
            session: SQLAlchemy async session shared with the repositories
        """
        self.session = session

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        async with self.session.begin_nested():
            yield
