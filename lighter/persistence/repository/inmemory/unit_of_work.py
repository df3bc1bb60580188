"""In-memory unit of work for testing."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Protocol

import logfire

from lighter.domain.repository import UnitOfWork


class Snapshottable(Protocol):
    def snapshot(self) -> Any: ...

    def restore(self, state: Any) -> None: ...


class InMemoryUnitOfWork(UnitOfWork):
    """Restores the repositories' contents when an atomic block fails."""

    def __init__(self, *repositories: Snapshottable) -> None:
        self.repositories = repositories

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        states = [repo.snapshot() for repo in self.repositories]
        try:
            yield
        except BaseException:
            for repo, state in zip(self.repositories, states):
                repo.restore(state)
            logfire.warn("In-memory atomic block rolled back")
            raise
