"""Unit tests for PostgresUnitOfWork."""

import pytest

from lighter.persistence.repository.unit_of_work import PostgresUnitOfWork


class _Savepoint:
    def __init__(self, session: "SavepointSession") -> None:
        self.session = session

    async def __aenter__(self):
        self.session.events.append("begin")
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.session.events.append("rollback" if exc_type else "release")
        return False


class SavepointSession:
    """Stands in for AsyncSession and records savepoint boundaries."""

    def __init__(self) -> None:
        self.events = []

    def begin_nested(self):
        return _Savepoint(self)


class TestPostgresUnitOfWork:
    """Atomic blocks map onto savepoints."""

    @pytest.mark.asyncio
    async def test_successful_block_releases_savepoint(self):
        session = SavepointSession()
        unit_of_work = PostgresUnitOfWork(session)

        async with unit_of_work.atomic():
            session.events.append("write")

        assert session.events == ["begin", "write", "release"]

    @pytest.mark.asyncio
    async def test_failed_block_rolls_back_savepoint_and_reraises(self):
        session = SavepointSession()
        unit_of_work = PostgresUnitOfWork(session)

        with pytest.raises(LookupError):
            async with unit_of_work.atomic():
                session.events.append("write")
                raise LookupError("question gone")

        assert session.events == ["begin", "write", "rollback"]
