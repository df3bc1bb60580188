"""Unit tests for the SQL issued by PostgresQuestionRepository.

Every aggregate mutation must reach the database as one UPDATE so that
row-level atomicity covers the whole change.
"""

from uuid import uuid4

import pytest
from sqlalchemy.dialects import postgresql

from lighter.domain.model import Comment, QuestionUpdate
from lighter.domain.value import QuestionId, VoteDirection, VoteId
from lighter.persistence.repository import PostgresQuestionRepository


class _Result:
    def __init__(self, row):
        self._row = row

    def fetchone(self):
        return self._row


class RecordingSession:
    """Stands in for AsyncSession and records executed statements."""

    def __init__(self, matched: bool = True) -> None:
        self.statements = []
        self.matched = matched

    async def execute(self, stmt):
        self.statements.append(stmt)
        return _Result(object() if self.matched else None)

    async def flush(self):
        pass

    def sql(self, index: int = 0) -> str:
        return str(self.statements[index].compile(dialect=postgresql.dialect()))


class TestQuestionMutationStatements:
    """Each mutation compiles to a single UPDATE."""

    @pytest.mark.asyncio
    async def test_apply_update_sets_fields_and_appends_comment(self):
        # Arrange
        session = RecordingSession()
        repo = PostgresQuestionRepository(session)
        update = QuestionUpdate.from_request(summary="retag", tags=["rust"])

        # Act
        matched = await repo.apply_update(QuestionId(uuid4()), update)

        # Assert
        assert matched is True
        assert len(session.statements) == 1
        sql = session.sql()
        assert sql.startswith("UPDATE questions SET")
        assert "tags=" in sql
        assert "questions.comments ||" in sql
        assert "title=" not in sql
        assert "RETURNING questions.id" in sql

    @pytest.mark.asyncio
    async def test_apply_vote_increments_and_guards_membership(self):
        session = RecordingSession()
        repo = PostgresQuestionRepository(session)

        await repo.apply_vote(QuestionId(uuid4()), VoteId(uuid4()), VoteDirection.DOWN)

        assert len(session.statements) == 1
        sql = session.sql()
        assert "questions.vote_count +" in sql
        assert "ANY (questions.vote_downs)" in sql
        assert "array_append(questions.vote_downs" in sql
        assert "vote_ups" not in sql

    @pytest.mark.asyncio
    async def test_push_comment_is_single_update(self):
        session = RecordingSession()
        repo = PostgresQuestionRepository(session)

        await repo.push_comment(QuestionId(uuid4()), Comment(content="hi"))

        assert len(session.statements) == 1
        assert "questions.comments ||" in session.sql()

    @pytest.mark.asyncio
    async def test_unmatched_update_reports_false(self):
        """No returned row means no question had the id."""
        session = RecordingSession(matched=False)
        repo = PostgresQuestionRepository(session)

        matched = await repo.push_answer(QuestionId(uuid4()), uuid4())

        assert matched is False
        assert "array_append(questions.answers" in session.sql()
