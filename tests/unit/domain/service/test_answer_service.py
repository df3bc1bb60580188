"""Unit tests for AnswerService."""

from unittest.mock import AsyncMock, patch
from uuid import uuid4

import pytest

from lighter.domain.error import NotFoundError, ValidationError
from lighter.domain.repository import AnswerRepository, QuestionRepository
from lighter.domain.service import AnswerService, QuestionService
from lighter.domain.value import QuestionId
from tests.conftest import make_question
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestAddAnswer:
    """Tests for add_answer method."""

    @pytest.mark.asyncio
    async def test_add_answer_then_join(self, unit_env):
        """The joined view contains the new answer."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        question_service = await unit_env.get(QuestionService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.create(make_question())

        # Act
        answer = await answer_service.add_answer(question.id, "hello")
        result = await question_service.get_question_with_answers(question.id)

        # Assert
        assert result is not None
        assert len(result.answers) == 1
        assert result.answers[0].content == "hello"
        assert result.answers[0].question_id == question.id
        assert result.question.answers == [answer.id]

    @pytest.mark.asyncio
    async def test_answers_join_oldest_first(self, unit_env):
        """Multiple answers come back in creation order."""
        answer_service = await unit_env.get(AnswerService)
        question_service = await unit_env.get(QuestionService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.create(make_question())

        first = await answer_service.add_answer(question.id, "first")
        second = await answer_service.add_answer(question.id, "second")

        result = await question_service.get_question_with_answers(question.id)
        assert [a.id for a in result.answers] == [first.id, second.id]
        assert result.question.answers == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_add_answer_to_missing_question_raises(self, unit_env):
        """Nothing is written when the question does not exist."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        answer_repo = await unit_env.get(AnswerRepository)
        missing_id = QuestionId(uuid4())

        # Act & Assert
        with pytest.raises(NotFoundError):
            await answer_service.add_answer(missing_id, "orphan")

        assert await answer_repo.find_by_question(missing_id) == []

    @pytest.mark.asyncio
    async def test_add_blank_answer_raises(self, unit_env):
        """Blank answer content is rejected."""
        answer_service = await unit_env.get(AnswerService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.create(make_question())

        with pytest.raises(ValidationError):
            await answer_service.add_answer(question.id, "   ")

        stored = await question_repo.find_by_id(question.id)
        assert stored.answers == []

    @pytest.mark.asyncio
    async def test_failed_link_discards_answer_record(self, unit_env):
        """If the question vanishes before the link, the answer is not kept."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        answer_repo = await unit_env.get(AnswerRepository)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.create(make_question())

        # Act & Assert
        with patch.object(
            question_repo, "push_answer", AsyncMock(return_value=False)
        ):
            with pytest.raises(NotFoundError, match="Question not found"):
                await answer_service.add_answer(question.id, "orphan")

        assert await answer_repo.find_by_question(question.id) == []
        stored = await question_repo.find_by_id(question.id)
        assert stored.answers == []
