"""Unit tests for AddAnswerUseCase."""

import pytest

from lighter.application.usecase.answer import AddAnswerRequest, AddAnswerUseCase
from lighter.application.usecase.question import (
    GetQuestionWithAnswersRequest,
    GetQuestionWithAnswersUseCase,
)
from lighter.domain.repository import QuestionRepository
from tests.conftest import make_question
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestAddAnswerUseCase:
    """Tests for AddAnswerUseCase."""

    @pytest.mark.asyncio
    async def test_answer_appears_in_joined_view(self, unit_env):
        """An added answer is returned by the question-with-answers view."""
        # Arrange
        add_answer_use_case = await unit_env.get(AddAnswerUseCase)
        join_use_case = await unit_env.get(GetQuestionWithAnswersUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.create(make_question())

        # Act
        answer = await add_answer_use_case.execute(
            AddAnswerRequest(question_id=str(question.id), content="hello")
        )
        joined = await join_use_case.execute(
            GetQuestionWithAnswersRequest(question_id=str(question.id))
        )

        # Assert
        assert answer.question_id == str(question.id)
        assert [a.content for a in joined.answers] == ["hello"]
        assert joined.question.answers == [answer.answer_id]
