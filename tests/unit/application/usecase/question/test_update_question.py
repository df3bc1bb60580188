"""Unit tests for UpdateQuestionUseCase and AddCommentUseCase."""

from uuid import uuid4

import pytest

from lighter.application.usecase.question import (
    AddCommentRequest,
    AddCommentUseCase,
    GetQuestionRequest,
    GetQuestionUseCase,
    UpdateQuestionRequest,
    UpdateQuestionUseCase,
)
from lighter.domain.error import ValidationError
from lighter.domain.repository import QuestionRepository
from tests.conftest import make_question
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestUpdateQuestionUseCase:
    """Tests for UpdateQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_update_reports_match(self, unit_env):
        """A matched update is visible through GetQuestionUseCase."""
        # Arrange
        update_use_case = await unit_env.get(UpdateQuestionUseCase)
        get_use_case = await unit_env.get(GetQuestionUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.create(make_question(tags=["python"]))

        # Act
        result = await update_use_case.execute(
            UpdateQuestionRequest(
                question_id=str(question.id), tags=["rust"], summary="retag"
            )
        )

        # Assert
        assert result.matched is True
        fetched = await get_use_case.execute(
            GetQuestionRequest(question_id=str(question.id))
        )
        assert fetched.tags == ["rust"]
        assert [c.content for c in fetched.comments] == ["retag"]

    @pytest.mark.asyncio
    async def test_update_unknown_id_reports_no_match(self, unit_env):
        """An unknown id yields matched=False."""
        update_use_case = await unit_env.get(UpdateQuestionUseCase)
        question_id = str(uuid4())

        result = await update_use_case.execute(
            UpdateQuestionRequest(question_id=question_id, summary="x")
        )

        assert result.question_id == question_id
        assert result.matched is False

    @pytest.mark.asyncio
    async def test_update_without_summary_raises(self, unit_env):
        """Summary is required."""
        update_use_case = await unit_env.get(UpdateQuestionUseCase)

        with pytest.raises(ValidationError):
            await update_use_case.execute(
                UpdateQuestionRequest(question_id=str(uuid4()), title="New")
            )


class TestAddCommentUseCase:
    """Tests for AddCommentUseCase."""

    @pytest.mark.asyncio
    async def test_add_comment(self, unit_env):
        add_comment_use_case = await unit_env.get(AddCommentUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.create(make_question())

        result = await add_comment_use_case.execute(
            AddCommentRequest(question_id=str(question.id), content="Good point")
        )

        assert result.matched is True
        stored = await question_repo.find_by_id(question.id)
        assert [c.content for c in stored.comments] == ["Good point"]
