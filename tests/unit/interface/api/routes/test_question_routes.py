"""Unit tests for question route handlers.

Handlers are called directly with use cases from the mock container, so
these tests cover the mapping of domain outcomes to HTTP responses.
"""

from uuid import uuid4

import pytest
from fastapi import HTTPException

from lighter.application.usecase.answer import AddAnswerUseCase
from lighter.application.usecase.question import (
    AddCommentUseCase,
    CreateQuestionUseCase,
    GetQuestionUseCase,
    GetQuestionWithAnswersUseCase,
    ListQuestionsUseCase,
    UpdateQuestionUseCase,
)
from lighter.application.usecase.vote import CastVoteUseCase
from lighter.domain.value import VoteDirection
from lighter.interface.api.routes import questions
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _create(unit_env, title="Route question", tags=None):
    use_case = await unit_env.get(CreateQuestionUseCase)
    return await questions.create_question(
        questions.CreateQuestionAPIRequest(title=title, tags=tags or []), use_case
    )


class TestQuestionReadRoutes:
    """Tests for GET handlers."""

    @pytest.mark.asyncio
    async def test_get_question_returns_created(self, unit_env):
        created = await _create(unit_env, tags=["rust"])
        use_case = await unit_env.get(GetQuestionUseCase)

        fetched = await questions.get_question(created.question_id, use_case)

        assert fetched.question_id == created.question_id
        assert fetched.tags == ["rust"]

    @pytest.mark.asyncio
    async def test_get_missing_question_is_404(self, unit_env):
        use_case = await unit_env.get(GetQuestionUseCase)

        with pytest.raises(HTTPException) as exc_info:
            await questions.get_question(uuid4(), use_case)

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_get_missing_question_with_answers_is_404(self, unit_env):
        use_case = await unit_env.get(GetQuestionWithAnswersUseCase)

        with pytest.raises(HTTPException) as exc_info:
            await questions.get_question_with_answers(uuid4(), use_case)

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_list_with_unknown_sort_is_400(self, unit_env):
        use_case = await unit_env.get(ListQuestionsUseCase)

        with pytest.raises(HTTPException) as exc_info:
            await questions.list_questions(use_case, tags=None, sort="title")

        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_list_filters_by_tag(self, unit_env):
        await _create(unit_env, title="Rusty", tags=["rust"])
        await _create(unit_env, title="Snake", tags=["python"])
        use_case = await unit_env.get(ListQuestionsUseCase)

        result = await questions.list_questions(use_case, tags=["rust"])

        assert [q.title for q in result.questions] == ["Rusty"]


class TestQuestionWriteRoutes:
    """Tests for POST/PATCH handlers."""

    @pytest.mark.asyncio
    async def test_patch_without_summary_is_400(self, unit_env):
        created = await _create(unit_env)
        use_case = await unit_env.get(UpdateQuestionUseCase)

        with pytest.raises(HTTPException) as exc_info:
            await questions.update_question(
                created.question_id,
                questions.UpdateQuestionAPIRequest(title="New title"),
                use_case,
            )

        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_patch_unknown_question_reports_no_match(self, unit_env):
        use_case = await unit_env.get(UpdateQuestionUseCase)

        result = await questions.update_question(
            uuid4(), questions.UpdateQuestionAPIRequest(summary="x"), use_case
        )

        assert result.matched is False

    @pytest.mark.asyncio
    async def test_answer_on_missing_question_is_404(self, unit_env):
        use_case = await unit_env.get(AddAnswerUseCase)

        with pytest.raises(HTTPException) as exc_info:
            await questions.add_answer(
                uuid4(), questions.AnswerAPIRequest(content="hello"), use_case
            )

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_blank_comment_is_400(self, unit_env):
        created = await _create(unit_env)
        use_case = await unit_env.get(AddCommentUseCase)

        with pytest.raises(HTTPException) as exc_info:
            await questions.add_comment(
                created.question_id, questions.CommentAPIRequest(content=" "), use_case
            )

        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_vote_up_and_down(self, unit_env):
        created = await _create(unit_env)
        use_case = await unit_env.get(CastVoteUseCase)

        up = await questions.vote_up(created.question_id, use_case)
        down = await questions.vote_down(created.question_id, use_case)

        assert up.direction == VoteDirection.UP
        assert down.direction == VoteDirection.DOWN

        get_use_case = await unit_env.get(GetQuestionUseCase)
        fetched = await questions.get_question(created.question_id, get_use_case)
        assert fetched.vote_count == 0
        assert fetched.vote_ups == [up.vote_id]
        assert fetched.vote_downs == [down.vote_id]

    @pytest.mark.asyncio
    async def test_vote_on_missing_question_is_404(self, unit_env):
        use_case = await unit_env.get(CastVoteUseCase)

        with pytest.raises(HTTPException) as exc_info:
            await questions.vote_up(uuid4(), use_case)

        assert exc_info.value.status_code == 404
