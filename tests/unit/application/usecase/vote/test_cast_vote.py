"""Unit tests for CastVoteUseCase."""

from uuid import uuid4

import pytest

from lighter.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from lighter.domain.error import NotFoundError
from lighter.domain.repository import QuestionRepository
from lighter.domain.value import VoteDirection
from tests.conftest import make_question
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCastVoteUseCase:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_cast_down_vote(self, unit_env):
        """A down vote is returned and counted."""
        # Arrange
        cast_vote_use_case = await unit_env.get(CastVoteUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.create(make_question())

        # Act
        result = await cast_vote_use_case.execute(
            CastVoteRequest(question_id=str(question.id), direction="down")
        )

        # Assert
        assert result.direction == VoteDirection.DOWN
        assert result.question_id == str(question.id)
        updated = await question_repo.find_by_id(question.id)
        assert updated.vote_count == -1
        assert [str(v) for v in updated.vote_downs] == [result.vote_id]

    @pytest.mark.asyncio
    async def test_cast_vote_on_missing_question_raises(self, unit_env):
        cast_vote_use_case = await unit_env.get(CastVoteUseCase)

        with pytest.raises(NotFoundError):
            await cast_vote_use_case.execute(
                CastVoteRequest(question_id=str(uuid4()), direction=VoteDirection.UP)
            )
