"""Integration tests for the PostgreSQL question aggregate.

Require a migrated PostgreSQL database at DATABASE__URL. Enable with
LIGHTER_INTEGRATION=1.
"""

import os
from unittest.mock import AsyncMock, patch
from uuid import UUID

import pytest

from lighter.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    VoteRepository,
)
from lighter.domain.service import (
    AnswerService,
    QuestionService,
    ReconcileService,
    VoteService,
)
from lighter.domain.error import NotFoundError
from lighter.domain.value import VoteDirection, VoteSourceType
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.environ.get("LIGHTER_INTEGRATION"),
    reason="set LIGHTER_INTEGRATION=1 to run against PostgreSQL",
)

# Integration test fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})


class TestQuestionAggregateIntegration:
    """Round trips through PostgresQuestionRepository and its siblings."""

    @pytest.mark.asyncio
    async def test_update_and_comment_round_trip(self, integration_env):
        """Embedded comments survive the JSONB round trip in order."""
        # Arrange
        question_service = await integration_env.get(QuestionService)
        question_repo = await integration_env.get(QuestionRepository)
        question = await question_service.create_question(
            title="Integration", content="Body", tags=["rust", "rust", "db"]
        )

        # Act
        await question_service.update_question(
            question.id, summary="retag", tags=["postgres"]
        )
        await question_service.add_comment(question.id, "follow-up")

        # Assert
        stored = await question_repo.find_by_id(question.id)
        assert stored.title == "Integration"
        assert [t.root for t in stored.tags] == ["postgres"]
        assert [c.content for c in stored.comments] == ["retag", "follow-up"]

    @pytest.mark.asyncio
    async def test_votes_and_answers_round_trip(self, integration_env):
        """Vote and answer references are stored as UUID arrays."""
        # Arrange
        question_service = await integration_env.get(QuestionService)
        answer_service = await integration_env.get(AnswerService)
        vote_service = await integration_env.get(VoteService)
        vote_repo = await integration_env.get(VoteRepository)
        answer_repo = await integration_env.get(AnswerRepository)
        question = await question_service.create_question(title="Votes")

        # Act
        up = await vote_service.cast_vote(question.id, VoteDirection.UP)
        down = await vote_service.cast_vote(question.id, VoteDirection.DOWN)
        answer = await answer_service.add_answer(question.id, "hello")
        joined = await question_service.get_question_with_answers(question.id)

        # Assert
        assert joined.question.vote_count == 0
        assert joined.question.vote_ups == [up.id]
        assert joined.question.vote_downs == [down.id]
        assert joined.question.answers == [answer.id]
        assert [a.content for a in joined.answers] == ["hello"]

        ledger = await vote_repo.find_by_source(
            VoteSourceType.QUESTION, UUID(str(question.id))
        )
        assert [v.id for v in ledger] == [up.id, down.id]
        stored_answer = await answer_repo.find_by_id(answer.id)
        assert stored_answer.content == "hello"
        assert stored_answer.question_id == question.id

    @pytest.mark.asyncio
    async def test_tag_filter_uses_any_of(self, integration_env):
        question_service = await integration_env.get(QuestionService)
        rust = await question_service.create_question(
            title="Rust only", tags=["it-rust-only"]
        )
        await question_service.create_question(title="Other", tags=["it-other"])

        questions = await question_service.list_questions(
            tags=["it-rust-only", "it-missing"], sort="voteCount"
        )

        assert [q.id for q in questions] == [rust.id]

    @pytest.mark.asyncio
    async def test_reconcile_repairs_ledger_drift(self, integration_env):
        """Votes written straight to the ledger are folded into the question."""
        question_service = await integration_env.get(QuestionService)
        reconcile_service = await integration_env.get(ReconcileService)
        vote_service = await integration_env.get(VoteService)
        question_repo = await integration_env.get(QuestionRepository)
        question = await question_service.create_question(title="Drift")
        vote = await vote_service.cast_vote(question.id, VoteDirection.UP)
        await question_repo.replace_derived(
            question.id, vote_count=0, vote_ups=[], vote_downs=[], answers=[]
        )

        report = await reconcile_service.reconcile_question(question.id)

        assert report.repaired is True
        stored = await question_repo.find_by_id(question.id)
        assert stored.vote_count == 1
        assert stored.vote_ups == [vote.id]

    @pytest.mark.asyncio
    async def test_failed_counter_update_rolls_back_ledger_insert(
        self, integration_env
    ):
        """The savepoint discards the ledger row when the counters cannot move."""
        # Arrange
        question_service = await integration_env.get(QuestionService)
        vote_service = await integration_env.get(VoteService)
        vote_repo = await integration_env.get(VoteRepository)
        question_repo = await integration_env.get(QuestionRepository)
        question = await question_service.create_question(title="Savepoint")

        # Act & Assert
        with patch.object(
            question_repo, "apply_vote", AsyncMock(return_value=False)
        ):
            with pytest.raises(NotFoundError):
                await vote_service.cast_vote(question.id, VoteDirection.UP)

        ledger = await vote_repo.find_by_source(
            VoteSourceType.QUESTION, UUID(str(question.id))
        )
        assert ledger == []
        assert (await question_repo.find_by_id(question.id)).vote_count == 0
