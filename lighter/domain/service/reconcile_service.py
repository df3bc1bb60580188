"""Reconciliation of question aggregates with the ledger and answer store.

Vote counters and answer references on a question are maintained
incrementally by the write paths. This service recomputes them from their
sources of truth and writes back only what drifted. Running it repeatedly
is harmless.
"""

from uuid import UUID

import logfire
from pydantic import BaseModel

from lighter.domain.error import NotFoundError
from lighter.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    VoteRepository,
)
from lighter.domain.value import QuestionId, VoteDirection, VoteSourceType

from .base import Service


class ReconcileReport(BaseModel):
    """Outcome of reconciling one question."""

    question_id: str
    vote_count_before: int
    vote_count_after: int
    missing_vote_ids: int
    unknown_vote_ids: int
    missing_answer_ids: int
    repaired: bool


class ReconcileService(Service):
    """Domain service that repairs drift in question aggregates."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        vote_repository: VoteRepository,
    ) -> None:
        """Initialize reconcile service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository
            vote_repository: Vote ledger repository
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.vote_repository = vote_repository

    async def reconcile_question(self, question_id: QuestionId) -> ReconcileReport:
        """Recompute a question's vote counters and answer references.

        Vote ids are taken from the ledger in ledger order. Answer ids keep
        their current order, with answers missing from the list appended
        oldest first. Ids that reference nothing are dropped.

        Args:
            question_id: Question ID

        Returns:
            What was found and whether the question was rewritten

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span(
            "reconcile_service.reconcile_question", question_id=str(question_id)
        ):
            question = await self.question_repository.find_by_id(question_id)
            if question is None:
                raise NotFoundError("Question", str(question_id))

            votes = await self.vote_repository.find_by_source(
                VoteSourceType.QUESTION, UUID(str(question_id))
            )
            ups = [v.id for v in votes if v.direction == VoteDirection.UP]
            downs = [v.id for v in votes if v.direction == VoteDirection.DOWN]
            vote_count = len(ups) - len(downs)

            ledger_ids = set(ups) | set(downs)
            recorded_ids = set(question.vote_ups) | set(question.vote_downs)

            answers = await self.answer_repository.find_by_question(question_id)
            stored_answer_ids = [a.id for a in answers]
            stored_set = set(stored_answer_ids)
            answer_ids = [a for a in dict.fromkeys(question.answers) if a in stored_set]
            kept = set(answer_ids)
            missing_answers = [a for a in stored_answer_ids if a not in kept]
            answer_ids.extend(missing_answers)

            drifted = (
                vote_count != question.vote_count
                or set(ups) != set(question.vote_ups)
                or set(downs) != set(question.vote_downs)
                or answer_ids != question.answers
            )

            if drifted:
                await self.question_repository.replace_derived(
                    question_id,
                    vote_count=vote_count,
                    vote_ups=ups,
                    vote_downs=downs,
                    answers=answer_ids,
                )
                logfire.warn(
                    "Question aggregate repaired",
                    question_id=str(question_id),
                    vote_count_before=question.vote_count,
                    vote_count_after=vote_count,
                    missing_answers=len(missing_answers),
                )
            else:
                logfire.debug("Question aggregate consistent", question_id=str(question_id))

            return ReconcileReport(
                question_id=str(question_id),
                vote_count_before=question.vote_count,
                vote_count_after=vote_count,
                missing_vote_ids=len(ledger_ids - recorded_ids),
                unknown_vote_ids=len(recorded_ids - ledger_ids),
                missing_answer_ids=len(missing_answers),
                repaired=drifted,
            )

    async def reconcile_all(self, batch_size: int = 100) -> list[ReconcileReport]:
        """Reconcile every question, walking them in batches.

        Args:
            batch_size: Number of question ids fetched per batch

        Returns:
            Reports for the questions that had to be repaired
        """
        repaired: list[ReconcileReport] = []
        checked = 0
        offset = 0

        with logfire.span("reconcile_service.reconcile_all", batch_size=batch_size):
            while True:
                ids = await self.question_repository.iter_ids(limit=batch_size, offset=offset)
                if not ids:
                    break

                for question_id in ids:
                    report = await self.reconcile_question(question_id)
                    checked += 1
                    if report.repaired:
                        repaired.append(report)

                offset += len(ids)

            logfire.info(
                "Reconciliation finished", checked=checked, repaired=len(repaired)
            )
            return repaired
