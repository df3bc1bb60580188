#!/usr/bin/env python3
"""Repair question aggregates that drifted from the vote ledger and answer store.

Run after a partial failure, or periodically. Safe to run repeatedly.

Usage:
    python scripts/reconcile.py                  # all questions
    python scripts/reconcile.py <question-uuid>  # one question
"""

import asyncio
import sys
from uuid import UUID

import logfire

from lighter.config import Settings
from lighter.domain.service import ReconcileService
from lighter.domain.value import QuestionId
from lighter.persistence.database import (
    create_engine,
    create_session_factory,
    transaction,
)
from lighter.persistence.repository import (
    PostgresAnswerRepository,
    PostgresQuestionRepository,
    PostgresVoteRepository,
)
from lighter.util.logging import setup_logging
from lighter.util.observability import configure_logfire


async def reconcile(settings: Settings, question_id: QuestionId | None) -> int:
    """Reconcile one question or all of them in a single transaction.

    Returns:
        Number of questions that were repaired
    """
    engine = create_engine(settings)
    session_factory = create_session_factory(engine)

    try:
        async with transaction(session_factory) as session:
            service = ReconcileService(
                question_repository=PostgresQuestionRepository(session),
                answer_repository=PostgresAnswerRepository(session),
                vote_repository=PostgresVoteRepository(session),
            )

            if question_id is not None:
                report = await service.reconcile_question(question_id)
                reports = [report] if report.repaired else []
            else:
                reports = await service.reconcile_all(
                    batch_size=settings.reconcile.batch_size
                )
    finally:
        await engine.dispose()

    for report in reports:
        logfire.info(
            "Question repaired",
            question_id=report.question_id,
            vote_count_before=report.vote_count_before,
            vote_count_after=report.vote_count_after,
            missing_vote_ids=report.missing_vote_ids,
            unknown_vote_ids=report.unknown_vote_ids,
            missing_answer_ids=report.missing_answer_ids,
        )

    return len(reports)


def main() -> int:
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    question_id = QuestionId(UUID(sys.argv[1])) if len(sys.argv) > 1 else None

    try:
        repaired = asyncio.run(reconcile(settings, question_id))
    except Exception as e:
        logfire.error(
            "Reconciliation failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    logfire.info("Reconcile run complete", repaired=repaired)
    return 0


if __name__ == "__main__":
    sys.exit(main())
