"""Vote domain service."""

from datetime import datetime
from uuid import UUID, uuid4

import logfire

from lighter.domain.error import NotFoundError
from lighter.domain.model import Vote
from lighter.domain.repository import QuestionRepository, UnitOfWork, VoteRepository
from lighter.domain.value import QuestionId, VoteDirection, VoteId, VoteSourceType

from .base import Service


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        question_repository: QuestionRepository,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote ledger repository
            question_repository: Question repository
            unit_of_work: Keeps the ledger entry and the question counters together
        """
        self.vote_repository = vote_repository
        self.question_repository = question_repository
        self.unit_of_work = unit_of_work

    async def cast_vote(self, question_id: QuestionId, direction: VoteDirection) -> Vote:
        """Vote a question up or down.

        Appends the vote to the ledger, then atomically adjusts the
        question's vote_count and records the vote id in vote_ups or
        vote_downs. If the question cannot be updated the ledger entry
        is discarded with it.

        Args:
            question_id: Question ID
            direction: Up or down

        Returns:
            Recorded vote

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span(
            "vote_service.cast_vote",
            question_id=str(question_id),
            direction=direction.value,
        ):
            question = await self.question_repository.find_by_id(question_id)
            if question is None:
                logfire.warn("Vote on non-existent question", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))

            vote = Vote(
                id=VoteId(uuid4()),
                source_type=VoteSourceType.QUESTION,
                source_id=UUID(str(question_id)),
                direction=direction,
                created_at=datetime.now(),
            )
            async with self.unit_of_work.atomic():
                saved_vote = await self.vote_repository.save(vote)

                applied = await self.question_repository.apply_vote(
                    question_id, saved_vote.id, direction
                )
                if not applied:
                    logfire.error(
                        "Question disappeared before vote was counted",
                        question_id=str(question_id),
                        vote_id=str(saved_vote.id),
                    )
                    raise NotFoundError("Question", str(question_id))

            logfire.info(
                "Vote cast",
                question_id=str(question_id),
                vote_id=str(saved_vote.id),
                direction=direction.value,
            )
            return saved_vote
