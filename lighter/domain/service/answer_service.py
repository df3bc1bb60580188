"""Answer domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from lighter.domain.error import NotFoundError, ValidationError
from lighter.domain.model import Answer
from lighter.domain.repository import AnswerRepository, QuestionRepository, UnitOfWork
from lighter.domain.value import AnswerId, QuestionId

from .base import Service


class AnswerService(Service):
    """Domain service for answer operations."""

    def __init__(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            question_repository: Question repository
            unit_of_work: Keeps the answer record and its reference together
        """
        self.answer_repository = answer_repository
        self.question_repository = question_repository
        self.unit_of_work = unit_of_work

    async def add_answer(self, question_id: QuestionId, content: str) -> Answer:
        """Answer a question.

        The answer record is written first and then referenced from the
        question. Both writes share one atomic block, so a failed link
        discards the answer record too.

        Args:
            question_id: Question ID
            content: Answer text

        Returns:
            Created answer

        Raises:
            ValidationError: If content is blank
            NotFoundError: If the question does not exist
        """
        if content is None or not content.strip():
            raise ValidationError("Answer content is required")

        with logfire.span("answer_service.add_answer", question_id=str(question_id)):
            question = await self.question_repository.find_by_id(question_id)
            if question is None:
                logfire.warn("Answer on non-existent question", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))

            answer = Answer(
                id=AnswerId(uuid4()),
                question_id=question_id,
                content=content,
                created_at=datetime.now(),
            )
            async with self.unit_of_work.atomic():
                saved = await self.answer_repository.save(answer)

                linked = await self.question_repository.push_answer(question_id, saved.id)
                if not linked:
                    logfire.error(
                        "Question disappeared before answer was linked",
                        question_id=str(question_id),
                        answer_id=str(saved.id),
                    )
                    raise NotFoundError("Question", str(question_id))

            logfire.info(
                "Answer added", question_id=str(question_id), answer_id=str(saved.id)
            )
            return saved
