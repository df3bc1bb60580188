"""Get question with answers use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from lighter.domain.service import QuestionService
from lighter.domain.value import QuestionId

from .common import AnswerResponse, QuestionResponse


class GetQuestionWithAnswersRequest(BaseModel):
    """Get question with answers request."""

    question_id: str  # UUID string


class GetQuestionWithAnswersResponse(BaseModel):
    """A question and every answer that references it."""

    question: QuestionResponse
    answers: list[AnswerResponse]


class GetQuestionWithAnswersUseCase:
    """Use case for retrieving a question joined with its answers."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(
        self, request: GetQuestionWithAnswersRequest
    ) -> Optional[GetQuestionWithAnswersResponse]:
        """Execute the join.

        Args:
            request: Request with the question ID

        Returns:
            Question and answers if the question exists, None otherwise
        """
        result = await self.question_service.get_question_with_answers(
            QuestionId(UUID(request.question_id))
        )
        if result is None:
            return None

        return GetQuestionWithAnswersResponse(
            question=QuestionResponse.from_question(result.question),
            answers=[AnswerResponse.from_answer(a) for a in result.answers],
        )
