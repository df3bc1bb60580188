"""Get question use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from lighter.domain.service import QuestionService
from lighter.domain.value import QuestionId

from .common import QuestionResponse


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str  # UUID string


class GetQuestionUseCase:
    """Use case for retrieving a question by ID."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize get question use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: GetQuestionRequest) -> Optional[QuestionResponse]:
        """Execute get question flow.

        Args:
            request: Get question request

        Returns:
            Question details if found, None otherwise
        """
        question = await self.question_service.get_question(
            QuestionId(UUID(request.question_id))
        )
        if question is None:
            return None

        return QuestionResponse.from_question(question)
