"""Add answer use case."""

from uuid import UUID

from pydantic import BaseModel

from lighter.application.usecase.base import BaseUseCase
from lighter.application.usecase.question.common import AnswerResponse
from lighter.domain.service import AnswerService
from lighter.domain.value import QuestionId


class AddAnswerRequest(BaseModel):
    """Add answer request."""

    question_id: str  # UUID string
    content: str


class AddAnswerUseCase(BaseUseCase):
    """Use case for answering a question."""

    def __init__(self, answer_service: AnswerService) -> None:
        """Initialize add answer use case.

        Args:
            answer_service: Answer domain service
        """
        self.answer_service = answer_service

    async def execute(self, request: AddAnswerRequest) -> AnswerResponse:
        """Execute add answer flow.

        Args:
            request: Add answer request

        Returns:
            Created answer

        Raises:
            ValidationError: If content is blank
            NotFoundError: If the question does not exist
        """
        answer = await self.answer_service.add_answer(
            QuestionId(UUID(request.question_id)), request.content
        )
        return AnswerResponse.from_answer(answer)
