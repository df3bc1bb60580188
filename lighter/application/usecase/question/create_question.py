"""Create question use case."""

import logfire
from pydantic import BaseModel, Field

from lighter.domain.service import QuestionService

from .common import QuestionResponse


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    title: str
    content: str = ""
    tags: list[str] = Field(default_factory=list)


class CreateQuestionUseCase:
    """Use case for creating a new question."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: CreateQuestionRequest) -> QuestionResponse:
        """Execute create question flow.

        Args:
            request: Create question request

        Returns:
            Created question with its new id

        Raises:
            ValueError: If title or tags fail validation
        """
        with logfire.span("create_question.execute", title=request.title):
            question = await self.question_service.create_question(
                title=request.title,
                content=request.content,
                tags=request.tags,
            )
            return QuestionResponse.from_question(question)
