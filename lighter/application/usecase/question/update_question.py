"""Update question use case."""

from uuid import UUID

from pydantic import BaseModel

from lighter.domain.service import QuestionService
from lighter.domain.value import QuestionId


class UpdateQuestionRequest(BaseModel):
    """Update question request.

    Every field except summary is optional; omitted or blank fields keep
    their current value.
    """

    question_id: str  # UUID string
    title: str | None = None
    content: str | None = None
    tags: list[str] | None = None
    summary: str | None = None  # Required, checked by the domain


class UpdateQuestionResponse(BaseModel):
    """Update question response.

    matched is False when no question has the given id; nothing was
    written in that case.
    """

    question_id: str
    matched: bool


class UpdateQuestionUseCase:
    """Use case for partially updating a question."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize update question use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: UpdateQuestionRequest) -> UpdateQuestionResponse:
        """Execute update question flow.

        Args:
            request: Update question request

        Returns:
            Whether a question matched

        Raises:
            ValidationError: If summary is missing or blank
        """
        matched = await self.question_service.update_question(
            QuestionId(UUID(request.question_id)),
            summary=request.summary,
            title=request.title,
            content=request.content,
            tags=request.tags,
        )
        return UpdateQuestionResponse(question_id=request.question_id, matched=matched)
