"""Add comment use case."""

from uuid import UUID

from pydantic import BaseModel

from lighter.domain.service import QuestionService
from lighter.domain.value import QuestionId


class AddCommentRequest(BaseModel):
    """Add comment request."""

    question_id: str  # UUID string
    content: str


class AddCommentResponse(BaseModel):
    """Add comment response."""

    question_id: str
    matched: bool


class AddCommentUseCase:
    """Use case for commenting on a question."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize add comment use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: AddCommentRequest) -> AddCommentResponse:
        """Execute add comment flow.

        Args:
            request: Add comment request

        Returns:
            Whether a question matched

        Raises:
            ValidationError: If content is blank
        """
        matched = await self.question_service.add_comment(
            QuestionId(UUID(request.question_id)), request.content
        )
        return AddCommentResponse(question_id=request.question_id, matched=matched)
