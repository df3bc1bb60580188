"""List questions use case."""

from pydantic import BaseModel, Field

from lighter.config import ListingSettings
from lighter.domain.error import ValidationError
from lighter.domain.service import QuestionService
from lighter.domain.value import QuestionSortField

from .common import QuestionResponse


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    tags: list[str] = Field(default_factory=list)  # Match any of these tags
    sort: str = QuestionSortField.CREATED_AT.value
    skip: int = 0
    limit: int | None = None  # None means the configured default


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    questions: list[QuestionResponse]
    sort: str
    skip: int
    limit: int


class ListQuestionsUseCase:
    """Use case for listing questions with tag filtering and pagination."""

    def __init__(
        self, question_service: QuestionService, listing_settings: ListingSettings
    ) -> None:
        """Initialize list questions use case.

        Args:
            question_service: Question domain service
            listing_settings: Pagination defaults and limits
        """
        self.question_service = question_service
        self.listing_settings = listing_settings

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Args:
            request: Filters, sort field and pagination

        Returns:
            Matching questions

        Raises:
            ValidationError: If sort field or pagination is invalid
        """
        limit = (
            request.limit
            if request.limit is not None
            else self.listing_settings.default_limit
        )
        if limit > self.listing_settings.max_limit:
            raise ValidationError(
                f"limit must not exceed {self.listing_settings.max_limit}"
            )

        questions = await self.question_service.list_questions(
            tags=request.tags,
            sort=request.sort,
            skip=request.skip,
            limit=limit,
        )

        return ListQuestionsResponse(
            questions=[QuestionResponse.from_question(q) for q in questions],
            sort=request.sort,
            skip=request.skip,
            limit=limit,
        )
