"""Question domain service."""

from datetime import datetime
from typing import Optional, Sequence
from uuid import uuid4

import logfire

from lighter.domain.error import ValidationError
from lighter.domain.model import (
    Comment,
    Question,
    QuestionUpdate,
    QuestionWithAnswers,
)
from lighter.domain.repository import AnswerRepository, QuestionRepository
from lighter.domain.value import QuestionId, QuestionSortField, TagName

from .base import Service


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository

    async def get_question(self, question_id: QuestionId) -> Question | None:
        """Get a question by ID.

        Args:
            question_id: Question ID

        Returns:
            Question if found, None otherwise
        """
        with logfire.span("question_service.get_question", question_id=str(question_id)):
            question = await self.question_repository.find_by_id(question_id)

            if question:
                logfire.info("Question found", question_id=str(question_id))
            else:
                logfire.warn("Question not found", question_id=str(question_id))

            return question

    async def get_question_with_answers(
        self, question_id: QuestionId
    ) -> QuestionWithAnswers | None:
        """Get a question together with all answers that reference it.

        A question without answers is returned with an empty answer list;
        only a missing question yields None.

        Args:
            question_id: Question ID

        Returns:
            Question and its answers if found, None otherwise
        """
        with logfire.span(
            "question_service.get_question_with_answers", question_id=str(question_id)
        ):
            question = await self.question_repository.find_by_id(question_id)
            if question is None:
                logfire.warn("Question not found", question_id=str(question_id))
                return None

            answers = await self.answer_repository.find_by_question(question_id)
            logfire.info(
                "Question joined with answers",
                question_id=str(question_id),
                answer_count=len(answers),
            )
            return QuestionWithAnswers(question=question, answers=answers)

    async def list_questions(
        self,
        tags: Optional[Sequence[str]] = None,
        sort: QuestionSortField | str = QuestionSortField.CREATED_AT,
        skip: int = 0,
        limit: int = 10,
    ) -> list[Question]:
        """List questions having any of the given tags, newest/highest first.

        Args:
            tags: Tag filter (None or empty matches all questions)
            sort: Sort field name; must be one of QuestionSortField
            skip: Number of questions to skip
            limit: Maximum number of questions to return

        Returns:
            Matching questions sorted descending by the sort field

        Raises:
            ValidationError: If the sort field is unknown or pagination is invalid
        """
        try:
            sort_field = QuestionSortField(sort)
        except ValueError:
            allowed = ", ".join(f.value for f in QuestionSortField)
            raise ValidationError(f"Cannot sort by '{sort}'; expected one of: {allowed}")

        if skip < 0:
            raise ValidationError("skip must be non-negative")
        if limit < 1:
            raise ValidationError("limit must be positive")

        tag_filter = [TagName(t) for t in tags] if tags else None

        with logfire.span(
            "question_service.list_questions",
            tags=list(tags) if tags else None,
            sort=sort_field.value,
            skip=skip,
            limit=limit,
        ):
            questions = await self.question_repository.find_all(
                tags=tag_filter, sort=sort_field, limit=limit, offset=skip
            )
            logfire.info("Questions listed", count=len(questions))
            return questions

    async def create_question(
        self, title: str, content: str = "", tags: Optional[Sequence[str]] = None
    ) -> Question:
        """Create a question with a fresh id and empty collections.

        Args:
            title: Question title
            content: Question body
            tags: Tag names (duplicates are dropped)

        Returns:
            Created question

        Raises:
            ValueError: If the title is blank or a field exceeds its limit
        """
        question = Question(
            id=QuestionId(uuid4()),
            title=title,
            content=content,
            tags=[TagName(t) for t in tags or []],
            created_at=datetime.now(),
        )

        with logfire.span(
            "question_service.create_question",
            question_id=str(question.id),
            title=question.title,
        ):
            saved = await self.question_repository.create(question)
            logfire.info("Question created", question_id=str(saved.id))
            return saved

    async def update_question(
        self,
        question_id: QuestionId,
        summary: Optional[str],
        title: Optional[str] = None,
        content: Optional[str] = None,
        tags: Optional[Sequence[str]] = None,
    ) -> bool:
        """Apply a partial update and record its summary as a comment.

        Only non-blank text fields and non-empty tags are written. The
        summary comment is always appended, in the same store operation as
        the field changes.

        Args:
            question_id: Question ID
            summary: Required explanation of the change
            title: New title, or None/blank to keep the current one
            content: New content, or None/blank to keep the current one
            tags: New tags, or None/empty to keep the current ones

        Returns:
            True if the question was updated, False if no question matched
            (nothing is written or created in that case)

        Raises:
            ValidationError: If summary is missing or blank
            ValueError: If a present field exceeds the question's limits
        """
        update = QuestionUpdate.from_request(
            summary=summary,
            title=title,
            content=content,
            tags=list(tags) if tags is not None else None,
        )

        with logfire.span(
            "question_service.update_question",
            question_id=str(question_id),
            fields=sorted(update.changed_fields()),
        ):
            matched = await self.question_repository.apply_update(question_id, update)

            if matched:
                logfire.info("Question updated", question_id=str(question_id))
            else:
                logfire.warn(
                    "Question update matched nothing", question_id=str(question_id)
                )

            return matched

    async def add_comment(self, question_id: QuestionId, content: str) -> bool:
        """Append a comment to a question.

        Args:
            question_id: Question ID
            content: Comment text

        Returns:
            True if the comment was appended, False if no question matched

        Raises:
            ValidationError: If content is blank
        """
        if content is None or not content.strip():
            raise ValidationError("Comment content is required")

        comment = Comment(content=content, created_at=datetime.now())

        with logfire.span("question_service.add_comment", question_id=str(question_id)):
            matched = await self.question_repository.push_comment(question_id, comment)

            if matched:
                logfire.info("Comment added", question_id=str(question_id))
            else:
                logfire.warn(
                    "Comment target question not found", question_id=str(question_id)
                )

            return matched
