"""Test configuration and fixtures."""

from datetime import datetime
from uuid import uuid4

from lighter.domain.model import Question
from lighter.domain.value import QuestionId, TagName


def make_question(
    title: str = "How do I borrow twice?",
    tags: list[str] | None = None,
    created_at: datetime | None = None,
    **fields,
) -> Question:
    """Build a question with sensible defaults for tests.

    Args:
        title: Question title
        tags: Tag names
        created_at: Creation time (defaults to now)
        **fields: Any other Question field

    Returns:
        Question with a fresh id
    """
    return Question(
        id=QuestionId(uuid4()),
        title=title,
        content=fields.pop("content", "Body text"),
        tags=[TagName(t) for t in tags or []],
        created_at=created_at or datetime.now(),
        **fields,
    )
