"""Domain model entities for Lighter."""

from lighter.domain.model.answer import Answer
from lighter.domain.model.question import (
    Comment,
    Question,
    QuestionUpdate,
    QuestionWithAnswers,
)
from lighter.domain.model.vote import Vote

__all__ = [
    "Question",
    "QuestionUpdate",
    "QuestionWithAnswers",
    "Comment",
    "Answer",
    "Vote",
]
