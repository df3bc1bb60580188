"""Domain value objects for Lighter."""

from lighter.domain.value.identifiers import AnswerId, QuestionId, VoteId
from lighter.domain.value.types import (
    QuestionSortField,
    TagName,
    VoteDirection,
    VoteSourceType,
)

__all__ = [
    # Identifiers
    "QuestionId",
    "AnswerId",
    "VoteId",
    # Types
    "TagName",
    "QuestionSortField",
    "VoteDirection",
    "VoteSourceType",
]
