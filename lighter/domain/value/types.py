"""Domain value objects for Lighter.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from lighter.domain.value.common import RootValueObject


class VoteDirection(str, Enum):
    """Direction of a vote."""

    UP = "up"
    DOWN = "down"

    @property
    def delta(self) -> int:
        """Change applied to a vote counter by one vote in this direction."""
        return 1 if self is VoteDirection.UP else -1


class VoteSourceType(str, Enum):
    """Type of entity a vote refers to.

    Only questions can be voted on today.
    """

    QUESTION = "question"


class QuestionSortField(str, Enum):
    """Fields a question listing may be sorted by (always descending).

    Values are the names callers use on the wire; ``column`` is the
    storage field they map to.
    """

    CREATED_AT = "createdAt"
    VIEW_COUNT = "viewCount"
    VOTE_COUNT = "voteCount"

    @property
    def column(self) -> str:
        return {
            QuestionSortField.CREATED_AT: "created_at",
            QuestionSortField.VIEW_COUNT: "view_count",
            QuestionSortField.VOTE_COUNT: "vote_count",
        }[self]


class TagName(RootValueObject[str]):
    """Free-form tag attached to a question.

    Surrounding whitespace is stripped; the result must be 1-50 characters.
    Examples: 'python', 'asyncio', 'rust'
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag name length."""
        v = v.strip()
        if len(v) < 1 or len(v) > 50:
            raise ValueError("Tag name must be 1-50 characters")
        return v
