"""Question aggregate root.

A question is a denormalized, read-optimized document. Besides its own text
it embeds its comments, references its answers by id and carries a vote
counter together with the ledger ids of the votes that produced it.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from lighter.domain.error import ValidationError
from lighter.domain.model.answer import Answer
from lighter.domain.model.common import DomainModel
from lighter.domain.value import AnswerId, QuestionId, TagName, VoteId


def dedupe_tags(tags: list[TagName]) -> list[TagName]:
    """Drop repeated tags, keeping the first occurrence of each."""
    seen: set[str] = set()
    unique = []
    for tag in tags:
        if tag.root not in seen:
            seen.add(tag.root)
            unique.append(tag)
    return unique


class Comment(DomainModel):
    """Comment embedded in a question.

    Comments have no identity of their own and are never edited once
    appended.
    """

    content: str = Field(min_length=1, max_length=10000)
    created_at: datetime = Field(default_factory=datetime.now)

    @field_validator("content")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Comment content must not be blank")
        return v


class Question(DomainModel):
    """Question aggregate root.

    Invariants:
    - vote_count equals the number of Up ledger entries for this question
      minus the number of Down entries
    - vote_ups / vote_downs hold each ledger id at most once
    - comments and answers only ever grow
    """

    id: QuestionId
    title: str = Field(min_length=1, max_length=300)
    content: str = Field(default="", max_length=50000)
    tags: list[TagName] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    view_count: int = Field(default=0, ge=0)
    vote_count: int = 0
    comments: list[Comment] = Field(default_factory=list)
    answers: list[AnswerId] = Field(default_factory=list)
    vote_ups: list[VoteId] = Field(default_factory=list)
    vote_downs: list[VoteId] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Question title must not be blank")
        return v

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: list[TagName]) -> list[TagName]:
        """Store tags without duplicates."""
        return dedupe_tags(v)


class QuestionUpdate(DomainModel):
    """A sparse set of field changes plus the comment that explains them.

    Only fields that are not None are written; everything else on the
    question is left untouched. The comment is always appended. Present
    fields carry the same length limits as the question itself.
    """

    title: Optional[str] = Field(default=None, min_length=1, max_length=300)
    content: Optional[str] = Field(default=None, max_length=50000)
    tags: Optional[list[TagName]] = None
    comment: Comment

    @classmethod
    def from_request(
        cls,
        summary: Optional[str],
        title: Optional[str] = None,
        content: Optional[str] = None,
        tags: Optional[list[str]] = None,
    ) -> "QuestionUpdate":
        """Select the fields of an update request that should be written.

        Text fields count as absent when None or whitespace-only, tags when
        None or empty.

        Raises:
            ValidationError: If summary is missing or blank
            ValueError: If a present field breaks the question's limits
        """
        if summary is None or not summary.strip():
            raise ValidationError("summary is required")

        return cls(
            title=title if title is not None and title.strip() else None,
            content=content if content is not None and content.strip() else None,
            tags=dedupe_tags([TagName(t) for t in tags]) if tags else None,
            comment=Comment(content=summary, created_at=datetime.now()),
        )

    def changed_fields(self) -> dict[str, object]:
        """Field values to set, keyed by question attribute name."""
        fields: dict[str, object] = {}
        if self.title is not None:
            fields["title"] = self.title
        if self.content is not None:
            fields["content"] = self.content
        if self.tags is not None:
            fields["tags"] = self.tags
        return fields

    def apply_to(self, question: Question) -> Question:
        """Return the question as it looks after this update."""
        return question.model_copy(
            update={
                **self.changed_fields(),
                "comments": [*question.comments, self.comment],
            }
        )


class QuestionWithAnswers(DomainModel):
    """A question joined with every answer that references it."""

    question: Question
    answers: list[Answer] = Field(default_factory=list)
