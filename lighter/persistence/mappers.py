"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from lighter.domain.model import Answer, Comment, Question, Vote
from lighter.domain.value import (
    AnswerId,
    QuestionId,
    TagName,
    VoteDirection,
    VoteId,
    VoteSourceType,
)


def _uuid(value: UUID | str) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert database row to Question domain model.

    Args:
        row: Database row as dict

    Returns:
        Question domain model
    """
    return Question(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        content=row["content"],
        tags=[TagName(t) for t in row["tags"] or []],
        created_at=row["created_at"],
        view_count=row["view_count"],
        vote_count=row["vote_count"],
        comments=[Comment.model_validate(c) for c in row["comments"] or []],
        answers=[AnswerId(_uuid(a)) for a in row["answers"] or []],
        vote_ups=[VoteId(_uuid(v)) for v in row["vote_ups"] or []],
        vote_downs=[VoteId(_uuid(v)) for v in row["vote_downs"] or []],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict.

    Args:
        question: Question domain model

    Returns:
        Dict suitable for database insertion
    """
    data = question.model_dump()
    data["comments"] = [comment_to_json(c) for c in question.comments]
    return data


def comment_to_json(comment: Comment) -> Dict[str, Any]:
    """Convert an embedded Comment to its JSONB form."""
    return comment.model_dump(mode="json")


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model.

    Args:
        row: Database row as dict

    Returns:
        Answer domain model
    """
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        content=row["content"],
        created_at=row["created_at"],
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to database dict.

    Args:
        answer: Answer domain model

    Returns:
        Dict suitable for database insertion
    """
    return answer.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(_uuid(row["id"])),
        source_type=VoteSourceType(row["source_type"]),
        source_id=_uuid(row["source_id"]),
        direction=VoteDirection(row["direction"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    Args:
        vote: Vote domain model

    Returns:
        Dict suitable for database insertion
    """
    data = vote.model_dump()
    data["source_type"] = vote.source_type.value
    data["direction"] = vote.direction.value
    return data
