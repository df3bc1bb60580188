"""PostgreSQL repository implementations."""

from lighter.persistence.repository.answer import PostgresAnswerRepository
from lighter.persistence.repository.question import PostgresQuestionRepository
from lighter.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresQuestionRepository",
    "PostgresAnswerRepository",
    "PostgresVoteRepository",
]
