"""Repository interfaces for Lighter domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from lighter.domain.repository.answer import AnswerRepository
from lighter.domain.repository.question import QuestionRepository
from lighter.domain.repository.unit_of_work import UnitOfWork
from lighter.domain.repository.vote import VoteRepository

__all__ = [
    "QuestionRepository",
    "AnswerRepository",
    "VoteRepository",
    "UnitOfWork",
]
