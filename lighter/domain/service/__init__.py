"""Domain services."""

from .answer_service import AnswerService
from .base import Service
from .question_service import QuestionService
from .reconcile_service import ReconcileReport, ReconcileService
from .vote_service import VoteService

__all__ = [
    "AnswerService",
    "QuestionService",
    "ReconcileReport",
    "ReconcileService",
    "Service",
    "VoteService",
]
