"""Answer use cases."""

from .add_answer import AddAnswerRequest, AddAnswerUseCase

__all__ = [
    "AddAnswerRequest",
    "AddAnswerUseCase",
]
