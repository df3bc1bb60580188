"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from lighter.domain.model import Answer
from lighter.domain.value import AnswerId, QuestionId


class AnswerRepository(ABC):
    """Repository for Answer entity.

    Answers are insert-only.
    """

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find all answers for a question, oldest first.

        Args:
            question_id: The question ID

        Returns:
            List of answers referencing the question
        """
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Insert an answer.

        Args:
            answer: The answer to insert

        Returns:
            The inserted answer
        """
        pass
