"""In-memory answer repository for testing."""

from typing import Optional

from lighter.domain.model import Answer
from lighter.domain.repository import AnswerRepository
from lighter.domain.value import AnswerId, QuestionId


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self) -> None:
        self._answers: dict[AnswerId, Answer] = {}

    def snapshot(self) -> dict[AnswerId, Answer]:
        return dict(self._answers)

    def restore(self, state: dict[AnswerId, Answer]) -> None:
        self._answers = dict(state)

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        return self._answers.get(answer_id)

    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find all answers for a question, oldest first."""
        answers = [a for a in self._answers.values() if a.question_id == question_id]
        answers.sort(key=lambda a: a.created_at)
        return answers

    async def save(self, answer: Answer) -> Answer:
        """Insert an answer."""
        self._answers[answer.id] = answer
        return answer
