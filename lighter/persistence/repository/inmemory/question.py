"""In-memory question repository for testing."""

from typing import Optional, Sequence

from lighter.domain.model import Comment, Question, QuestionUpdate
from lighter.domain.repository import QuestionRepository
from lighter.domain.value import (
    AnswerId,
    QuestionId,
    QuestionSortField,
    TagName,
    VoteDirection,
    VoteId,
)


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing.

    Mutations never await between reading and replacing a question, so each
    one is atomic on the event loop.
    """

    def __init__(self) -> None:
        self._questions: dict[QuestionId, Question] = {}

    def snapshot(self) -> dict[QuestionId, Question]:
        return dict(self._questions)

    def restore(self, state: dict[QuestionId, Question]) -> None:
        self._questions = dict(state)

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._questions.get(question_id)

    async def find_all(
        self,
        tags: Optional[Sequence[TagName]] = None,
        sort: QuestionSortField = QuestionSortField.CREATED_AT,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Question]:
        """Find questions carrying any of the given tags."""
        questions = list(self._questions.values())

        if tags:
            wanted = {t.root for t in tags}
            questions = [q for q in questions if wanted & {t.root for t in q.tags}]

        questions.sort(key=lambda q: (getattr(q, sort.column), q.id), reverse=True)

        return questions[offset : offset + limit]

    async def iter_ids(self, limit: int, offset: int = 0) -> list[QuestionId]:
        """List question ids in creation order."""
        ordered = sorted(self._questions.values(), key=lambda q: (q.created_at, q.id))
        return [q.id for q in ordered[offset : offset + limit]]

    async def create(self, question: Question) -> Question:
        """Insert a new question."""
        self._questions[question.id] = question
        return question

    async def apply_update(
        self, question_id: QuestionId, update: QuestionUpdate
    ) -> bool:
        """Set selected fields and append the comment."""
        question = self._questions.get(question_id)
        if question is None:
            return False

        self._questions[question_id] = update.apply_to(question)
        return True

    async def push_comment(self, question_id: QuestionId, comment: Comment) -> bool:
        """Append a comment."""
        question = self._questions.get(question_id)
        if question is None:
            return False

        self._questions[question_id] = question.model_copy(
            update={"comments": [*question.comments, comment]}
        )
        return True

    async def push_answer(self, question_id: QuestionId, answer_id: AnswerId) -> bool:
        """Append an answer reference."""
        question = self._questions.get(question_id)
        if question is None:
            return False

        self._questions[question_id] = question.model_copy(
            update={"answers": [*question.answers, answer_id]}
        )
        return True

    async def apply_vote(
        self, question_id: QuestionId, vote_id: VoteId, direction: VoteDirection
    ) -> bool:
        """Adjust vote_count and the matching id set."""
        question = self._questions.get(question_id)
        if question is None:
            return False

        field = "vote_ups" if direction == VoteDirection.UP else "vote_downs"
        ids = getattr(question, field)
        self._questions[question_id] = question.model_copy(
            update={
                "vote_count": question.vote_count + direction.delta,
                field: ids if vote_id in ids else [*ids, vote_id],
            }
        )
        return True

    async def replace_derived(
        self,
        question_id: QuestionId,
        vote_count: int,
        vote_ups: Sequence[VoteId],
        vote_downs: Sequence[VoteId],
        answers: Sequence[AnswerId],
    ) -> bool:
        """Overwrite ledger-derived fields."""
        question = self._questions.get(question_id)
        if question is None:
            return False

        self._questions[question_id] = question.model_copy(
            update={
                "vote_count": vote_count,
                "vote_ups": list(vote_ups),
                "vote_downs": list(vote_downs),
                "answers": list(answers),
            }
        )
        return True
