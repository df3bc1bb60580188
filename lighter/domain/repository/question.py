"""Question repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from lighter.domain.model import Comment, Question, QuestionUpdate
from lighter.domain.value import (
    AnswerId,
    QuestionId,
    QuestionSortField,
    TagName,
    VoteDirection,
    VoteId,
)


class QuestionRepository(ABC):
    """Repository for the Question aggregate.

    Every mutating method must be applied by the store as a single atomic
    operation on one question document. Mutations that match no question
    return False instead of raising.
    """

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        tags: Optional[Sequence[TagName]] = None,
        sort: QuestionSortField = QuestionSortField.CREATED_AT,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions carrying any of the given tags.

        Args:
            tags: Match questions with at least one of these tags
                (None or empty matches every question)
            sort: Field to sort by, descending
            limit: Maximum number of questions to return
            offset: Number of questions to skip

        Returns:
            List of questions matching the criteria
        """
        pass

    @abstractmethod
    async def iter_ids(self, limit: int, offset: int = 0) -> List[QuestionId]:
        """List question ids in creation order, for batch maintenance."""
        pass

    @abstractmethod
    async def create(self, question: Question) -> Question:
        """Insert a new question.

        Args:
            question: The question to insert

        Returns:
            The inserted question
        """
        pass

    @abstractmethod
    async def apply_update(
        self, question_id: QuestionId, update: QuestionUpdate
    ) -> bool:
        """Set the update's selected fields and append its comment at once.

        Args:
            question_id: The question to update
            update: Fields to set and the comment to append

        Returns:
            True if a question matched, False otherwise
        """
        pass

    @abstractmethod
    async def push_comment(self, question_id: QuestionId, comment: Comment) -> bool:
        """Append a comment to the question.

        Returns:
            True if a question matched, False otherwise
        """
        pass

    @abstractmethod
    async def push_answer(self, question_id: QuestionId, answer_id: AnswerId) -> bool:
        """Append an answer reference to the question.

        Returns:
            True if a question matched, False otherwise
        """
        pass

    @abstractmethod
    async def apply_vote(
        self, question_id: QuestionId, vote_id: VoteId, direction: VoteDirection
    ) -> bool:
        """Apply one ledger vote to the question's counters.

        Increments (Up) or decrements (Down) vote_count by one and adds
        vote_id to vote_ups or vote_downs unless already present. Both
        changes happen in one atomic store operation, so concurrent votes
        never lose increments.

        Returns:
            True if a question matched, False otherwise
        """
        pass

    @abstractmethod
    async def replace_derived(
        self,
        question_id: QuestionId,
        vote_count: int,
        vote_ups: Sequence[VoteId],
        vote_downs: Sequence[VoteId],
        answers: Sequence[AnswerId],
    ) -> bool:
        """Overwrite the fields derived from the vote ledger and answer store.

        Only used by reconciliation.

        Returns:
            True if a question matched, False otherwise
        """
        pass
