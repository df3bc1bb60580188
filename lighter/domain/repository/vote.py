"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from lighter.domain.model import Vote
from lighter.domain.value import VoteId, VoteSourceType


class VoteRepository(ABC):
    """Repository for the vote ledger.

    The ledger is append-only: there is deliberately no update or delete.
    """

    @abstractmethod
    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID.

        Args:
            vote_id: The vote's unique identifier

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_source(
        self, source_type: VoteSourceType, source_id: UUID
    ) -> List[Vote]:
        """Find all votes cast on an item, oldest first.

        Args:
            source_type: Type of item voted on
            source_id: ID of the item

        Returns:
            List of votes on the item
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Append a vote to the ledger.

        Args:
            vote: The vote to append

        Returns:
            The saved vote
        """
        pass
