"""In-memory vote repository for testing."""

from typing import Optional
from uuid import UUID

from lighter.domain.model import Vote
from lighter.domain.repository import VoteRepository
from lighter.domain.value import VoteId, VoteSourceType


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[Vote] = []

    def snapshot(self) -> list[Vote]:
        return list(self._votes)

    def restore(self, state: list[Vote]) -> None:
        self._votes = list(state)

    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        for vote in self._votes:
            if vote.id == vote_id:
                return vote
        return None

    async def find_by_source(
        self, source_type: VoteSourceType, source_id: UUID
    ) -> list[Vote]:
        """Find all votes cast on an item, in ledger order."""
        source_uuid = UUID(str(source_id))
        return [
            v
            for v in self._votes
            if v.source_type == source_type and v.source_id == source_uuid
        ]

    async def save(self, vote: Vote) -> Vote:
        """Append a vote to the ledger."""
        self._votes.append(vote)
        return vote
