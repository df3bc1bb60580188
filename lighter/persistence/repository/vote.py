"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from lighter.domain.model import Vote
from lighter.domain.repository import VoteRepository
from lighter.domain.value import VoteId, VoteSourceType
from lighter.persistence.mappers import row_to_vote, vote_to_dict
from lighter.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        stmt = select(votes_table).where(votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_source(
        self, source_type: VoteSourceType, source_id: UUID
    ) -> List[Vote]:
        """Find all votes cast on an item, oldest first."""
        stmt = (
            select(votes_table)
            .where(
                and_(
                    votes_table.c.source_type == source_type.value,
                    votes_table.c.source_id == source_id,
                )
            )
            .order_by(votes_table.c.created_at, votes_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def save(self, vote: Vote) -> Vote:
        """Append a vote to the ledger."""
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        await self.session.execute(stmt)
        await self.session.flush()
        return vote
