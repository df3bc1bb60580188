"""Vote entity.

Votes form an append-only ledger: they are written once and never updated
or deleted. The ledger is the source of truth for question vote counters.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from lighter.domain.model.common import DomainModel
from lighter.domain.value import VoteDirection, VoteId, VoteSourceType


class Vote(DomainModel):
    """Vote entity.

    Votes carry no voter identity, so repeated votes by the same person
    cannot be told apart.
    """

    id: VoteId
    source_type: VoteSourceType = VoteSourceType.QUESTION
    source_id: UUID  # QuestionId today; polymorphic on source_type
    direction: VoteDirection
    created_at: datetime = Field(default_factory=datetime.now)
