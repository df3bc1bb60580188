"""Cast vote use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from lighter.application.usecase.base import BaseUseCase
from lighter.domain.service import VoteService
from lighter.domain.value import QuestionId, VoteDirection


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    question_id: str  # UUID string
    direction: VoteDirection


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    vote_id: str
    question_id: str
    direction: VoteDirection
    created_at: datetime


class CastVoteUseCase(BaseUseCase):
    """Use case for voting a question up or down."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Recorded vote

        Raises:
            NotFoundError: If the question does not exist
        """
        vote = await self.vote_service.cast_vote(
            QuestionId(UUID(request.question_id)), request.direction
        )

        return CastVoteResponse(
            vote_id=str(vote.id),
            question_id=str(vote.source_id),
            direction=vote.direction,
            created_at=vote.created_at,
        )
