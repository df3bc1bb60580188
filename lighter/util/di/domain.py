"""Domain layer DI providers."""

from dishka import Scope, provide

from lighter.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UnitOfWork,
    VoteRepository,
)
from lighter.domain.service import (
    AnswerService,
    QuestionService,
    ReconcileService,
    VoteService,
)
from lighter.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Every service in one request shares the same session. Writes that touch
    two stores run inside a UnitOfWork block so they roll back as a unit
    even when the route turns the error into a response.
    """

    scope = Scope.REQUEST

    @provide
    def get_question_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(
            question_repository=question_repository,
            answer_repository=answer_repository,
        )

    @provide
    def get_answer_service(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        unit_of_work: UnitOfWork,
    ) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(
            answer_repository=answer_repository,
            question_repository=question_repository,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        question_repository: QuestionRepository,
        unit_of_work: UnitOfWork,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            question_repository=question_repository,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_reconcile_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        vote_repository: VoteRepository,
    ) -> ReconcileService:
        """Provide aggregate reconciliation service."""
        return ReconcileService(
            question_repository=question_repository,
            answer_repository=answer_repository,
            vote_repository=vote_repository,
        )
