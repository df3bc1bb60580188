"""Application layer DI providers."""

from dishka import Scope, provide

from lighter.application.usecase.answer import AddAnswerUseCase
from lighter.application.usecase.question import (
    AddCommentUseCase,
    CreateQuestionUseCase,
    GetQuestionUseCase,
    GetQuestionWithAnswersUseCase,
    ListQuestionsUseCase,
    UpdateQuestionUseCase,
)
from lighter.application.usecase.vote import CastVoteUseCase
from lighter.config import ListingSettings
from lighter.domain.service import AnswerService, QuestionService, VoteService
from lighter.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_create_question_use_case(
        self, question_service: QuestionService
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(question_service=question_service)

    @provide(scope=Scope.REQUEST)
    def get_get_question_use_case(
        self, question_service: QuestionService
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(question_service=question_service)

    @provide(scope=Scope.REQUEST)
    def get_get_question_with_answers_use_case(
        self, question_service: QuestionService
    ) -> GetQuestionWithAnswersUseCase:
        """Provide get question with answers use case."""
        return GetQuestionWithAnswersUseCase(question_service=question_service)

    @provide(scope=Scope.REQUEST)
    def get_list_questions_use_case(
        self, question_service: QuestionService, listing_settings: ListingSettings
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(
            question_service=question_service, listing_settings=listing_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_update_question_use_case(
        self, question_service: QuestionService
    ) -> UpdateQuestionUseCase:
        """Provide update question use case."""
        return UpdateQuestionUseCase(question_service=question_service)

    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self, question_service: QuestionService
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(question_service=question_service)

    # Answer use cases
    @provide(scope=Scope.REQUEST)
    def get_add_answer_use_case(self, answer_service: AnswerService) -> AddAnswerUseCase:
        """Provide add answer use case."""
        return AddAnswerUseCase(answer_service=answer_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)
