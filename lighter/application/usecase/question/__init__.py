"""Question use cases."""

from .add_comment import AddCommentRequest, AddCommentResponse, AddCommentUseCase
from .common import AnswerResponse, CommentResponse, QuestionResponse
from .create_question import CreateQuestionRequest, CreateQuestionUseCase
from .get_question import GetQuestionRequest, GetQuestionUseCase
from .get_question_with_answers import (
    GetQuestionWithAnswersRequest,
    GetQuestionWithAnswersResponse,
    GetQuestionWithAnswersUseCase,
)
from .list_questions import (
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
)
from .update_question import (
    UpdateQuestionRequest,
    UpdateQuestionResponse,
    UpdateQuestionUseCase,
)

__all__ = [
    "AddCommentRequest",
    "AddCommentResponse",
    "AddCommentUseCase",
    "AnswerResponse",
    "CommentResponse",
    "CreateQuestionRequest",
    "CreateQuestionUseCase",
    "GetQuestionRequest",
    "GetQuestionUseCase",
    "GetQuestionWithAnswersRequest",
    "GetQuestionWithAnswersResponse",
    "GetQuestionWithAnswersUseCase",
    "ListQuestionsRequest",
    "ListQuestionsResponse",
    "ListQuestionsUseCase",
    "QuestionResponse",
    "UpdateQuestionRequest",
    "UpdateQuestionResponse",
    "UpdateQuestionUseCase",
]
