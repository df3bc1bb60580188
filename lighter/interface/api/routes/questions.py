"""Question routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field

from lighter.application.usecase.answer import AddAnswerRequest, AddAnswerUseCase
from lighter.application.usecase.question import (
    AddCommentRequest,
    AddCommentResponse,
    AddCommentUseCase,
    AnswerResponse,
    CreateQuestionRequest,
    CreateQuestionUseCase,
    GetQuestionRequest,
    GetQuestionUseCase,
    GetQuestionWithAnswersRequest,
    GetQuestionWithAnswersResponse,
    GetQuestionWithAnswersUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    QuestionResponse,
    UpdateQuestionRequest,
    UpdateQuestionResponse,
    UpdateQuestionUseCase,
)
from lighter.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from lighter.domain.error import NotFoundError, ValidationError
from lighter.domain.value import QuestionSortField, VoteDirection

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class CreateQuestionAPIRequest(BaseModel):
    """API request for creating a question."""

    title: str = Field(min_length=1, max_length=300)
    content: str = ""
    tags: list[str] = Field(default_factory=list)


class UpdateQuestionAPIRequest(BaseModel):
    """API request for a partial question update.

    summary is required by the domain; it is optional here so that a
    missing summary is reported as a 400 rather than a schema error.
    """

    title: str | None = None
    content: str | None = None
    tags: list[str] | None = None
    summary: str | None = None


class AnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    content: str


class CommentAPIRequest(BaseModel):
    """API request for commenting on a question."""

    content: str


@router.get("/{question_id}", response_model=QuestionResponse)
async def get_question(
    question_id: UUID,
    get_question_use_case: FromDishka[GetQuestionUseCase],
) -> QuestionResponse:
    """Get a question by ID.

    Args:
        question_id: Question UUID
        get_question_use_case: Get question use case from DI

    Returns:
        Question details

    Raises:
        HTTPException: If the question does not exist
    """
    try:
        question = await get_question_use_case.execute(
            GetQuestionRequest(question_id=str(question_id))
        )
    except Exception as e:
        logfire.error(
            "Unexpected error fetching question",
            question_id=str(question_id),
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch question",
        )

    if not question:
        logfire.warn("Question not found", question_id=str(question_id))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Question not found",
        )

    return question


@router.get("/{question_id}/answers", response_model=GetQuestionWithAnswersResponse)
async def get_question_with_answers(
    question_id: UUID,
    get_question_with_answers_use_case: FromDishka[GetQuestionWithAnswersUseCase],
) -> GetQuestionWithAnswersResponse:
    """Get a question together with all of its answers.

    Args:
        question_id: Question UUID
        get_question_with_answers_use_case: Use case from DI

    Returns:
        Question and its answers, oldest answer first

    Raises:
        HTTPException: If the question does not exist
    """
    try:
        result = await get_question_with_answers_use_case.execute(
            GetQuestionWithAnswersRequest(question_id=str(question_id))
        )
    except Exception as e:
        logfire.error(
            "Unexpected error fetching question with answers",
            question_id=str(question_id),
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch question",
        )

    if not result:
        logfire.warn("Question not found", question_id=str(question_id))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Question not found",
        )

    return result


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    tags: list[str] | None = Query(default=None),
    sort: str = QuestionSortField.CREATED_AT.value,
    skip: int = 0,
    limit: int | None = None,
) -> ListQuestionsResponse:
    """List questions, optionally filtered by tags.

    Args:
        list_questions_use_case: List questions use case from DI
        tags: Return questions carrying any of these tags
        sort: Sort field (createdAt, viewCount or voteCount), descending
        skip: Number of questions to skip
        limit: Maximum number of questions to return

    Returns:
        Matching questions
    """
    try:
        return await list_questions_use_case.execute(
            ListQuestionsRequest(tags=tags or [], sort=sort, skip=skip, limit=limit)
        )
    except (ValidationError, ValueError) as e:
        logfire.warn("List questions validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error listing questions", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list questions",
        )


@router.post(
    "", response_model=QuestionResponse, status_code=status.HTTP_201_CREATED
)
async def create_question(
    request: CreateQuestionAPIRequest,
    create_question_use_case: FromDishka[CreateQuestionUseCase],
) -> QuestionResponse:
    """Create a new question.

    Args:
        request: Question creation data
        create_question_use_case: Create question use case from DI

    Returns:
        Created question

    Raises:
        HTTPException: If validation fails
    """
    try:
        return await create_question_use_case.execute(
            CreateQuestionRequest(
                title=request.title,
                content=request.content,
                tags=request.tags,
            )
        )
    except (ValidationError, ValueError) as e:
        logfire.warn("Question creation validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error creating question", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create question",
        )


@router.patch("/{question_id}", response_model=UpdateQuestionResponse)
async def update_question(
    question_id: UUID,
    request: UpdateQuestionAPIRequest,
    update_question_use_case: FromDishka[UpdateQuestionUseCase],
) -> UpdateQuestionResponse:
    """Partially update a question and record the edit summary as a comment.

    An unknown id is not an error; the response carries matched=false.

    Args:
        question_id: Question UUID
        request: Fields to change plus the required summary
        update_question_use_case: Update question use case from DI

    Returns:
        Whether a question matched

    Raises:
        HTTPException: If summary is missing or blank
    """
    try:
        return await update_question_use_case.execute(
            UpdateQuestionRequest(
                question_id=str(question_id),
                title=request.title,
                content=request.content,
                tags=request.tags,
                summary=request.summary,
            )
        )
    except (ValidationError, ValueError) as e:
        logfire.warn("Question update validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error updating question", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update question",
        )


@router.post("/{question_id}/answer", response_model=AnswerResponse)
async def add_answer(
    question_id: UUID,
    request: AnswerAPIRequest,
    add_answer_use_case: FromDishka[AddAnswerUseCase],
) -> AnswerResponse:
    """Answer a question.

    Args:
        question_id: Question UUID
        request: Answer content
        add_answer_use_case: Add answer use case from DI

    Returns:
        Created answer

    Raises:
        HTTPException: If the question does not exist or content is blank
    """
    try:
        return await add_answer_use_case.execute(
            AddAnswerRequest(question_id=str(question_id), content=request.content)
        )
    except NotFoundError as e:
        logfire.warn("Answer for missing question", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Question not found",
        )
    except (ValidationError, ValueError) as e:
        logfire.warn("Answer validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error adding answer", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to add answer",
        )


@router.post("/{question_id}/comment", response_model=AddCommentResponse)
async def add_comment(
    question_id: UUID,
    request: CommentAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
) -> AddCommentResponse:
    """Comment on a question.

    Args:
        question_id: Question UUID
        request: Comment content
        add_comment_use_case: Add comment use case from DI

    Returns:
        Whether a question matched

    Raises:
        HTTPException: If content is blank
    """
    try:
        return await add_comment_use_case.execute(
            AddCommentRequest(question_id=str(question_id), content=request.content)
        )
    except (ValidationError, ValueError) as e:
        logfire.warn("Comment validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error adding comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to add comment",
        )


async def _cast_vote(
    question_id: UUID, direction: VoteDirection, cast_vote_use_case: CastVoteUseCase
) -> CastVoteResponse:
    try:
        return await cast_vote_use_case.execute(
            CastVoteRequest(question_id=str(question_id), direction=direction)
        )
    except NotFoundError as e:
        logfire.warn("Vote for missing question", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Question not found",
        )
    except Exception as e:
        logfire.error(
            "Unexpected error casting vote", direction=direction.value, error=str(e)
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to cast vote",
        )


@router.post("/{question_id}/up", response_model=CastVoteResponse)
async def vote_up(
    question_id: UUID,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
) -> CastVoteResponse:
    """Vote a question up."""
    return await _cast_vote(question_id, VoteDirection.UP, cast_vote_use_case)


@router.post("/{question_id}/down", response_model=CastVoteResponse)
async def vote_down(
    question_id: UUID,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
) -> CastVoteResponse:
    """Vote a question down."""
    return await _cast_vote(question_id, VoteDirection.DOWN, cast_vote_use_case)
