"""Response models shared by question use cases."""

from datetime import datetime

from pydantic import BaseModel

from lighter.domain.model import Answer, Question


class CommentResponse(BaseModel):
    """Comment embedded in a question response."""

    content: str
    created_at: datetime


class AnswerResponse(BaseModel):
    """Answer details."""

    answer_id: str
    question_id: str
    content: str
    created_at: datetime

    @classmethod
    def from_answer(cls, answer: Answer) -> "AnswerResponse":
        return cls(
            answer_id=str(answer.id),
            question_id=str(answer.question_id),
            content=answer.content,
            created_at=answer.created_at,
        )


class QuestionResponse(BaseModel):
    """Question details."""

    question_id: str
    title: str
    content: str
    tags: list[str]
    created_at: datetime
    view_count: int
    vote_count: int
    comments: list[CommentResponse]
    answers: list[str]
    vote_ups: list[str]
    vote_downs: list[str]

    @classmethod
    def from_question(cls, question: Question) -> "QuestionResponse":
        return cls(
            question_id=str(question.id),
            title=question.title,
            content=question.content,
            tags=[tag.root for tag in question.tags],
            created_at=question.created_at,
            view_count=question.view_count,
            vote_count=question.vote_count,
            comments=[
                CommentResponse(content=c.content, created_at=c.created_at)
                for c in question.comments
            ],
            answers=[str(a) for a in question.answers],
            vote_ups=[str(v) for v in question.vote_ups],
            vote_downs=[str(v) for v in question.vote_downs],
        )
