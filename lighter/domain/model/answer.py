"""Answer entity.

Answers are stored on their own and point at their question through
question_id. The question only keeps their ids, so an answer's lifecycle is
independent of the question document.
"""

from datetime import datetime

from pydantic import Field

from lighter.domain.model.common import DomainModel
from lighter.domain.value import AnswerId, QuestionId


class Answer(DomainModel):
    """Answer entity."""

    id: AnswerId
    question_id: QuestionId
    content: str = Field(min_length=1, max_length=50000)
    created_at: datetime = Field(default_factory=datetime.now)
