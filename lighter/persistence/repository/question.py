"""PostgreSQL implementation of Question repository.

Each mutation is a single UPDATE statement against one row, so PostgreSQL's
row-level atomicity covers the whole aggregate change. Counters are
incremented in SQL and array membership is checked in SQL; nothing is read
into Python and written back.
"""

from typing import Any, List, Optional, Sequence

import logfire
from sqlalchemy import any_, case, desc, func, insert, literal, select, update
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, UUID
from sqlalchemy.ext.asyncio import AsyncSession

from lighter.domain.model import Comment, Question, QuestionUpdate
from lighter.domain.repository import QuestionRepository
from lighter.domain.value import (
    AnswerId,
    QuestionId,
    QuestionSortField,
    TagName,
    VoteDirection,
    VoteId,
)
from lighter.persistence.mappers import (
    comment_to_json,
    question_to_dict,
    row_to_question,
)
from lighter.persistence.tables import questions_table

_UUID_ARRAY = ARRAY(UUID(as_uuid=True))


def _append_comment(comment: Comment) -> Any:
    """SQL expression appending one comment to the comments JSONB array."""
    return questions_table.c.comments.op("||", return_type=JSONB)(
        literal([comment_to_json(comment)], JSONB)
    )


def _add_to_set(column: Any, value: Any) -> Any:
    """SQL expression appending value to a UUID array unless already present."""
    param = literal(value, UUID(as_uuid=True))
    return case(
        (param == any_(column), column),
        else_=func.array_append(column, param, type_=_UUID_ARRAY),
    )


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _update_one(self, question_id: QuestionId, **values: Any) -> bool:
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(**values)
            .returning(questions_table.c.id)
        )
        result = await self.session.execute(stmt)
        matched = result.fetchone() is not None
        await self.session.flush()
        return matched

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        with logfire.span("question_repository.find_by_id", question_id=str(question_id)):
            stmt = select(questions_table).where(questions_table.c.id == question_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                return None

            return row_to_question(row._asdict())

    async def find_all(
        self,
        tags: Optional[Sequence[TagName]] = None,
        sort: QuestionSortField = QuestionSortField.CREATED_AT,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions carrying any of the given tags."""
        with logfire.span(
            "question_repository.find_all",
            tags=[t.root for t in tags] if tags else None,
            sort=sort.value,
            limit=limit,
            offset=offset,
        ):
            stmt = select(questions_table)

            if tags:
                stmt = stmt.where(questions_table.c.tags.overlap([t.root for t in tags]))

            # Column comes from the allow-listed enum, never from caller input
            sort_column = questions_table.c[sort.column]
            stmt = (
                stmt.order_by(desc(sort_column), desc(questions_table.c.id))
                .limit(limit)
                .offset(offset)
            )

            result = await self.session.execute(stmt)
            questions = [row_to_question(row._asdict()) for row in result.fetchall()]
            logfire.info("Found questions", count=len(questions))
            return questions

    async def iter_ids(self, limit: int, offset: int = 0) -> List[QuestionId]:
        """List question ids in creation order."""
        stmt = (
            select(questions_table.c.id)
            .order_by(questions_table.c.created_at, questions_table.c.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [QuestionId(row.id) for row in result.fetchall()]

    async def create(self, question: Question) -> Question:
        """Insert a new question."""
        with logfire.span("question_repository.create", question_id=str(question.id)):
            stmt = insert(questions_table).values(**question_to_dict(question))
            await self.session.execute(stmt)
            await self.session.flush()
            return question

    async def apply_update(
        self, question_id: QuestionId, update: QuestionUpdate
    ) -> bool:
        """Set selected fields and append the comment in one UPDATE."""
        values: dict[str, Any] = dict(update.changed_fields())
        if "tags" in values:
            values["tags"] = [t.root for t in values["tags"]]
        values["comments"] = _append_comment(update.comment)

        with logfire.span(
            "question_repository.apply_update",
            question_id=str(question_id),
            fields=sorted(values),
        ):
            return await self._update_one(question_id, **values)

    async def push_comment(self, question_id: QuestionId, comment: Comment) -> bool:
        """Append a comment in one UPDATE."""
        return await self._update_one(question_id, comments=_append_comment(comment))

    async def push_answer(self, question_id: QuestionId, answer_id: AnswerId) -> bool:
        """Append an answer reference in one UPDATE."""
        return await self._update_one(
            question_id,
            answers=func.array_append(
                questions_table.c.answers,
                literal(answer_id, UUID(as_uuid=True)),
                type_=_UUID_ARRAY,
            ),
        )

    async def apply_vote(
        self, question_id: QuestionId, vote_id: VoteId, direction: VoteDirection
    ) -> bool:
        """Adjust vote_count and the matching id set in one UPDATE."""
        set_column = (
            questions_table.c.vote_ups
            if direction == VoteDirection.UP
            else questions_table.c.vote_downs
        )
        with logfire.span(
            "question_repository.apply_vote",
            question_id=str(question_id),
            vote_id=str(vote_id),
            direction=direction.value,
        ):
            return await self._update_one(
                question_id,
                vote_count=questions_table.c.vote_count + direction.delta,
                **{set_column.name: _add_to_set(set_column, vote_id)},
            )

    async def replace_derived(
        self,
        question_id: QuestionId,
        vote_count: int,
        vote_ups: Sequence[VoteId],
        vote_downs: Sequence[VoteId],
        answers: Sequence[AnswerId],
    ) -> bool:
        """Overwrite ledger-derived fields in one UPDATE."""
        return await self._update_one(
            question_id,
            vote_count=vote_count,
            vote_ups=list(vote_ups),
            vote_downs=list(vote_downs),
            answers=list(answers),
        )
