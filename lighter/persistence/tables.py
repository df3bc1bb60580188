"""SQLAlchemy table definitions for Lighter.

The question table stores the whole aggregate in one row: embedded
comments as a JSONB array, answer and vote references as UUID arrays.
That keeps every aggregate mutation a single-row UPDATE.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import Column, Enum, Index, Integer, MetaData, String, Table, Text
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# QUESTIONS TABLE (aggregate root, denormalized)
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", String(300), nullable=False),
    Column("content", Text, nullable=False, server_default=""),
    Column("tags", ARRAY(String(50)), nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("view_count", Integer, nullable=False, server_default="0"),
    Column("vote_count", Integer, nullable=False, server_default="0"),
    Column("comments", JSONB, nullable=False, server_default="[]"),
    Column("answers", ARRAY(UUID(as_uuid=True)), nullable=False, server_default="{}"),
    Column("vote_ups", ARRAY(UUID(as_uuid=True)), nullable=False, server_default="{}"),
    Column(
        "vote_downs", ARRAY(UUID(as_uuid=True)), nullable=False, server_default="{}"
    ),
)

Index("idx_questions_created_at", questions_table.c.created_at.desc())
Index("idx_questions_vote_count", questions_table.c.vote_count.desc())
Index("idx_questions_view_count", questions_table.c.view_count.desc())
Index("idx_questions_tags", questions_table.c.tags, postgresql_using="gin")

# ============================================================================
# ANSWERS TABLE
# ============================================================================
# No foreign key to questions: answers live in their own store and only
# reference their question by id.
answers_table = Table(
    "answers",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("question_id", UUID(as_uuid=True), nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_answers_question_id", answers_table.c.question_id)

# ============================================================================
# VOTES TABLE (append-only ledger)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "source_type",
        Enum("question", name="vote_source_type", create_type=False),
        nullable=False,
    ),
    Column("source_id", UUID(as_uuid=True), nullable=False),
    Column(
        "direction",
        Enum("up", "down", name="vote_direction", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_votes_source", votes_table.c.source_type, votes_table.c.source_id)
