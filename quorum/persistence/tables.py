"""SQLAlchemy table definitions for Quorum.

These table definitions are used with SQLAlchemy Core and manual mappers.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Identity,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()


def _voter_columns() -> list[Column]:
    """Reaction columns shared by questions and answers.

    vote_count and like_count mirror the voter arrays so listings can sort
    on them; they are written together with the arrays in one UPDATE.
    """
    return [
        Column("upvoters", ARRAY(UUID), nullable=False, server_default="{}"),
        Column("downvoters", ARRAY(UUID), nullable=False, server_default="{}"),
        Column("likers", ARRAY(UUID), nullable=False, server_default="{}"),
        Column("vote_count", Integer, nullable=False, server_default="0"),
        Column("like_count", Integer, nullable=False, server_default="0"),
        Column("version", Integer, nullable=False, server_default="0"),
    ]


# ============================================================================
# USERS TABLE (provisioned by the identity service)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("username", String(50), nullable=False),
    Column("reputation", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    UniqueConstraint("username", name="uq_users_username"),
)

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("title", String(300), nullable=False),
    Column("body", Text, nullable=False),
    Column("tags", ARRAY(String(50)), nullable=False, server_default="{}"),
    Column(
        "author_id",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE", name="fk_questions_author_id"),
        nullable=False,
    ),
    Column("views", Integer, nullable=False, server_default="0"),
    Column("answer_count", Integer, nullable=False, server_default="0"),
    # No FK: answers reference questions, and acceptance is kept consistent
    # by the acceptance lock.
    Column("accepted_answer_id", UUID, nullable=True),
    *_voter_columns(),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    CheckConstraint("views >= 0", name="check_question_views"),
    CheckConstraint("answer_count >= 0", name="check_question_answer_count"),
)

Index("idx_questions_created_at", questions_table.c.created_at.desc())
Index("idx_questions_vote_count", questions_table.c.vote_count.desc())
Index("idx_questions_views", questions_table.c.views.desc())
Index("idx_questions_like_count", questions_table.c.like_count.desc())
Index("idx_questions_author_id", questions_table.c.author_id)

# ============================================================================
# ANSWERS TABLE
# ============================================================================
answers_table = Table(
    "answers",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE", name="fk_answers_question_id"),
        nullable=False,
    ),
    Column(
        "author_id",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE", name="fk_answers_author_id"),
        nullable=False,
    ),
    Column("body", Text, nullable=False),
    Column("is_accepted", Boolean, nullable=False, server_default="false"),
    Column("accepted_at", TIMESTAMP(timezone=True), nullable=True),
    Column("accepted_by", UUID, nullable=True),
    *_voter_columns(),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    UniqueConstraint("question_id", "author_id", name="uq_answers_question_author"),
    CheckConstraint(
        "is_accepted OR (accepted_at IS NULL AND accepted_by IS NULL)",
        name="check_answer_acceptance_fields",
    ),
)

Index("idx_answers_question_id", answers_table.c.question_id)
# At most one accepted answer per question
Index(
    "uq_answers_one_accepted",
    answers_table.c.question_id,
    unique=True,
    postgresql_where=text("is_accepted"),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("target_kind", String(20), nullable=False),
    Column("target_id", UUID, nullable=False),
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE", name="fk_comments_question_id"),
        nullable=False,
    ),
    Column(
        "author_id",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE", name="fk_comments_author_id"),
        nullable=False,
    ),
    Column("body", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    CheckConstraint(
        "target_kind IN ('question', 'answer')", name="check_comment_target_kind"
    ),
    CheckConstraint(
        "char_length(body) BETWEEN 2 AND 500", name="check_comment_body_length"
    ),
)

Index("idx_comments_target", comments_table.c.target_kind, comments_table.c.target_id)
Index("idx_comments_question_id", comments_table.c.question_id)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
# Related entity columns carry no FKs: notifications outlive deleted content.
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True),
    # Insert order, breaks created_at ties when listing the inbox
    Column("seq", BigInteger, Identity(), nullable=False),
    Column(
        "recipient_id",
        UUID,
        ForeignKey(
            "users.id", ondelete="CASCADE", name="fk_notifications_recipient_id"
        ),
        nullable=False,
    ),
    Column("type", String(30), nullable=False),
    Column("title", String(255), nullable=False),
    Column("message", Text, nullable=False),
    Column("question_id", UUID, nullable=True),
    Column("answer_id", UUID, nullable=True),
    Column("comment_id", UUID, nullable=True),
    Column("actor_id", UUID, nullable=True),
    Column("is_read", Boolean, nullable=False, server_default="false"),
    Column("read_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    CheckConstraint(
        "is_read = (read_at IS NOT NULL)", name="check_notification_read_state"
    ),
)

Index(
    "idx_notifications_recipient",
    notifications_table.c.recipient_id,
    notifications_table.c.is_read,
    notifications_table.c.created_at.desc(),
)
