"""initial_schema

Create the schema for Quorum:
- Users (provisioned by the identity service)
- Questions and answers, each carrying their voter/liker arrays and a
  version for optimistic reaction writes
- Comments on a question or an answer
- Notifications (the per-user inbox)

Revision ID: 3f2c9d1e7a40
Revises:
Create Date: 2026-10-19 10:12:44.512093

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f2c9d1e7a40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def _reaction_columns() -> list[sa.Column]:
    return [
        sa.Column(
            "upvoters",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column(
            "downvoters",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column(
            "likers", postgresql.ARRAY(sa.UUID()), nullable=False, server_default="{}"
        ),
        sa.Column("vote_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("like_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("version", sa.Integer(), nullable=False, server_default="0"),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column("reputation", sa.Integer(), nullable=False, server_default="0"),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username", name="uq_users_username"),
    )

    # ========================================================================
    # QUESTIONS table
    # ========================================================================
    op.create_table(
        "questions",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column(
            "tags",
            postgresql.ARRAY(sa.String(50)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("answer_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("accepted_answer_id", sa.UUID(), nullable=True),
        *_reaction_columns(),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(
            ["author_id"],
            ["users.id"],
            ondelete="CASCADE",
            name="fk_questions_author_id",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("views >= 0", name="check_question_views"),
        sa.CheckConstraint("answer_count >= 0", name="check_question_answer_count"),
    )
    op.create_index(
        "idx_questions_created_at", "questions", [sa.text("created_at DESC")]
    )
    op.create_index(
        "idx_questions_vote_count", "questions", [sa.text("vote_count DESC")]
    )
    op.create_index("idx_questions_views", "questions", [sa.text("views DESC")])
    op.create_index(
        "idx_questions_like_count", "questions", [sa.text("like_count DESC")]
    )
    op.create_index("idx_questions_author_id", "questions", ["author_id"])

    # ========================================================================
    # ANSWERS table
    # ========================================================================
    op.create_table(
        "answers",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("question_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column(
            "is_accepted", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column("accepted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("accepted_by", sa.UUID(), nullable=True),
        *_reaction_columns(),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(
            ["question_id"],
            ["questions.id"],
            ondelete="CASCADE",
            name="fk_answers_question_id",
        ),
        sa.ForeignKeyConstraint(
            ["author_id"],
            ["users.id"],
            ondelete="CASCADE",
            name="fk_answers_author_id",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "question_id", "author_id", name="uq_answers_question_author"
        ),
        sa.CheckConstraint(
            "is_accepted OR (accepted_at IS NULL AND accepted_by IS NULL)",
            name="check_answer_acceptance_fields",
        ),
    )
    op.create_index("idx_answers_question_id", "answers", ["question_id"])
    # Business rule: at most one accepted answer per question
    op.create_index(
        "uq_answers_one_accepted",
        "answers",
        ["question_id"],
        unique=True,
        postgresql_where=sa.text("is_accepted"),
    )

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("target_kind", sa.String(20), nullable=False),
        sa.Column("target_id", sa.UUID(), nullable=False),
        sa.Column("question_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(
            ["question_id"],
            ["questions.id"],
            ondelete="CASCADE",
            name="fk_comments_question_id",
        ),
        sa.ForeignKeyConstraint(
            ["author_id"],
            ["users.id"],
            ondelete="CASCADE",
            name="fk_comments_author_id",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "target_kind IN ('question', 'answer')",
            name="check_comment_target_kind",
        ),
        sa.CheckConstraint(
            "char_length(body) BETWEEN 2 AND 500",
            name="check_comment_body_length",
        ),
    )
    op.create_index("idx_comments_target", "comments", ["target_kind", "target_id"])
    op.create_index("idx_comments_question_id", "comments", ["question_id"])

    # ========================================================================
    # NOTIFICATIONS table
    # ========================================================================
    op.create_table(
        "notifications",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("seq", sa.BigInteger(), sa.Identity(), nullable=False),
        sa.Column("recipient_id", sa.UUID(), nullable=False),
        sa.Column("type", sa.String(30), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("question_id", sa.UUID(), nullable=True),
        sa.Column("answer_id", sa.UUID(), nullable=True),
        sa.Column("comment_id", sa.UUID(), nullable=True),
        sa.Column("actor_id", sa.UUID(), nullable=True),
        sa.Column("is_read", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("read_at", sa.TIMESTAMP(timezone=True), nullable=True),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(
            ["recipient_id"],
            ["users.id"],
            ondelete="CASCADE",
            name="fk_notifications_recipient_id",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "is_read = (read_at IS NOT NULL)",
            name="check_notification_read_state",
        ),
    )
    op.create_index(
        "idx_notifications_recipient",
        "notifications",
        ["recipient_id", "is_read", sa.text("created_at DESC")],
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("notifications")
    op.drop_table("comments")
    op.drop_table("answers")
    op.drop_table("questions")
    op.drop_table("users")
