"""Initial schema: users, flashcards, scheduling state, usage records, review submissions.

Revision ID: 001
Revises:
Create Date: 2026-10-17

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.DateTime(timezone=True),
        server_default=sa.text("(CURRENT_TIMESTAMP)"),
        nullable=False,
    )


def upgrade() -> None:
    """Create all tables."""
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("email", sa.String(100), nullable=False),
        sa.Column("hashed_password", sa.String(255), nullable=True),
        sa.Column("is_premium", sa.Boolean(), server_default=sa.false(), nullable=False),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_user_email"),
    )
    op.create_index(op.f("ix_users_id"), "users", ["id"], unique=False)

    op.create_table(
        "flashcards",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("statement", sa.Text(), nullable=False),
        sa.Column("hints", sa.Text(), nullable=True),
        sa.Column("proof", sa.Text(), nullable=False),
        sa.Column("tags", sa.JSON(), nullable=False),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_flashcards_id"), "flashcards", ["id"], unique=False)
    op.create_index(op.f("ix_flashcards_user_id"), "flashcards", ["user_id"], unique=False)

    op.create_table(
        "spaced_repetition_states",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("flashcard_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("interval", sa.Integer(), nullable=False),
        sa.Column("repetition_count", sa.Integer(), nullable=False),
        sa.Column("ease_factor", sa.Float(), nullable=False),
        sa.Column("due_date", sa.DateTime(timezone=True), nullable=False),
        _timestamp("updated_at"),
        sa.ForeignKeyConstraint(["flashcard_id"], ["flashcards.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "flashcard_id", "user_id", name="uq_spaced_repetition_flashcard_user"
        ),
    )
    op.create_index(
        op.f("ix_spaced_repetition_states_id"), "spaced_repetition_states", ["id"], unique=False
    )
    op.create_index(
        op.f("ix_spaced_repetition_states_flashcard_id"),
        "spaced_repetition_states",
        ["flashcard_id"],
        unique=False,
    )
    op.create_index(
        op.f("ix_spaced_repetition_states_user_id"),
        "spaced_repetition_states",
        ["user_id"],
        unique=False,
    )
    op.create_index(
        op.f("ix_spaced_repetition_states_due_date"),
        "spaced_repetition_states",
        ["due_date"],
        unique=False,
    )

    op.create_table(
        "usage_records",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("identity_key", sa.String(255), nullable=False),
        sa.Column("timestamps", sa.JSON(), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("identity_key"),
    )
    op.create_index(op.f("ix_usage_records_id"), "usage_records", ["id"], unique=False)

    op.create_table(
        "review_submissions",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("submission_id", sa.String(100), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("flashcard_id", sa.Integer(), nullable=False),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["flashcard_id"], ["flashcards.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "submission_id", name="uq_review_submission_user"),
    )
    op.create_index(op.f("ix_review_submissions_id"), "review_submissions", ["id"], unique=False)
    op.create_index(
        op.f("ix_review_submissions_user_id"), "review_submissions", ["user_id"], unique=False
    )
    op.create_index(
        op.f("ix_review_submissions_flashcard_id"),
        "review_submissions",
        ["flashcard_id"],
        unique=False,
    )


def downgrade() -> None:
    """Drop all tables."""
    op.drop_table("review_submissions")
    op.drop_table("usage_records")
    op.drop_table("spaced_repetition_states")
    op.drop_table("flashcards")
    op.drop_table("users")
