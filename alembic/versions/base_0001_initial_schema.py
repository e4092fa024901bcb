"""initial schema: player profile and answer log

Revision ID: base_0001
Revises:
Create Date: 2026-10-19 10:12:03.418220

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "base_0001"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "player_profile",
        sa.Column("id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("grade", sa.Integer(), nullable=False),
        sa.Column("points", sa.Integer(), nullable=False),
        sa.Column("avatar", sa.String(length=100), nullable=False),
        sa.CheckConstraint("id = 1", name="ck_player_profile_single_row"),
        sa.PrimaryKeyConstraint("id", name="pk_player_profile"),
    )
    op.create_table(
        "answer_log",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("category", sa.String(length=64), nullable=False),
        sa.Column("question", sa.Text(), nullable=False),
        sa.Column("correct_answer", sa.Float(), nullable=False),
        sa.Column("user_answer", sa.Float(), nullable=False),
        sa.Column("is_correct", sa.Boolean(), nullable=False),
        sa.Column("difficulty", sa.Integer(), nullable=False),
        sa.Column("streak_before", sa.Integer(), nullable=False),
        sa.Column("points_awarded", sa.Integer(), nullable=False),
    )
    op.create_index("ix_answer_log_created_at", "answer_log", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_answer_log_created_at", table_name="answer_log")
    op.drop_table("answer_log")
    op.drop_table("player_profile")
