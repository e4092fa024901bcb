"""add session_stats

Revision ID: 8f14e6b2c0d7
Revises: 3c9d0a7e51b2
Create Date: 2026-10-19 14:05:51.662871

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "8f14e6b2c0d7"
down_revision: Union[str, Sequence[str], None] = "3c9d0a7e51b2"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "session_stats",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("category", sa.String(length=64), nullable=False),
        sa.Column("total_questions", sa.Integer(), nullable=False),
        sa.Column("correct_answers", sa.Integer(), nullable=False),
        sa.Column("points_earned", sa.Integer(), nullable=False),
    )
    op.create_index("ix_session_stats_completed_at", "session_stats", ["completed_at"])


def downgrade() -> None:
    op.drop_index("ix_session_stats_completed_at", table_name="session_stats")
    op.drop_table("session_stats")
