"""add language to player_profile

Revision ID: 3c9d0a7e51b2
Revises: base_0001
Create Date: 2026-10-19 11:40:27.905113

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3c9d0a7e51b2"
down_revision: Union[str, Sequence[str], None] = "base_0001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # empty string = device language
    op.add_column(
        "player_profile",
        sa.Column("language", sa.String(length=35), nullable=False, server_default=""),
    )


def downgrade() -> None:
    with op.batch_alter_table("player_profile") as batch:
        batch.drop_column("language")
