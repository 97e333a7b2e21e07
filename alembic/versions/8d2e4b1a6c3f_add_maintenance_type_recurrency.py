"""Add maintenance type recurrency

Revision ID: 8d2e4b1a6c3f
Revises: 3c1f0a9e7b2d
Create Date: 2026-10-19 16:40:05.502911

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "8d2e4b1a6c3f"
down_revision: Union[str, Sequence[str], None] = "3c1f0a9e7b2d"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.add_column(
        "maintenance_types",
        sa.Column("recurrency", sa.Integer(), nullable=False, server_default="0"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_column("maintenance_types", "recurrency")
