"""Create fleet tables

Revision ID: 3c1f0a9e7b2d
Revises:
Create Date: 2026-10-19 09:12:40.118204

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9e7b2d"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "drivers",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("license_number", sa.String(length=50), nullable=False),
    )
    op.create_table(
        "maintenance_types",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=100), nullable=False, unique=True),
        sa.Column("description", sa.Text(), nullable=True),
    )
    op.create_table(
        "cars",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("make", sa.String(length=50), nullable=False),
        sa.Column("model", sa.String(length=50), nullable=False),
        sa.Column("license_plate", sa.String(length=20), nullable=False),
        sa.Column("current_kilometers", sa.Integer(), nullable=False),
        sa.Column("next_tire_change", sa.Integer(), nullable=True),
        sa.Column("is_next_tire_change_bigger", sa.Boolean(), nullable=False),
        sa.Column("next_oil_change", sa.Integer(), nullable=True),
        sa.Column("is_next_oil_change_bigger", sa.Boolean(), nullable=False),
        sa.Column(
            "driver_id",
            sa.Integer(),
            sa.ForeignKey("drivers.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("status", sa.String(length=10), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    )
    op.create_table(
        "car_maintenance_history",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "car_id",
            sa.Integer(),
            sa.ForeignKey("cars.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "maintenance_type_id",
            sa.Integer(),
            sa.ForeignKey("maintenance_types.id"),
            nullable=False,
        ),
        sa.Column("maintenance_date", sa.Date(), nullable=False),
        sa.Column("maintenance_kilometers", sa.Integer(), nullable=False),
        sa.Column("recurrency", sa.Integer(), nullable=False),
    )
    op.create_index(
        "ix_car_maintenance_history_car_id", "car_maintenance_history", ["car_id"]
    )
    op.create_table(
        "maintenance_history",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "car_id",
            sa.Integer(),
            sa.ForeignKey("cars.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "maintenance_type_id",
            sa.Integer(),
            sa.ForeignKey("maintenance_types.id"),
            nullable=False,
        ),
        sa.Column("maintenance_date", sa.Date(), nullable=False),
        sa.Column("maintenance_kilometers", sa.Integer(), nullable=False),
        sa.Column("recurrency", sa.Integer(), nullable=False),
        sa.Column("cost", sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column("observation", sa.Text(), nullable=True),
    )
    op.create_index("ix_maintenance_history_car_id", "maintenance_history", ["car_id"])
    op.create_table(
        "oil_change_history",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "car_id",
            sa.Integer(),
            sa.ForeignKey("cars.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("oil_change_date", sa.Date(), nullable=False),
        sa.Column("oil_change_kilometers", sa.Integer(), nullable=False),
        sa.Column("liters_quantity", sa.Numeric(precision=6, scale=2), nullable=False),
        sa.Column("price_per_liter", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column("total_cost", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column("observation", sa.Text(), nullable=True),
    )
    op.create_index("ix_oil_change_history_car_id", "oil_change_history", ["car_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_oil_change_history_car_id", table_name="oil_change_history")
    op.drop_table("oil_change_history")
    op.drop_index("ix_maintenance_history_car_id", table_name="maintenance_history")
    op.drop_table("maintenance_history")
    op.drop_index("ix_car_maintenance_history_car_id", table_name="car_maintenance_history")
    op.drop_table("car_maintenance_history")
    op.drop_table("cars")
    op.drop_table("maintenance_types")
    op.drop_table("drivers")
