from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy import Date, ForeignKey, Integer, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column

from fleet_tracker.infra.db.models.base import Base


class OilChangeRow(Base):
    __tablename__ = "oil_change_history"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    car_id: Mapped[int] = mapped_column(
        ForeignKey("cars.id", ondelete="CASCADE"), nullable=False, index=True
    )
    oil_change_date: Mapped[date] = mapped_column(Date, nullable=False)
    oil_change_kilometers: Mapped[int] = mapped_column(Integer, nullable=False)
    liters_quantity: Mapped[Decimal] = mapped_column(Numeric(precision=6, scale=2), nullable=False)
    price_per_liter: Mapped[Decimal] = mapped_column(
        Numeric(precision=10, scale=2), nullable=False
    )
    total_cost: Mapped[Decimal] = mapped_column(Numeric(precision=10, scale=2), nullable=False)
    observation: Mapped[str | None] = mapped_column(Text, nullable=True)
