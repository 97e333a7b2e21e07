from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy import Date, ForeignKey, Integer, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column

from fleet_tracker.infra.db.models.base import Base


class MaintenanceHistoryRow(Base):
    __tablename__ = "maintenance_history"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    car_id: Mapped[int] = mapped_column(
        ForeignKey("cars.id", ondelete="CASCADE"), nullable=False, index=True
    )
    maintenance_type_id: Mapped[int] = mapped_column(
        ForeignKey("maintenance_types.id"), nullable=False
    )
    maintenance_date: Mapped[date] = mapped_column(Date, nullable=False)
    maintenance_kilometers: Mapped[int] = mapped_column(Integer, nullable=False)
    recurrency: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    cost: Mapped[Decimal | None] = mapped_column(Numeric(precision=10, scale=2), nullable=True)
    observation: Mapped[str | None] = mapped_column(Text, nullable=True)
