from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from fleet_tracker.infra.db.models.base import Base


class CarRow(Base):
    __tablename__ = "cars"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    make: Mapped[str] = mapped_column(String(50), nullable=False)
    model: Mapped[str] = mapped_column(String(50), nullable=False)
    license_plate: Mapped[str] = mapped_column(String(20), nullable=False)

    current_kilometers: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # Kilometer marks at which the next service is due
    next_tire_change: Mapped[int | None] = mapped_column(Integer, nullable=True)
    is_next_tire_change_bigger: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
    next_oil_change: Mapped[int | None] = mapped_column(Integer, nullable=True)
    is_next_oil_change_bigger: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )

    driver_id: Mapped[int | None] = mapped_column(
        ForeignKey("drivers.id", ondelete="SET NULL"), nullable=True
    )
    status: Mapped[str] = mapped_column(String(10), nullable=False, default="active")

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
