from __future__ import annotations

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from fleet_tracker.infra.db.models.base import Base


class MaintenanceTypeRow(Base):
    __tablename__ = "maintenance_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    # Default kilometers between two services of this type, prefilled on new entries
    recurrency: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
