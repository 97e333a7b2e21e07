"""SQLAlchemy implementation of CarMaintenanceRepository."""

from __future__ import annotations

import logging

from sqlalchemy import delete, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fleet_tracker.domain.car_maintenance import CarMaintenanceEntry
from fleet_tracker.domain.errors import StoreUnavailable
from fleet_tracker.infra.db.models.car_maintenance import CarMaintenanceRow
from fleet_tracker.ports.car_maintenance_repository import CarMaintenanceRepository

logger = logging.getLogger(__name__)


class SqlCarMaintenanceRepository(CarMaintenanceRepository):
    """
    Writes car maintenance entries through the ORM.

    Changes are flushed immediately so generated ids and affected-row counts
    are known; the surrounding session (one per request) commits or rolls back.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def add(self, entry: CarMaintenanceEntry) -> int:
        row = CarMaintenanceRow(
            car_id=entry.car_id,
            maintenance_type_id=entry.maintenance_type_id,
            maintenance_date=entry.maintenance_date,
            maintenance_kilometers=entry.maintenance_kilometers,
            recurrency=entry.recurrency,
        )

        try:
            self._session.add(row)
            self._session.flush()
        except SQLAlchemyError as exc:
            raise self._unavailable("add", exc) from exc

        return row.id

    def update(self, entry_id: int, entry: CarMaintenanceEntry) -> bool:
        statement = (
            update(CarMaintenanceRow)
            .where(CarMaintenanceRow.id == entry_id)
            .values(
                car_id=entry.car_id,
                maintenance_type_id=entry.maintenance_type_id,
                maintenance_date=entry.maintenance_date,
                maintenance_kilometers=entry.maintenance_kilometers,
                recurrency=entry.recurrency,
            )
        )

        try:
            result = self._session.execute(statement)
        except SQLAlchemyError as exc:
            raise self._unavailable("update", exc) from exc

        return result.rowcount > 0

    def delete(self, entry_id: int) -> bool:
        statement = delete(CarMaintenanceRow).where(CarMaintenanceRow.id == entry_id)

        try:
            result = self._session.execute(statement)
        except SQLAlchemyError as exc:
            raise self._unavailable("delete", exc) from exc

        return result.rowcount > 0

    @staticmethod
    def _unavailable(operation: str, exc: SQLAlchemyError) -> StoreUnavailable:
        logger.error(
            "Car maintenance write failed",
            exc_info=exc,
            extra={"operation": operation},
        )
        return StoreUnavailable(str(getattr(exc, "orig", None) or exc))
