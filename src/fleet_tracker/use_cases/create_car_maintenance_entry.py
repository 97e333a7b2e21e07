from __future__ import annotations

import logging
from dataclasses import dataclass

from fleet_tracker.domain.car_maintenance import CarMaintenanceEntry
from fleet_tracker.ports.car_maintenance_repository import CarMaintenanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CreateCarMaintenanceEntryResponse:
    id: int


class CreateCarMaintenanceEntry:
    """Record a new maintenance event for a car."""

    def __init__(self, repository: CarMaintenanceRepository) -> None:
        self._repository = repository

    def execute(self, entry: CarMaintenanceEntry) -> CreateCarMaintenanceEntryResponse:
        """
        Raises:
            ValidationError: If entry fields are out of range
            StoreUnavailable: If the entry could not be persisted
        """
        entry.validate()

        entry_id = self._repository.add(entry)
        logger.info(
            "Car maintenance entry created",
            extra={"entry_id": entry_id, "car_id": entry.car_id},
        )

        return CreateCarMaintenanceEntryResponse(id=entry_id)
