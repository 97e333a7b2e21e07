from __future__ import annotations

from dataclasses import dataclass

from fleet_tracker.domain.car_maintenance import CarMaintenanceEntry
from fleet_tracker.domain.errors import NotFoundError
from fleet_tracker.ports.car_maintenance_repository import CarMaintenanceRepository


@dataclass(frozen=True, slots=True)
class UpdateCarMaintenanceEntryRequest:
    entry_id: int
    entry: CarMaintenanceEntry


class UpdateCarMaintenanceEntry:
    """Overwrite every field of an existing maintenance entry."""

    def __init__(self, repository: CarMaintenanceRepository) -> None:
        self._repository = repository

    def execute(self, request: UpdateCarMaintenanceEntryRequest) -> None:
        """
        Raises:
            ValidationError: If entry fields are out of range
            NotFoundError: If no entry has the given id
            StoreUnavailable: If the store failed
        """
        request.entry.validate()

        if not self._repository.update(request.entry_id, request.entry):
            raise NotFoundError(
                resource="Car maintenance entry", identifier=str(request.entry_id)
            )
