from __future__ import annotations

from fleet_tracker.domain.errors import NotFoundError
from fleet_tracker.ports.car_maintenance_repository import CarMaintenanceRepository


class DeleteCarMaintenanceEntry:
    def __init__(self, repository: CarMaintenanceRepository) -> None:
        self._repository = repository

    def execute(self, entry_id: int) -> None:
        """
        Raises:
            NotFoundError: If no entry has the given id
            StoreUnavailable: If the store failed
        """
        if not self._repository.delete(entry_id):
            raise NotFoundError(resource="Car maintenance entry", identifier=str(entry_id))
