from __future__ import annotations

from dataclasses import replace

from fleet_tracker.domain.car_maintenance import CarMaintenanceEntry
from fleet_tracker.ports.car_maintenance_repository import CarMaintenanceRepository


class InMemoryCarMaintenanceRepository(CarMaintenanceRepository):
    """
    Canonical contract implementation for tests.

    Ids are assigned sequentially starting at 1 and never reused.
    """

    def __init__(self) -> None:
        self.entries: dict[int, CarMaintenanceEntry] = {}
        self._next_id = 1

    def add(self, entry: CarMaintenanceEntry) -> int:
        entry_id = self._next_id
        self._next_id += 1
        self.entries[entry_id] = replace(entry, id=entry_id)
        return entry_id

    def update(self, entry_id: int, entry: CarMaintenanceEntry) -> bool:
        if entry_id not in self.entries:
            return False
        self.entries[entry_id] = replace(entry, id=entry_id)
        return True

    def delete(self, entry_id: int) -> bool:
        return self.entries.pop(entry_id, None) is not None
