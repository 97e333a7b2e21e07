from __future__ import annotations

from abc import ABC, abstractmethod

from fleet_tracker.domain.car_maintenance import CarMaintenanceEntry


class CarMaintenanceRepository(ABC):
    """
    Port for writing car maintenance entries.

    Reads go through ListingStore; this port only covers mutations.
    Entries passed in are validated by the calling use case.
    """

    @abstractmethod
    def add(self, entry: CarMaintenanceEntry) -> int:
        """Persist a new entry and return its generated id."""
        ...

    @abstractmethod
    def update(self, entry_id: int, entry: CarMaintenanceEntry) -> bool:
        """Overwrite an existing entry. Returns False if no row matched."""
        ...

    @abstractmethod
    def delete(self, entry_id: int) -> bool:
        """Delete an entry. Returns False if no row matched."""
        ...
