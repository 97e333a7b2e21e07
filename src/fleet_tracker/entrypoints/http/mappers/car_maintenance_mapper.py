from __future__ import annotations

from fleet_tracker.domain.car_maintenance import CarMaintenanceEntry
from fleet_tracker.entrypoints.http.dtos.car_maintenance import CarMaintenanceEntryDTO


class CarMaintenanceMapper:
    """Maps between REST DTOs and the car maintenance domain entry."""

    @staticmethod
    def to_domain_entry(dto: CarMaintenanceEntryDTO) -> CarMaintenanceEntry:
        return CarMaintenanceEntry(
            car_id=dto.car_id,
            maintenance_type_id=dto.maintenance_type_id,
            maintenance_date=dto.maintenance_date,
            maintenance_kilometers=dto.maintenance_kilometers,
            recurrency=dto.recurrency,
        )
