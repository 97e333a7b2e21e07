from fleet_tracker.infra.db.models.base import Base
from fleet_tracker.infra.db.models.car import CarRow
from fleet_tracker.infra.db.models.car_maintenance import CarMaintenanceRow
from fleet_tracker.infra.db.models.driver import DriverRow
from fleet_tracker.infra.db.models.maintenance_history import MaintenanceHistoryRow
from fleet_tracker.infra.db.models.maintenance_type import MaintenanceTypeRow
from fleet_tracker.infra.db.models.oil_change import OilChangeRow

__all__ = [
    "Base",
    "CarMaintenanceRow",
    "CarRow",
    "DriverRow",
    "MaintenanceHistoryRow",
    "MaintenanceTypeRow",
    "OilChangeRow",
]
