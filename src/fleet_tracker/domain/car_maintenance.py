from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from fleet_tracker.domain.errors import ValidationError


@dataclass(frozen=True, slots=True)
class CarMaintenanceEntry:
    """A maintenance event recorded against a car (``car_maintenance_history``)."""

    car_id: int
    maintenance_type_id: int
    maintenance_date: date
    maintenance_kilometers: int
    recurrency: int
    id: int | None = None

    def validate(self) -> None:
        """
        Validate field-level business rules.

        Collects every violation before raising so clients see all of them.

        Raises:
            ValidationError: If any field is out of range
        """
        errors: list[dict[str, str]] = []

        if self.car_id <= 0:
            errors.append(
                {"field": "car_id", "message": "Must be a positive id", "code": "INVALID_ID"}
            )
        if self.maintenance_type_id <= 0:
            errors.append(
                {
                    "field": "maintenance_type_id",
                    "message": "Must be a positive id",
                    "code": "INVALID_ID",
                }
            )
        if self.maintenance_kilometers < 0:
            errors.append(
                {
                    "field": "maintenance_kilometers",
                    "message": "Must be >= 0",
                    "code": "INVALID_VALUE",
                }
            )
        if self.recurrency < 0:
            errors.append(
                {"field": "recurrency", "message": "Must be >= 0", "code": "INVALID_VALUE"}
            )

        if errors:
            raise ValidationError(errors=errors)
