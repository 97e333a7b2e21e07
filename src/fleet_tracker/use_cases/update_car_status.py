from __future__ import annotations

import logging
from dataclasses import dataclass

from fleet_tracker.domain.errors import NotFoundError, ValidationError
from fleet_tracker.domain.resources import CAR_STATUSES, CARS
from fleet_tracker.ports.record_repository import RecordRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UpdateCarStatusRequest:
    car_id: int
    status: str


class UpdateCarStatus:
    """
    Activate or deactivate a car.

    Inactive cars stay listed (and filterable with ``status=inactive``);
    nothing else about the car changes.
    """

    def __init__(self, repository: RecordRepository) -> None:
        self._repository = repository

    def execute(self, request: UpdateCarStatusRequest) -> None:
        """
        Raises:
            ValidationError: If status is not one of CAR_STATUSES
            NotFoundError: If no car has the given id
            StoreUnavailable: If the store failed
        """
        if request.status not in CAR_STATUSES:
            raise ValidationError(
                errors=[
                    {
                        "field": "status",
                        "message": f"Must be one of {sorted(CAR_STATUSES)}",
                        "code": "INVALID_STATUS",
                    }
                ]
            )

        if not self._repository.update_fields(CARS, request.car_id, {"status": request.status}):
            raise NotFoundError(resource=CARS.display_name, identifier=str(request.car_id))

        logger.info(
            "Car status changed",
            extra={"car_id": request.car_id, "status": request.status},
        )
