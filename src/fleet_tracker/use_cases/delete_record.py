from __future__ import annotations

import logging
from dataclasses import dataclass

from fleet_tracker.domain.errors import NotFoundError
from fleet_tracker.domain.listing import ResourceSchema
from fleet_tracker.ports.record_repository import RecordRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DeleteRecordRequest:
    schema: ResourceSchema
    record_id: int


class DeleteRecord:
    """Remove one car, driver, oil change or maintenance history entry."""

    def __init__(self, repository: RecordRepository) -> None:
        self._repository = repository

    def execute(self, request: DeleteRecordRequest) -> None:
        """
        Raises:
            NotFoundError: If no row has the given id
            StoreUnavailable: If the store failed
        """
        if not self._repository.delete(request.schema, request.record_id):
            raise NotFoundError(
                resource=request.schema.display_name, identifier=str(request.record_id)
            )

        logger.info(
            "Record deleted",
            extra={"resource": request.schema.name, "record_id": request.record_id},
        )
