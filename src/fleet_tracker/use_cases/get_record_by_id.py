"""Get a single record by ID use case."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fleet_tracker.domain.errors import NotFoundError, ValidationError
from fleet_tracker.domain.listing import ResourceSchema, parse_record_id
from fleet_tracker.ports.listing_store import ListingStore


@dataclass(frozen=True, slots=True)
class GetRecordByIdRequest:
    """Request to get one record of a resource by ID."""

    schema: ResourceSchema
    record_id: str


@dataclass(frozen=True, slots=True)
class GetRecordByIdResponse:
    """Response containing the joined record."""

    record: dict[str, Any]


class GetRecordById:
    """
    Use case for retrieving a single record of any listable resource.

    Responsibilities:
    - Validate record_id format (must be a positive integer)
    - Delegate to the listing store, reusing the resource's joins
    - Raise NotFoundError if the record doesn't exist
    """

    def __init__(self, listing_store: ListingStore) -> None:
        """
        Initialize use case with dependencies.

        Args:
            listing_store: Store used for joined reads
        """
        self._store = listing_store

    def execute(self, request: GetRecordByIdRequest) -> GetRecordByIdResponse:
        """
        Execute the get record by ID use case.

        Raises:
            ValidationError: If record_id is not a positive integer
            NotFoundError: If no record has the given ID
        """
        record_id = parse_record_id(request.record_id)
        if record_id is None:
            raise ValidationError(
                errors=[
                    {
                        "field": "id",
                        "message": "Must be a positive integer",
                        "code": "INVALID_ID",
                    }
                ]
            )

        record = self._store.fetch_one(request.schema, record_id)

        if record is None:
            raise NotFoundError(resource=request.schema.display_name, identifier=str(record_id))

        return GetRecordByIdResponse(record=record)
