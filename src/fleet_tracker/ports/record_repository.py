from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping

from fleet_tracker.domain.listing import ResourceSchema


class RecordRepository(ABC):
    """
    Port for single-row mutations of any registered resource.

    Rows are addressed by the schema's primary table and primary key, and
    fields by the schema's column labels. Only labels that map to the
    primary table may be written.
    """

    @abstractmethod
    def update_fields(
        self, schema: ResourceSchema, record_id: int, values: Mapping[str, Any]
    ) -> bool:
        """Set the given fields on one row. Returns False if no row matched."""
        ...

    @abstractmethod
    def delete(self, schema: ResourceSchema, record_id: int) -> bool:
        """Delete one row. Returns False if no row matched."""
        ...
