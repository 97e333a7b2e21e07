from __future__ import annotations

from typing import Any, Mapping

from fleet_tracker.domain.listing import ResourceSchema
from fleet_tracker.ports.record_repository import RecordRepository


class InMemoryRecordRepository(RecordRepository):
    """
    Canonical contract implementation for tests.

    Mutates the same dict tables an InMemoryListingStore reads, so changes
    show up in later listings. No foreign key actions are emulated.
    """

    def __init__(self, tables: dict[str, list[dict[str, Any]]] | None = None) -> None:
        self._tables = tables if tables is not None else {}

    def update_fields(
        self, schema: ResourceSchema, record_id: int, values: Mapping[str, Any]
    ) -> bool:
        row = self._find(schema, record_id)
        if row is None:
            return False
        for label, value in values.items():
            _, _, column = schema.columns[label].partition(".")
            row[column] = value
        return True

    def delete(self, schema: ResourceSchema, record_id: int) -> bool:
        row = self._find(schema, record_id)
        if row is None:
            return False
        self._tables[schema.primary_table].remove(row)
        return True

    def _find(self, schema: ResourceSchema, record_id: int) -> dict[str, Any] | None:
        return next(
            (row for row in self._tables.get(schema.primary_table, []) if row.get("id") == record_id),
            None,
        )
