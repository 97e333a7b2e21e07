from __future__ import annotations

from typing import Any

from fleet_tracker.domain.listing import ListQuery, ResourceSchema, SortOrder
from fleet_tracker.ports.listing_store import ListingStore


class InMemoryListingStore(ListingStore):
    """
    Canonical contract implementation for tests.

    - Holds tables as lists of dict rows keyed by column name
    - Emulates LEFT JOIN on the schema's join specs (first match wins)
    - Counts filtered primary rows BEFORE sorting and paging
    - Orders by sort columns then primary key, in the same direction;
      None sorts before any value when ascending
    """

    def __init__(self, tables: dict[str, list[dict[str, Any]]] | None = None) -> None:
        self._tables = tables if tables is not None else {}
        self.queries: list[str] = []  # operations executed, for tests

    def count(self, query: ListQuery) -> int:
        self.queries.append("count")
        return len(self._filtered(query))

    def fetch_page(self, query: ListQuery) -> list[dict[str, Any]]:
        self.queries.append("fetch_page")
        matches = self._filtered(query)

        sort_columns = list(query.sort_columns)
        if query.schema.primary_key not in sort_columns:
            sort_columns.append(query.schema.primary_key)

        ordered = sorted(
            matches,
            key=lambda row: tuple(_nulls_first(row.get(column)) for column in sort_columns),
            reverse=query.sort_order is SortOrder.DESC,
        )

        page = ordered[query.offset : query.offset + query.limit]
        return [self._project(query.schema, row) for row in page]

    def fetch_one(self, schema: ResourceSchema, record_id: int) -> dict[str, Any] | None:
        self.queries.append("fetch_one")
        for row in self._joined(schema):
            if row.get(schema.primary_key) == record_id:
                return self._project(schema, row)
        return None

    def _filtered(self, query: ListQuery) -> list[dict[str, Any]]:
        return [
            row
            for row in self._joined(query.schema)
            if all(row.get(column) == value for column, value in query.filters.items())
        ]

    def _joined(self, schema: ResourceSchema) -> list[dict[str, Any]]:
        """Primary rows widened with LEFT JOINed columns, keyed "table.column"."""
        joined_rows = []
        for primary_row in self._tables.get(schema.primary_table, []):
            row = _qualify(schema.primary_table, primary_row)
            for join in schema.joins:
                _, _, remote_column = join.remote_column.partition(".")
                local_value = row.get(join.local_column)
                match = next(
                    (
                        candidate
                        for candidate in self._tables.get(join.table, [])
                        if local_value is not None and candidate.get(remote_column) == local_value
                    ),
                    None,
                )
                if match is not None:
                    row.update(_qualify(join.table, match))
            joined_rows.append(row)
        return joined_rows

    @staticmethod
    def _project(schema: ResourceSchema, row: dict[str, Any]) -> dict[str, Any]:
        return {label: row.get(qualified) for label, qualified in schema.columns.items()}


def _qualify(table: str, row: dict[str, Any]) -> dict[str, Any]:
    return {f"{table}.{column}": value for column, value in row.items()}


def _nulls_first(value: Any) -> tuple[bool, Any]:
    return (value is not None, value if value is not None else 0)
