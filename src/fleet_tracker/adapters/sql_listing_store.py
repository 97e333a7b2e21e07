"""SQLAlchemy implementation of ListingStore."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping

from sqlalchemy import MetaData, Table, asc, desc, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fleet_tracker.domain.errors import StoreUnavailable
from fleet_tracker.domain.listing import ListQuery, ResourceSchema, SortOrder
from fleet_tracker.infra.db.models import Base
from fleet_tracker.ports.listing_store import ListingStore

if TYPE_CHECKING:
    from sqlalchemy.sql import ColumnElement, FromClause, Select

logger = logging.getLogger(__name__)


class SqlListingStore(ListingStore):
    """
    Relational implementation of ListingStore.

    - Resolves the schema's qualified column names against ORM metadata,
      so only declared tables/columns can ever appear in SQL text
    - Binds every filter value, LIMIT and OFFSET as parameters
    - Returns total count via COUNT(*) on the filtered primary table
    - Returns page rows as plain dicts keyed by the schema's column labels
    """

    def __init__(self, session: Session, metadata: MetaData | None = None) -> None:
        """
        Initialize store with database session.

        Args:
            session: SQLAlchemy session for database operations
            metadata: Table metadata (defaults to the ORM models' metadata)
        """
        self._session = session
        self._metadata = metadata if metadata is not None else Base.metadata

    def count(self, query: ListQuery) -> int:
        primary = self._table(query.schema.primary_table)
        statement = (
            select(func.count())
            .select_from(primary)
            .where(*self._conditions(query.filters))
        )

        try:
            return self._session.execute(statement).scalar() or 0
        except SQLAlchemyError as exc:
            raise self._unavailable(query.schema, "count", exc) from exc

    def fetch_page(self, query: ListQuery) -> list[dict[str, Any]]:
        statement = (
            self._joined_select(query.schema)
            .where(*self._conditions(query.filters))
            .order_by(*self._order_by(query))
            .limit(query.limit)
            .offset(query.offset)
        )

        try:
            rows = self._session.execute(statement).mappings().all()
        except SQLAlchemyError as exc:
            raise self._unavailable(query.schema, "fetch_page", exc) from exc

        return [dict(row) for row in rows]

    def fetch_one(self, schema: ResourceSchema, record_id: int) -> dict[str, Any] | None:
        statement = self._joined_select(schema).where(
            self._column(schema.primary_key) == record_id
        )

        try:
            row = self._session.execute(statement).mappings().first()
        except SQLAlchemyError as exc:
            raise self._unavailable(schema, "fetch_one", exc) from exc

        return dict(row) if row is not None else None

    def _joined_select(self, schema: ResourceSchema) -> Select[Any]:
        """SELECT <labeled columns> FROM primary LEFT JOIN ... (no WHERE/ORDER)."""
        from_clause: FromClause = self._table(schema.primary_table)
        for join in schema.joins:
            from_clause = from_clause.outerjoin(
                self._table(join.table),
                self._column(join.local_column) == self._column(join.remote_column),
            )

        columns = [self._column(qualified).label(label) for label, qualified in schema.columns.items()]
        return select(*columns).select_from(from_clause)

    def _order_by(self, query: ListQuery) -> list[ColumnElement[Any]]:
        direction = desc if query.sort_order is SortOrder.DESC else asc
        primary_key = query.schema.primary_key

        ordering = [direction(self._column(qualified)) for qualified in query.sort_columns]
        # Primary key tie-breaker keeps pages stable when sort values repeat
        if primary_key not in query.sort_columns:
            ordering.append(direction(self._column(primary_key)))
        return ordering

    def _conditions(self, filters: Mapping[str, Any]) -> list[ColumnElement[bool]]:
        return [self._column(qualified) == value for qualified, value in filters.items()]

    def _table(self, name: str) -> Table:
        return self._metadata.tables[name]

    def _column(self, qualified: str) -> ColumnElement[Any]:
        table_name, _, column_name = qualified.partition(".")
        return self._table(table_name).c[column_name]

    @staticmethod
    def _unavailable(schema: ResourceSchema, operation: str, exc: SQLAlchemyError) -> StoreUnavailable:
        logger.error(
            "Listing query failed",
            exc_info=exc,
            extra={"resource": schema.name, "operation": operation},
        )
        return StoreUnavailable(str(getattr(exc, "orig", None) or exc))
