"""SQLAlchemy implementation of RecordRepository."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from sqlalchemy import MetaData, Table, delete, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fleet_tracker.domain.errors import StoreUnavailable
from fleet_tracker.domain.listing import ResourceSchema
from fleet_tracker.infra.db.models import Base
from fleet_tracker.ports.record_repository import RecordRepository

logger = logging.getLogger(__name__)


class SqlRecordRepository(RecordRepository):
    """
    Core UPDATE/DELETE statements keyed by the schema's primary key.

    Foreign key actions (history rows cascading with their car, cars losing
    a deleted driver) are left to the database. The surrounding session
    commits or rolls back.
    """

    def __init__(self, session: Session, metadata: MetaData | None = None) -> None:
        self._session = session
        self._metadata = metadata if metadata is not None else Base.metadata

    def update_fields(
        self, schema: ResourceSchema, record_id: int, values: Mapping[str, Any]
    ) -> bool:
        table = self._table(schema)
        statement = (
            update(table)
            .where(table.c.id == record_id)
            .values({_primary_column(schema, label): value for label, value in values.items()})
        )

        try:
            result = self._session.execute(statement)
        except SQLAlchemyError as exc:
            raise self._unavailable(schema, "update", exc) from exc

        return result.rowcount > 0

    def delete(self, schema: ResourceSchema, record_id: int) -> bool:
        table = self._table(schema)
        statement = delete(table).where(table.c.id == record_id)

        try:
            result = self._session.execute(statement)
        except SQLAlchemyError as exc:
            raise self._unavailable(schema, "delete", exc) from exc

        return result.rowcount > 0

    def _table(self, schema: ResourceSchema) -> Table:
        return self._metadata.tables[schema.primary_table]

    @staticmethod
    def _unavailable(schema: ResourceSchema, operation: str, exc: SQLAlchemyError) -> StoreUnavailable:
        logger.error(
            "Record write failed",
            exc_info=exc,
            extra={"resource": schema.name, "operation": operation},
        )
        return StoreUnavailable(str(getattr(exc, "orig", None) or exc))


def _primary_column(schema: ResourceSchema, label: str) -> str:
    """Bare column name behind ``label``; it must live on the primary table."""
    table, _, column = schema.columns[label].partition(".")
    if table != schema.primary_table:
        raise ValueError(f"{schema.name}: {label!r} is not a column of {schema.primary_table}")
    return column
