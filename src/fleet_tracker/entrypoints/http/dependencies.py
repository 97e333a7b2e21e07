"""
Dependency injection for FastAPI routes.

Key principle: Database sessions are per-request, not cached. The resource
schema registry is immutable and process-wide, so it is handed out as-is.
"""

from __future__ import annotations

from typing import Generator, Mapping

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from fleet_tracker.adapters.sql_car_maintenance_repository import (
    SqlCarMaintenanceRepository,
)
from fleet_tracker.adapters.sql_listing_store import SqlListingStore
from fleet_tracker.adapters.sql_record_repository import SqlRecordRepository
from fleet_tracker.domain.listing import ResourceSchema
from fleet_tracker.domain.resources import RESOURCE_SCHEMAS
from fleet_tracker.entrypoints.http.dtos.listing import ListQueryDTO
from fleet_tracker.infra.db.session import get_session
from fleet_tracker.use_cases.create_car_maintenance_entry import CreateCarMaintenanceEntry
from fleet_tracker.use_cases.delete_car_maintenance_entry import DeleteCarMaintenanceEntry
from fleet_tracker.use_cases.delete_record import DeleteRecord
from fleet_tracker.use_cases.get_record_by_id import GetRecordById
from fleet_tracker.use_cases.list_resource import ListQueryEngine
from fleet_tracker.use_cases.update_car_maintenance_entry import UpdateCarMaintenanceEntry
from fleet_tracker.use_cases.update_car_status import UpdateCarStatus


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    The underlying get_session() context manager commits on success,
    rolls back on exception and always closes the session.

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


def get_resource_schemas() -> Mapping[str, ResourceSchema]:
    """Read-only registry of listable resources, built once at import."""
    return RESOURCE_SCHEMAS


def get_list_query(
    page: str | None = Query(default=None, description="Page number (1-based)", examples=["1"]),
    limit: str | None = Query(default=None, description="Page size", examples=["10"]),
    sort_field: str | None = Query(
        default=None, alias="sortField", description="Public sort key", examples=["id"]
    ),
    sort_order: str | None = Query(
        default=None, alias="sortOrder", description="asc or desc", examples=["asc"]
    ),
) -> ListQueryDTO:
    """Collects the pagination/sort query parameters shared by list endpoints."""
    return ListQueryDTO(page=page, limit=limit, sort_field=sort_field, sort_order=sort_order)


def get_list_query_engine(db: Session = Depends(get_db)) -> ListQueryEngine:
    """
    Factory function that returns a ListQueryEngine bound to this request's session.

    Args:
        db: Database session (injected by FastAPI via Depends(get_db))
    """
    return ListQueryEngine(listing_store=SqlListingStore(session=db))


def get_get_record_by_id_use_case(db: Session = Depends(get_db)) -> GetRecordById:
    return GetRecordById(listing_store=SqlListingStore(session=db))


def get_create_car_maintenance_entry_use_case(
    db: Session = Depends(get_db),
) -> CreateCarMaintenanceEntry:
    return CreateCarMaintenanceEntry(repository=SqlCarMaintenanceRepository(session=db))


def get_update_car_maintenance_entry_use_case(
    db: Session = Depends(get_db),
) -> UpdateCarMaintenanceEntry:
    return UpdateCarMaintenanceEntry(repository=SqlCarMaintenanceRepository(session=db))


def get_delete_car_maintenance_entry_use_case(
    db: Session = Depends(get_db),
) -> DeleteCarMaintenanceEntry:
    return DeleteCarMaintenanceEntry(repository=SqlCarMaintenanceRepository(session=db))


def get_delete_record_use_case(db: Session = Depends(get_db)) -> DeleteRecord:
    return DeleteRecord(repository=SqlRecordRepository(session=db))


def get_update_car_status_use_case(db: Session = Depends(get_db)) -> UpdateCarStatus:
    return UpdateCarStatus(repository=SqlRecordRepository(session=db))
