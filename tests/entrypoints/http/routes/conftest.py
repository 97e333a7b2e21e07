"""
Route test wiring.

The full application is built and its use case providers are overridden with
the in-memory adapters, so requests flow through the real listing engine
without a database. Record writes mutate the same tables the listings read.
"""

from __future__ import annotations

from typing import Any, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from fleet_tracker.adapters.in_memory_car_maintenance_repository import (
    InMemoryCarMaintenanceRepository,
)
from fleet_tracker.adapters.in_memory_listing_store import InMemoryListingStore
from fleet_tracker.adapters.in_memory_record_repository import InMemoryRecordRepository
from fleet_tracker.entrypoints.http.app import build_app
from fleet_tracker.entrypoints.http.dependencies import (
    get_create_car_maintenance_entry_use_case,
    get_delete_car_maintenance_entry_use_case,
    get_delete_record_use_case,
    get_get_record_by_id_use_case,
    get_list_query_engine,
    get_update_car_maintenance_entry_use_case,
    get_update_car_status_use_case,
)
from fleet_tracker.use_cases.create_car_maintenance_entry import CreateCarMaintenanceEntry
from fleet_tracker.use_cases.delete_car_maintenance_entry import DeleteCarMaintenanceEntry
from fleet_tracker.use_cases.delete_record import DeleteRecord
from fleet_tracker.use_cases.get_record_by_id import GetRecordById
from fleet_tracker.use_cases.list_resource import ListQueryEngine
from fleet_tracker.use_cases.update_car_maintenance_entry import UpdateCarMaintenanceEntry
from fleet_tracker.use_cases.update_car_status import UpdateCarStatus


@pytest.fixture
def maintenance_repository() -> InMemoryCarMaintenanceRepository:
    return InMemoryCarMaintenanceRepository()


@pytest.fixture
def record_repository(fleet_tables: dict[str, list[dict[str, Any]]]) -> InMemoryRecordRepository:
    return InMemoryRecordRepository(fleet_tables)


@pytest.fixture
def app(
    listing_store: InMemoryListingStore,
    maintenance_repository: InMemoryCarMaintenanceRepository,
    record_repository: InMemoryRecordRepository,
) -> Iterator[FastAPI]:
    """Application with every use case bound to in-memory adapters."""
    test_app = build_app()
    overrides = test_app.dependency_overrides
    overrides[get_list_query_engine] = lambda: ListQueryEngine(listing_store=listing_store)
    overrides[get_get_record_by_id_use_case] = lambda: GetRecordById(listing_store=listing_store)
    overrides[get_create_car_maintenance_entry_use_case] = lambda: CreateCarMaintenanceEntry(
        repository=maintenance_repository
    )
    overrides[get_update_car_maintenance_entry_use_case] = lambda: UpdateCarMaintenanceEntry(
        repository=maintenance_repository
    )
    overrides[get_delete_car_maintenance_entry_use_case] = lambda: DeleteCarMaintenanceEntry(
        repository=maintenance_repository
    )
    overrides[get_delete_record_use_case] = lambda: DeleteRecord(repository=record_repository)
    overrides[get_update_car_status_use_case] = lambda: UpdateCarStatus(
        repository=record_repository
    )
    yield test_app
    overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a test client."""
    return TestClient(app, raise_server_exceptions=False)
