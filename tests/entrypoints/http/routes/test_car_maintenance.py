"""
Test suite for the /v1/car-maintenance routes.

Listing endpoints are strict: unknown sort fields are rejected, and the
per-car listing also rejects page sizes outside its extended allowlist.
Write endpoints record, replace and delete entries.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from fleet_tracker.adapters.in_memory_car_maintenance_repository import (
    InMemoryCarMaintenanceRepository,
)
from fleet_tracker.adapters.in_memory_listing_store import InMemoryListingStore


@pytest.fixture
def payload() -> dict[str, object]:
    return {
        "car_id": 3,
        "maintenance_type_id": 1,
        "maintenance_date": "2024-05-17",
        "maintenance_kilometers": 85000,
        "recurrency": 10000,
    }


# ==============================================================================
# GET /v1/car-maintenance
# ==============================================================================


def test_list_all_entries(client: TestClient) -> None:
    response = client.get("/v1/car-maintenance")

    assert response.status_code == 200
    data = response.json()
    assert [row["id"] for row in data["carMaintenanceHistory"]] == [1, 2, 3, 4]
    assert data["carMaintenanceHistory"][0]["maintenance_type"] == "Brake pads"
    assert data["carMaintenanceHistory"][0]["maintenance_date"] == "2024-01-10"
    assert data["total"] == 4
    assert data["totalPages"] == 1


def test_list_sorted_by_vehicle(client: TestClient) -> None:
    data = client.get("/v1/car-maintenance", params={"sortField": "vehicle"}).json()

    assert [row["make"] for row in data["carMaintenanceHistory"]] == [
        "Nissan",
        "Toyota",
        "Toyota",
        "Toyota",
    ]


def test_list_rejects_unknown_sort_field(client: TestClient, listing_store: InMemoryListingStore) -> None:
    response = client.get("/v1/car-maintenance", params={"sortField": "price"})

    assert response.status_code == 400
    data = response.json()
    assert data["code"] == "INVALID_SORT_FIELD"
    assert data["value"] == "price"
    assert "vehicle" in data["allowed"]
    assert listing_store.queries == []


def test_list_substitutes_unknown_limit(client: TestClient) -> None:
    data = client.get("/v1/car-maintenance", params={"limit": 7}).json()

    assert data["limit"] == 10


# ==============================================================================
# GET /v1/car-maintenance/car/{car_id}
# ==============================================================================


def test_list_by_car(client: TestClient) -> None:
    data = client.get("/v1/car-maintenance/car/1", params={"sortOrder": "desc"}).json()

    assert [row["id"] for row in data["carMaintenanceHistory"]] == [4, 2, 1]
    assert data["validLimits"] == [10, 20, 50, 100, 200, 500]


def test_list_by_car_without_entries(client: TestClient) -> None:
    data = client.get("/v1/car-maintenance/car/42").json()

    assert data["carMaintenanceHistory"] == []
    assert data["total"] == 0
    assert data["totalPages"] == 0


def test_list_by_car_rejects_limit(client: TestClient, listing_store: InMemoryListingStore) -> None:
    response = client.get("/v1/car-maintenance/car/1", params={"limit": 7})

    assert response.status_code == 400
    assert response.json() == {
        "detail": "Invalid limit value",
        "code": "INVALID_LIMIT",
        "field": "limit",
        "value": 7,
        "allowed": [10, 20, 50, 100, 200, 500],
    }
    assert listing_store.queries == []


def test_list_by_car_accepts_extended_limit(client: TestClient) -> None:
    assert client.get("/v1/car-maintenance/car/1", params={"limit": 200}).json()["limit"] == 200


def test_list_by_car_rejects_non_numeric_car(client: TestClient) -> None:
    response = client.get("/v1/car-maintenance/car/abc")

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_FILTER"


def test_list_by_car_rejects_car_id_past_integer_range(
    client: TestClient, listing_store: InMemoryListingStore
) -> None:
    response = client.get("/v1/car-maintenance/car/99999999999999999999")

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_FILTER"
    assert listing_store.queries == []


# ==============================================================================
# GET /v1/car-maintenance/{entry_id}
# ==============================================================================


def test_get_entry(client: TestClient) -> None:
    data = client.get("/v1/car-maintenance/3").json()

    assert data["car_id"] == 2
    assert data["maintenance_type"] == "Alignment"


def test_get_entry_not_found(client: TestClient) -> None:
    response = client.get("/v1/car-maintenance/99")

    assert response.status_code == 404
    assert response.json()["detail"] == "Car maintenance entry with identifier '99' not found"


# ==============================================================================
# Writes
# ==============================================================================


def test_create_entry(
    client: TestClient,
    maintenance_repository: InMemoryCarMaintenanceRepository,
    payload: dict[str, object],
) -> None:
    response = client.post("/v1/car-maintenance", json=payload)

    assert response.status_code == 201
    assert response.json() == {"message": "Car maintenance entry added successfully", "id": 1}
    assert maintenance_repository.entries[1].maintenance_kilometers == 85000


def test_create_entry_defaults_recurrency(
    client: TestClient,
    maintenance_repository: InMemoryCarMaintenanceRepository,
    payload: dict[str, object],
) -> None:
    del payload["recurrency"]

    assert client.post("/v1/car-maintenance", json=payload).status_code == 201
    assert maintenance_repository.entries[1].recurrency == 0


def test_create_entry_business_validation(client: TestClient, payload: dict[str, object]) -> None:
    payload["maintenance_kilometers"] = -10

    response = client.post("/v1/car-maintenance", json=payload)

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "maintenance_kilometers"


def test_create_entry_malformed_date(client: TestClient, payload: dict[str, object]) -> None:
    payload["maintenance_date"] = "yesterday"

    response = client.post("/v1/car-maintenance", json=payload)

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "maintenance_date"


def test_update_entry(
    client: TestClient,
    maintenance_repository: InMemoryCarMaintenanceRepository,
    payload: dict[str, object],
) -> None:
    client.post("/v1/car-maintenance", json=payload)
    payload["recurrency"] = 5000

    response = client.put("/v1/car-maintenance/1", json=payload)

    assert response.status_code == 200
    assert response.json() == {"message": "Car maintenance entry updated successfully"}
    assert maintenance_repository.entries[1].recurrency == 5000


def test_update_missing_entry(client: TestClient, payload: dict[str, object]) -> None:
    response = client.put("/v1/car-maintenance/99", json=payload)

    assert response.status_code == 404
    assert response.json()["code"] == "NOT_FOUND"


def test_delete_entry(
    client: TestClient,
    maintenance_repository: InMemoryCarMaintenanceRepository,
    payload: dict[str, object],
) -> None:
    client.post("/v1/car-maintenance", json=payload)

    response = client.delete("/v1/car-maintenance/1")

    assert response.status_code == 200
    assert response.json() == {"message": "Car maintenance entry deleted successfully"}
    assert maintenance_repository.entries == {}


def test_delete_missing_entry(client: TestClient) -> None:
    assert client.delete("/v1/car-maintenance/99").status_code == 404
