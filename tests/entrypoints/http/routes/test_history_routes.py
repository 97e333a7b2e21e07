"""Tests for the /v1/drivers, /v1/oil-changes and /v1/maintenance/history routes."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def fleet_tables(fleet_tables: dict[str, list[dict[str, Any]]]) -> dict[str, list[dict[str, Any]]]:
    """The shared fleet plus a few oil changes and general maintenance rows."""
    fleet_tables["oil_change_history"] = [
        {
            "id": oil_change_id,
            "car_id": car_id,
            "oil_change_date": date(2024, oil_change_id, 1),
            "oil_change_kilometers": oil_change_id * 5000,
            "liters_quantity": Decimal("4.50"),
            "price_per_liter": Decimal("12.00"),
            "total_cost": Decimal("54.00"),
            "observation": None,
        }
        for oil_change_id, car_id in [(1, 1), (2, 2), (3, 1)]
    ]
    fleet_tables["maintenance_history"] = [
        {
            "id": 1,
            "car_id": 2,
            "maintenance_type_id": 2,
            "maintenance_date": date(2024, 4, 2),
            "maintenance_kilometers": 12000,
            "recurrency": 0,
            "cost": Decimal("80.00"),
            "observation": "Front wheels only",
        },
    ]
    return fleet_tables


# ==============================================================================
# Drivers
# ==============================================================================


def test_list_drivers(client: TestClient) -> None:
    data = client.get("/v1/drivers", params={"sortField": "name", "sortOrder": "desc"}).json()

    assert [driver["name"] for driver in data["drivers"]] == ["Carla Ruiz", "Bruno Diaz", "Ana Torres"]
    assert data["total"] == 3


def test_get_driver(client: TestClient) -> None:
    assert client.get("/v1/drivers/2").json()["license_number"] == "LIC-002"


def test_get_driver_not_found(client: TestClient) -> None:
    assert client.get("/v1/drivers/9").status_code == 404


def test_delete_driver(client: TestClient) -> None:
    response = client.delete("/v1/drivers/3")

    assert response.status_code == 200
    assert response.json() == {"message": "Driver deleted successfully"}
    assert client.get("/v1/drivers").json()["total"] == 2
    assert client.get("/v1/drivers/3").status_code == 404


def test_delete_driver_not_found(client: TestClient) -> None:
    response = client.delete("/v1/drivers/9")

    assert response.status_code == 404
    assert response.json()["detail"] == "Driver with identifier '9' not found"


# ==============================================================================
# Oil changes
# ==============================================================================


def test_list_oil_changes(client: TestClient) -> None:
    data = client.get("/v1/oil-changes").json()

    assert [row["id"] for row in data["oilChangeHistory"]] == [1, 2, 3]
    assert data["oilChangeHistory"][1]["make"] == "Nissan"


def test_list_oil_changes_by_car(client: TestClient) -> None:
    data = client.get("/v1/oil-changes/car/1").json()

    assert [row["id"] for row in data["oilChangeHistory"]] == [1, 3]
    assert data["total"] == 2


def test_list_oil_changes_by_car_rejects_non_numeric_car(client: TestClient) -> None:
    assert client.get("/v1/oil-changes/car/abc").status_code == 400


def test_list_oil_changes_by_car_substitutes_limit(client: TestClient) -> None:
    assert client.get("/v1/oil-changes/car/1", params={"limit": 200}).json()["limit"] == 10


def test_get_oil_change(client: TestClient) -> None:
    data = client.get("/v1/oil-changes/3").json()

    assert data["car_id"] == 1
    assert data["oil_change_date"] == "2024-03-01"


def test_delete_oil_change(client: TestClient) -> None:
    response = client.delete("/v1/oil-changes/1")

    assert response.status_code == 200
    assert response.json() == {"message": "Oil change deleted successfully"}
    assert [row["id"] for row in client.get("/v1/oil-changes/car/1").json()["oilChangeHistory"]] == [3]


def test_delete_oil_change_rejects_id_past_integer_range(client: TestClient) -> None:
    response = client.delete("/v1/oil-changes/99999999999999999999")

    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_ERROR"


# ==============================================================================
# Maintenance history
# ==============================================================================


def test_list_maintenance_history(client: TestClient) -> None:
    data = client.get("/v1/maintenance/history").json()

    assert data["total"] == 1
    assert data["maintenanceHistory"][0]["maintenance_type_name"] == "Alignment"


def test_get_maintenance_history_entry(client: TestClient) -> None:
    assert client.get("/v1/maintenance/history/1").json()["observation"] == "Front wheels only"


def test_get_maintenance_history_entry_malformed_id(client: TestClient) -> None:
    assert client.get("/v1/maintenance/history/0").status_code == 422


def test_delete_maintenance_history_entry(client: TestClient) -> None:
    response = client.delete("/v1/maintenance/history/1")

    assert response.status_code == 200
    assert response.json() == {"message": "Maintenance history entry deleted successfully"}
    assert client.get("/v1/maintenance/history").json()["maintenanceHistory"] == []


def test_delete_maintenance_history_entry_not_found(client: TestClient) -> None:
    assert client.delete("/v1/maintenance/history/2").status_code == 404
