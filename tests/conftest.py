"""Shared fixtures: a small fleet held in plain dict tables."""

from __future__ import annotations

from datetime import date
from typing import Any

import pytest

from fleet_tracker.adapters.in_memory_listing_store import InMemoryListingStore

MAKES = ["Toyota", "Nissan", "Ford", "Chevrolet", "Volkswagen"]


def build_fleet_tables() -> dict[str, list[dict[str, Any]]]:
    """
    25 cars across 5 makes, 3 drivers, 2 maintenance types.

    Car 7 has no driver. Car 1 has three maintenance entries, car 2 has one,
    and no other car has any.
    """
    drivers = [
        {"id": 1, "name": "Ana Torres", "license_number": "LIC-001"},
        {"id": 2, "name": "Bruno Diaz", "license_number": "LIC-002"},
        {"id": 3, "name": "Carla Ruiz", "license_number": "LIC-003"},
    ]
    cars = [
        {
            "id": car_id,
            "make": MAKES[(car_id - 1) % len(MAKES)],
            "model": f"Model {car_id}",
            "license_plate": f"ABC-{car_id:03d}",
            "current_kilometers": car_id * 1000,
            "driver_id": None if car_id == 7 else (car_id - 1) % 3 + 1,
            "status": "inactive" if car_id % 5 == 0 else "active",
        }
        for car_id in range(1, 26)
    ]
    maintenance_types = [
        {"id": 1, "name": "Brake pads", "recurrency": 20000},
        {"id": 2, "name": "Alignment", "recurrency": 10000},
    ]
    car_maintenance_history = [
        {
            "id": 1,
            "car_id": 1,
            "maintenance_type_id": 1,
            "maintenance_date": date(2024, 1, 10),
            "maintenance_kilometers": 20000,
            "recurrency": 20000,
        },
        {
            "id": 2,
            "car_id": 1,
            "maintenance_type_id": 2,
            "maintenance_date": date(2024, 3, 5),
            "maintenance_kilometers": 25000,
            "recurrency": 10000,
        },
        {
            "id": 3,
            "car_id": 2,
            "maintenance_type_id": 2,
            "maintenance_date": date(2024, 2, 1),
            "maintenance_kilometers": 5000,
            "recurrency": 0,
        },
        {
            "id": 4,
            "car_id": 1,
            "maintenance_type_id": 1,
            "maintenance_date": date(2024, 6, 20),
            "maintenance_kilometers": 40000,
            "recurrency": 20000,
        },
    ]
    return {
        "drivers": drivers,
        "cars": cars,
        "maintenance_types": maintenance_types,
        "car_maintenance_history": car_maintenance_history,
        "oil_change_history": [],
        "maintenance_history": [],
    }


@pytest.fixture()
def fleet_tables() -> dict[str, list[dict[str, Any]]]:
    return build_fleet_tables()


@pytest.fixture()
def listing_store(fleet_tables: dict[str, list[dict[str, Any]]]) -> InMemoryListingStore:
    return InMemoryListingStore(fleet_tables)
