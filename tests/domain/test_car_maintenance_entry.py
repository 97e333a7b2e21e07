from __future__ import annotations

from datetime import date

import pytest

from fleet_tracker.domain.car_maintenance import CarMaintenanceEntry
from fleet_tracker.domain.errors import ValidationError


def make_entry(**overrides: object) -> CarMaintenanceEntry:
    fields: dict[str, object] = {
        "car_id": 1,
        "maintenance_type_id": 2,
        "maintenance_date": date(2024, 5, 17),
        "maintenance_kilometers": 85000,
        "recurrency": 10000,
    }
    fields.update(overrides)
    return CarMaintenanceEntry(**fields)  # type: ignore[arg-type]


def test_valid_entry_passes() -> None:
    make_entry().validate()


def test_one_off_maintenance_has_zero_recurrency() -> None:
    make_entry(recurrency=0, maintenance_kilometers=0).validate()


def test_collects_every_field_error() -> None:
    entry = make_entry(car_id=0, maintenance_type_id=-1, maintenance_kilometers=-5, recurrency=-1)

    with pytest.raises(ValidationError) as exc_info:
        entry.validate()

    fields = [error["field"] for error in exc_info.value.errors or []]
    assert fields == ["car_id", "maintenance_type_id", "maintenance_kilometers", "recurrency"]
