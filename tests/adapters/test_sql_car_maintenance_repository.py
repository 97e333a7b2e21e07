"""Test suite for SqlCarMaintenanceRepository against in-memory SQLite."""

from __future__ import annotations

from datetime import date
from unittest.mock import Mock

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from fleet_tracker.adapters.sql_car_maintenance_repository import SqlCarMaintenanceRepository
from fleet_tracker.domain.car_maintenance import CarMaintenanceEntry
from fleet_tracker.domain.errors import StoreUnavailable
from fleet_tracker.infra.db.models import CarMaintenanceRow


@pytest.fixture()
def entry() -> CarMaintenanceEntry:
    return CarMaintenanceEntry(
        car_id=3,
        maintenance_type_id=2,
        maintenance_date=date(2024, 9, 30),
        maintenance_kilometers=3500,
        recurrency=15000,
    )


def test_add_returns_generated_id(seeded_session: Session, entry: CarMaintenanceEntry) -> None:
    repo = SqlCarMaintenanceRepository(seeded_session)

    entry_id = repo.add(entry)

    row = seeded_session.get(CarMaintenanceRow, entry_id)
    assert entry_id == 5
    assert row is not None
    assert row.car_id == 3
    assert row.maintenance_date == date(2024, 9, 30)


def test_update_overwrites_all_fields(seeded_session: Session, entry: CarMaintenanceEntry) -> None:
    repo = SqlCarMaintenanceRepository(seeded_session)

    assert repo.update(1, entry) is True

    row = seeded_session.execute(
        select(CarMaintenanceRow).where(CarMaintenanceRow.id == 1)
    ).scalar_one()
    seeded_session.refresh(row)
    assert row.car_id == 3
    assert row.maintenance_type_id == 2
    assert row.recurrency == 15000


def test_update_missing_entry_returns_false(seeded_session: Session, entry: CarMaintenanceEntry) -> None:
    assert SqlCarMaintenanceRepository(seeded_session).update(999, entry) is False


def test_delete_existing_and_missing(seeded_session: Session) -> None:
    repo = SqlCarMaintenanceRepository(seeded_session)

    assert repo.delete(4) is True
    assert repo.delete(4) is False


def test_write_failure_raises_store_unavailable(entry: CarMaintenanceEntry) -> None:
    session = Mock(spec=Session)
    session.flush.side_effect = IntegrityError(
        "INSERT", {}, Exception("violates foreign key constraint")
    )

    with pytest.raises(StoreUnavailable) as exc_info:
        SqlCarMaintenanceRepository(session).add(entry)

    assert "foreign key" in exc_info.value.message
