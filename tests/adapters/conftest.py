"""SQLite-backed session for exercising the SQLAlchemy adapters."""

from __future__ import annotations

from typing import Any, Iterator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from fleet_tracker.infra.db.models import (
    Base,
    CarMaintenanceRow,
    CarRow,
    DriverRow,
    MaintenanceTypeRow,
)


@pytest.fixture()
def sqlite_session() -> Iterator[Session]:
    """Fresh in-memory database with every fleet table created."""
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(engine)
    session = sessionmaker(bind=engine, expire_on_commit=False)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture()
def seeded_session(
    sqlite_session: Session, fleet_tables: dict[str, list[dict[str, Any]]]
) -> Session:
    """The same fleet as the in-memory tables, written through the ORM."""
    sqlite_session.add_all(DriverRow(**row) for row in fleet_tables["drivers"])
    sqlite_session.add_all(MaintenanceTypeRow(**row) for row in fleet_tables["maintenance_types"])
    sqlite_session.flush()
    sqlite_session.add_all(CarRow(**row) for row in fleet_tables["cars"])
    sqlite_session.flush()
    sqlite_session.add_all(
        CarMaintenanceRow(**row) for row in fleet_tables["car_maintenance_history"]
    )
    sqlite_session.commit()
    return sqlite_session
