#!/usr/bin/env python3
"""
Seed the fleet tables with deterministic random data.

Features:
- Deterministic: fixed seed → same dataset every run
- Idempotent: safe to run multiple times (clears before seeding)
- Consistent histories: service records never exceed a car's odometer

Usage:
    DATABASE_URL=postgresql+psycopg://... python scripts/seed_fleet.py
"""

from __future__ import annotations

import random
import sys
from datetime import date, timedelta
from decimal import Decimal

from sqlalchemy.orm import Session

from fleet_tracker.infra.db.models import (
    CarMaintenanceRow,
    CarRow,
    DriverRow,
    MaintenanceHistoryRow,
    MaintenanceTypeRow,
    OilChangeRow,
)
from fleet_tracker.infra.db.session import get_session


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42
NUM_DRIVERS = 12
NUM_CARS = 25
SERVICE_EVENTS_PER_CAR = (2, 8)
HISTORY_START = date(2022, 1, 1)


# ==============================================================================
# Fleet Data
# ==============================================================================

MODELS_BY_MAKE = {
    "Toyota": ["Corolla", "Hilux", "Yaris"],
    "Volkswagen": ["Gol", "Amarok", "Saveiro"],
    "Fiat": ["Strada", "Toro", "Uno"],
    "Chevrolet": ["Onix", "S10", "Spin"],
    "Renault": ["Kangoo", "Duster", "Master"],
    "Ford": ["Ranger", "Transit", "Ka"],
}

FIRST_NAMES = ["Ana", "Bruno", "Carla", "Diego", "Elisa", "Felipe", "Gabriela", "Hugo"]
LAST_NAMES = ["Silva", "Souza", "Costa", "Pereira", "Almeida", "Ribeiro", "Gomes"]

# (name, recurrency in km)
MAINTENANCE_TYPES = [
    ("Tire rotation", 10000),
    ("Brake pads", 30000),
    ("Air filter", 15000),
    ("Timing belt", 60000),
    ("Alignment and balancing", 10000),
    ("Coolant flush", 40000),
]

OIL_PRICE_PER_LITER = (Decimal("38.00"), Decimal("72.00"))
OIL_CHANGE_INTERVAL_KM = 10000


def license_plate() -> str:
    letters = "".join(random.choices("ABCDEFGHJKLMNPRSTUVWXYZ", k=3))
    return f"{letters}{random.randint(0, 9)}{random.choice('ABCDEFGHIJ')}{random.randint(10, 99)}"


def money(value: float) -> Decimal:
    return Decimal(str(value)).quantize(Decimal("0.01"))


# ==============================================================================
# Seed Generation
# ==============================================================================


def generate_drivers() -> list[DriverRow]:
    return [
        DriverRow(
            name=f"{random.choice(FIRST_NAMES)} {random.choice(LAST_NAMES)}",
            license_number=f"{random.randint(10**10, 10**11 - 1)}",
        )
        for _ in range(NUM_DRIVERS)
    ]


def generate_car(drivers: list[DriverRow]) -> CarRow:
    make = random.choice(list(MODELS_BY_MAKE))
    kilometers = random.randint(5000, 250000)

    return CarRow(
        make=make,
        model=random.choice(MODELS_BY_MAKE[make]),
        license_plate=license_plate(),
        current_kilometers=kilometers,
        next_tire_change=kilometers + random.randint(-5000, 40000),
        is_next_tire_change_bigger=False,
        next_oil_change=kilometers + random.randint(-2000, OIL_CHANGE_INTERVAL_KM),
        is_next_oil_change_bigger=False,
        # Roughly one car in five is unassigned
        driver_id=random.choice(drivers).id if random.random() > 0.2 else None,
        status="active" if random.random() > 0.15 else "inactive",
    )


def service_timeline(car: CarRow) -> list[tuple[date, int]]:
    """Ascending (date, odometer) pairs that end at or below the car's current km."""
    events = random.randint(*SERVICE_EVENTS_PER_CAR)
    kilometers = sorted(random.sample(range(1000, car.current_kilometers), k=events))
    days = sorted(random.sample(range(0, 1000), k=events))
    return [(HISTORY_START + timedelta(days=d), km) for d, km in zip(days, kilometers)]


def generate_history(
    session: Session, cars: list[CarRow], types: list[MaintenanceTypeRow]
) -> tuple[int, int, int]:
    recurrency_by_type = dict(MAINTENANCE_TYPES)
    counts = [0, 0, 0]

    for car in cars:
        for when, km in service_timeline(car):
            maintenance_type = random.choice(types)
            session.add(
                CarMaintenanceRow(
                    car_id=car.id,
                    maintenance_type_id=maintenance_type.id,
                    maintenance_date=when,
                    maintenance_kilometers=km,
                    recurrency=recurrency_by_type[maintenance_type.name],
                )
            )
            counts[0] += 1

            if random.random() < 0.5:
                session.add(
                    MaintenanceHistoryRow(
                        car_id=car.id,
                        maintenance_type_id=maintenance_type.id,
                        maintenance_date=when,
                        maintenance_kilometers=km,
                        recurrency=recurrency_by_type[maintenance_type.name],
                        cost=money(random.uniform(80, 1500)),
                    )
                )
                counts[1] += 1

        for when, km in service_timeline(car):
            liters = money(random.choice([3.5, 4.0, 4.5, 5.0, 6.0]))
            price = money(random.uniform(*(float(p) for p in OIL_PRICE_PER_LITER)))
            session.add(
                OilChangeRow(
                    car_id=car.id,
                    oil_change_date=when,
                    oil_change_kilometers=km,
                    liters_quantity=liters,
                    price_per_liter=price,
                    total_cost=(liters * price).quantize(Decimal("0.01")),
                )
            )
            counts[2] += 1

    return counts[0], counts[1], counts[2]


def seed_fleet(seed: int = RANDOM_SEED) -> None:
    """
    Seed the database with a random fleet and its service history.

    Args:
        seed: Random seed for deterministic results
    """
    random.seed(seed)

    print(f"🌱 Seeding fleet (seed={seed})...")

    with get_session() as session:
        # Step 1: Clear existing data, children first (idempotent)
        print("🗑️  Clearing existing data...")
        for row_type in (
            OilChangeRow,
            MaintenanceHistoryRow,
            CarMaintenanceRow,
            CarRow,
            MaintenanceTypeRow,
            DriverRow,
        ):
            session.query(row_type).delete()

        # Step 2: Reference data
        drivers = generate_drivers()
        types = [
            MaintenanceTypeRow(name=name, recurrency=recurrency)
            for name, recurrency in MAINTENANCE_TYPES
        ]
        session.add_all([*drivers, *types])
        session.flush()

        # Step 3: Cars, then their histories
        cars = [generate_car(drivers) for _ in range(NUM_CARS)]
        session.add_all(cars)
        session.flush()

        maintenance, history, oil_changes = generate_history(session, cars, types)
        session.flush()

        print(f"✅ Seeded {len(drivers)} drivers and {len(cars)} cars")
        print(f"   {maintenance} car maintenance entries")
        print(f"   {history} maintenance history entries")
        print(f"   {oil_changes} oil changes")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed_fleet()
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
