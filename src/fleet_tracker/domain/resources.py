"""Listable fleet resources.

One ResourceSchema per list endpoint. The registry is built once at import
time and exposed read-only; request handlers receive it through dependency
injection and pass the relevant schema to the listing engine.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from fleet_tracker.domain.listing import (
    FilterKind,
    FilterSpec,
    JoinSpec,
    LimitPolicy,
    ResourceSchema,
    SortFieldPolicy,
)

STANDARD_LIMITS = frozenset({10, 20, 50, 100})
EXTENDED_LIMITS = frozenset({10, 20, 50, 100, 200, 500})

CAR_STATUSES = frozenset({"active", "inactive"})


# ==============================================================================
# Cars and drivers
# ==============================================================================

CARS = ResourceSchema(
    name="cars",
    display_name="Car",
    primary_table="cars",
    items_key="cars",
    columns={
        "id": "cars.id",
        "make": "cars.make",
        "model": "cars.model",
        "license_plate": "cars.license_plate",
        "current_kilometers": "cars.current_kilometers",
        "next_tire_change": "cars.next_tire_change",
        "is_next_tire_change_bigger": "cars.is_next_tire_change_bigger",
        "next_oil_change": "cars.next_oil_change",
        "is_next_oil_change_bigger": "cars.is_next_oil_change_bigger",
        "driver_id": "cars.driver_id",
        "status": "cars.status",
        "driver_name": "drivers.name",
    },
    joins=(JoinSpec("drivers", "cars.driver_id", "drivers.id"),),
    sort_fields={
        "id": ("cars.id",),
        "make": ("cars.make",),
        "model": ("cars.model",),
        "license_plate": ("cars.license_plate",),
        "current_kilometers": ("cars.current_kilometers",),
        "next_tire_change": ("cars.next_tire_change",),
        "next_oil_change": ("cars.next_oil_change",),
        "driver_id": ("cars.driver_id",),
        "driver_name": ("drivers.name",),
        "status": ("cars.status",),
    },
    filters={
        "status": FilterSpec("cars.status", choices=CAR_STATUSES, match_all="all"),
        "driver_id": FilterSpec("cars.driver_id", kind=FilterKind.INTEGER),
    },
    allowed_limits=STANDARD_LIMITS,
)

DRIVERS = ResourceSchema(
    name="drivers",
    display_name="Driver",
    primary_table="drivers",
    items_key="drivers",
    columns={
        "id": "drivers.id",
        "name": "drivers.name",
        "license_number": "drivers.license_number",
    },
    sort_fields={
        "id": ("drivers.id",),
        "name": ("drivers.name",),
        "license_number": ("drivers.license_number",),
    },
    allowed_limits=STANDARD_LIMITS,
)


# ==============================================================================
# Car maintenance history
# ==============================================================================

_CAR_MAINTENANCE_COLUMNS = {
    "id": "car_maintenance_history.id",
    "car_id": "car_maintenance_history.car_id",
    "maintenance_type_id": "car_maintenance_history.maintenance_type_id",
    "maintenance_date": "car_maintenance_history.maintenance_date",
    "maintenance_kilometers": "car_maintenance_history.maintenance_kilometers",
    "recurrency": "car_maintenance_history.recurrency",
    "make": "cars.make",
    "model": "cars.model",
    "license_plate": "cars.license_plate",
    "maintenance_type": "maintenance_types.name",
}

_CAR_MAINTENANCE_JOINS = (
    JoinSpec("cars", "car_maintenance_history.car_id", "cars.id"),
    JoinSpec("maintenance_types", "car_maintenance_history.maintenance_type_id", "maintenance_types.id"),
)

_CAR_MAINTENANCE_SORT_FIELDS = {
    "id": ("car_maintenance_history.id",),
    "car_id": ("car_maintenance_history.car_id",),
    "maintenance_type": ("maintenance_types.name",),
    "maintenance_type_name": ("maintenance_types.name",),
    "maintenance_date": ("car_maintenance_history.maintenance_date",),
    "maintenance_kilometers": ("car_maintenance_history.maintenance_kilometers",),
    "recurrency": ("car_maintenance_history.recurrency",),
    "vehicle": ("cars.make", "cars.model"),
}

CAR_MAINTENANCE = ResourceSchema(
    name="car_maintenance",
    display_name="Car maintenance entry",
    primary_table="car_maintenance_history",
    items_key="carMaintenanceHistory",
    columns=_CAR_MAINTENANCE_COLUMNS,
    joins=_CAR_MAINTENANCE_JOINS,
    sort_fields=_CAR_MAINTENANCE_SORT_FIELDS,
    allowed_limits=STANDARD_LIMITS,
    limit_policy=LimitPolicy.SUBSTITUTE,
    sort_field_policy=SortFieldPolicy.REJECT,
)

CAR_MAINTENANCE_BY_CAR = ResourceSchema(
    name="car_maintenance_by_car",
    display_name="Car maintenance entry",
    primary_table="car_maintenance_history",
    items_key="carMaintenanceHistory",
    columns=_CAR_MAINTENANCE_COLUMNS,
    joins=_CAR_MAINTENANCE_JOINS,
    sort_fields=_CAR_MAINTENANCE_SORT_FIELDS,
    filters={
        "car_id": FilterSpec("car_maintenance_history.car_id", kind=FilterKind.INTEGER),
    },
    allowed_limits=EXTENDED_LIMITS,
    limit_policy=LimitPolicy.REJECT,
    sort_field_policy=SortFieldPolicy.REJECT,
)


# ==============================================================================
# Oil changes
# ==============================================================================

_OIL_CHANGE_COLUMNS = {
    "id": "oil_change_history.id",
    "car_id": "oil_change_history.car_id",
    "oil_change_date": "oil_change_history.oil_change_date",
    "oil_change_kilometers": "oil_change_history.oil_change_kilometers",
    "liters_quantity": "oil_change_history.liters_quantity",
    "price_per_liter": "oil_change_history.price_per_liter",
    "total_cost": "oil_change_history.total_cost",
    "observation": "oil_change_history.observation",
    "make": "cars.make",
    "model": "cars.model",
    "license_plate": "cars.license_plate",
}

_OIL_CHANGE_SORT_FIELDS = {
    "id": ("oil_change_history.id",),
    "car_id": ("oil_change_history.car_id",),
    "oil_change_date": ("oil_change_history.oil_change_date",),
    "oil_change_kilometers": ("oil_change_history.oil_change_kilometers",),
    "liters_quantity": ("oil_change_history.liters_quantity",),
    "price_per_liter": ("oil_change_history.price_per_liter",),
    "total_cost": ("oil_change_history.total_cost",),
    "license_plate": ("cars.license_plate",),
    "vehicle": ("cars.make", "cars.model"),
}

OIL_CHANGES = ResourceSchema(
    name="oil_changes",
    display_name="Oil change",
    primary_table="oil_change_history",
    items_key="oilChangeHistory",
    columns=_OIL_CHANGE_COLUMNS,
    joins=(JoinSpec("cars", "oil_change_history.car_id", "cars.id"),),
    sort_fields=_OIL_CHANGE_SORT_FIELDS,
    allowed_limits=STANDARD_LIMITS,
)

OIL_CHANGES_BY_CAR = ResourceSchema(
    name="oil_changes_by_car",
    display_name="Oil change",
    primary_table="oil_change_history",
    items_key="oilChangeHistory",
    columns=_OIL_CHANGE_COLUMNS,
    joins=(JoinSpec("cars", "oil_change_history.car_id", "cars.id"),),
    sort_fields=_OIL_CHANGE_SORT_FIELDS,
    filters={
        "car_id": FilterSpec("oil_change_history.car_id", kind=FilterKind.INTEGER),
    },
    allowed_limits=STANDARD_LIMITS,
)


# ==============================================================================
# General maintenance history
# ==============================================================================

MAINTENANCE_HISTORY = ResourceSchema(
    name="maintenance_history",
    display_name="Maintenance history entry",
    primary_table="maintenance_history",
    items_key="maintenanceHistory",
    columns={
        "id": "maintenance_history.id",
        "car_id": "maintenance_history.car_id",
        "maintenance_type_id": "maintenance_history.maintenance_type_id",
        "maintenance_date": "maintenance_history.maintenance_date",
        "maintenance_kilometers": "maintenance_history.maintenance_kilometers",
        "recurrency": "maintenance_history.recurrency",
        "cost": "maintenance_history.cost",
        "observation": "maintenance_history.observation",
        "make": "cars.make",
        "model": "cars.model",
        "license_plate": "cars.license_plate",
        "maintenance_type_name": "maintenance_types.name",
    },
    joins=(
        JoinSpec("cars", "maintenance_history.car_id", "cars.id"),
        JoinSpec("maintenance_types", "maintenance_history.maintenance_type_id", "maintenance_types.id"),
    ),
    sort_fields={
        "id": ("maintenance_history.id",),
        "vehicle": ("cars.make", "cars.model"),
        "maintenance_type_name": ("maintenance_types.name",),
        "maintenance_date": ("maintenance_history.maintenance_date",),
        "maintenance_kilometers": ("maintenance_history.maintenance_kilometers",),
        "recurrency": ("maintenance_history.recurrency",),
        "cost": ("maintenance_history.cost",),
    },
    allowed_limits=STANDARD_LIMITS,
)


# ==============================================================================
# Maintenance types
# ==============================================================================

MAINTENANCE_TYPES = ResourceSchema(
    name="maintenance_types",
    display_name="Maintenance type",
    primary_table="maintenance_types",
    items_key="maintenanceTypes",
    columns={
        "id": "maintenance_types.id",
        "name": "maintenance_types.name",
        "description": "maintenance_types.description",
        "recurrency": "maintenance_types.recurrency",
    },
    sort_fields={
        "id": ("maintenance_types.id",),
        "name": ("maintenance_types.name",),
        "recurrency": ("maintenance_types.recurrency",),
    },
    allowed_limits=STANDARD_LIMITS,
)


RESOURCE_SCHEMAS: Mapping[str, ResourceSchema] = MappingProxyType(
    {
        schema.name: schema
        for schema in (
            CARS,
            DRIVERS,
            CAR_MAINTENANCE,
            CAR_MAINTENANCE_BY_CAR,
            OIL_CHANGES,
            OIL_CHANGES_BY_CAR,
            MAINTENANCE_HISTORY,
            MAINTENANCE_TYPES,
        )
    }
)
