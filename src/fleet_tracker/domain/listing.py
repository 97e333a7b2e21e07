from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from fleet_tracker.domain.errors import InvalidFilter

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")
_STRICT_INT = re.compile(r"^\s*[+-]?[0-9]+\s*$")
_RECORD_ID = re.compile(r"^\s*[0-9]+\s*$")

# Signed 64-bit range; larger values cannot be bound to an INTEGER parameter
MIN_INTEGER = -(2**63)
MAX_INTEGER = 2**63 - 1


def parse_leading_int(raw: str | int | None) -> int | None:
    """
    Parse the leading integer of a raw query value.

    Mirrors how browsers and JS backends read numeric query strings:
    "20abc" -> 20, "abc" -> None, None -> None.
    """
    if raw is None:
        return None
    if isinstance(raw, int):
        return raw
    match = _LEADING_INT.match(raw)
    return int(match.group(1)) if match else None


def parse_record_id(raw: str) -> int | None:
    """Primary key from a path segment: ASCII digits, 1..MAX_INTEGER, else None."""
    if not _RECORD_ID.match(raw):
        return None
    record_id = int(raw)
    if not 1 <= record_id <= MAX_INTEGER:
        return None
    return record_id


def total_pages_for(total_count: int, limit: int) -> int:
    """ceil(total_count / limit); an empty set has zero pages."""
    return (total_count + limit - 1) // limit


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, raw: str | None) -> SortOrder:
        """Case-insensitive; anything other than "desc" is ascending."""
        if raw is not None and raw.strip().lower() == cls.DESC.value:
            return cls.DESC
        return cls.ASC


class LimitPolicy(str, Enum):
    """What to do with a page size outside the allowlist."""

    SUBSTITUTE = "substitute"
    REJECT = "reject"


class SortFieldPolicy(str, Enum):
    """What to do with a sort key outside the allowlist."""

    FALLBACK = "fallback"
    REJECT = "reject"


class FilterKind(str, Enum):
    INTEGER = "integer"
    TEXT = "text"


@dataclass(frozen=True, slots=True)
class FilterSpec:
    """
    Declares one filterable field of a resource.

    Attributes:
        column: Qualified column on the resource's primary table ("cars.status")
        kind: Expected value type
        choices: Allowlisted text values (None accepts any text)
        match_all: Sentinel value meaning "do not filter" (e.g. "all")
    """

    column: str
    kind: FilterKind = FilterKind.TEXT
    choices: frozenset[str] | None = None
    match_all: str | None = None

    def coerce(self, name: str, raw: str | int | None) -> Any | None:
        """
        Convert a raw filter value into a bindable value.

        Returns None when the filter should not produce a predicate.

        Raises:
            InvalidFilter: If the value does not match the declared kind/choices
        """
        if raw is None:
            return None
        if isinstance(raw, str):
            raw = raw.strip()
            if raw == "":
                return None
            if self.match_all is not None and raw.lower() == self.match_all.lower():
                return None

        if self.kind is FilterKind.INTEGER:
            if isinstance(raw, bool):
                raise InvalidFilter(name, raw, "must be an integer")
            if not isinstance(raw, int):
                if not _STRICT_INT.match(raw):
                    raise InvalidFilter(name, raw, "must be an integer")
                raw = int(raw)
            if not MIN_INTEGER <= raw <= MAX_INTEGER:
                raise InvalidFilter(name, raw, "out of range")
            return raw

        value = str(raw)
        if self.choices is not None and value not in self.choices:
            raise InvalidFilter(name, value, f"must be one of {sorted(self.choices)}")
        return value


@dataclass(frozen=True, slots=True)
class JoinSpec:
    """LEFT JOIN of ``table`` on ``local_column = remote_column`` (both qualified)."""

    table: str
    local_column: str
    remote_column: str


def _table_of(qualified: str) -> str:
    table, sep, column = qualified.partition(".")
    if not sep or not table or not column:
        raise ValueError(f"Column reference must be qualified as 'table.column': {qualified!r}")
    return table


@dataclass(frozen=True, slots=True)
class ResourceSchema:
    """
    Static description of a listable resource.

    Schemas are built once at startup and shared read-only between requests.
    Every SQL identifier the listing engine emits comes from a schema, never
    from the request.
    """

    name: str
    display_name: str
    primary_table: str
    items_key: str
    columns: Mapping[str, str]
    sort_fields: Mapping[str, tuple[str, ...]]
    allowed_limits: frozenset[int]
    joins: tuple[JoinSpec, ...] = ()
    filters: Mapping[str, FilterSpec] = field(default_factory=dict)
    default_limit: int = 10
    default_sort_field: str = "id"
    limit_policy: LimitPolicy = LimitPolicy.SUBSTITUTE
    sort_field_policy: SortFieldPolicy = SortFieldPolicy.FALLBACK

    def __post_init__(self) -> None:
        # Freeze the mappings so a shared schema cannot be mutated by a request
        object.__setattr__(self, "columns", MappingProxyType(dict(self.columns)))
        object.__setattr__(self, "sort_fields", MappingProxyType(dict(self.sort_fields)))
        object.__setattr__(self, "filters", MappingProxyType(dict(self.filters)))
        object.__setattr__(self, "allowed_limits", frozenset(self.allowed_limits))
        self.validate()

    @property
    def primary_key(self) -> str:
        return f"{self.primary_table}.id"

    @property
    def valid_limits(self) -> list[int]:
        return sorted(self.allowed_limits)

    def tables(self) -> set[str]:
        return {self.primary_table, *(join.table for join in self.joins)}

    def validate(self) -> None:
        """
        Check the schema is internally consistent.

        Raises:
            ValueError: On any misconfiguration (fails at startup, not per request)
        """
        if not self.allowed_limits or any(limit <= 0 for limit in self.allowed_limits):
            raise ValueError(f"{self.name}: allowed_limits must be positive integers")
        if self.default_limit not in self.allowed_limits:
            raise ValueError(f"{self.name}: default_limit must be one of allowed_limits")
        if self.default_sort_field not in self.sort_fields:
            raise ValueError(f"{self.name}: default_sort_field must be a sortable field")

        known_tables = self.tables()
        referenced = [*self.columns.values()]
        for columns in self.sort_fields.values():
            if not columns:
                raise ValueError(f"{self.name}: sort fields must map to at least one column")
            referenced.extend(columns)
        for join in self.joins:
            referenced.extend([join.local_column, join.remote_column])
        for qualified in referenced:
            if _table_of(qualified) not in known_tables:
                raise ValueError(f"{self.name}: {qualified!r} is not on a joined table")

        # COUNT(*) runs against the primary table alone
        for name, spec in self.filters.items():
            if _table_of(spec.column) != self.primary_table:
                raise ValueError(f"{self.name}: filter {name!r} must target {self.primary_table}")


@dataclass(frozen=True, slots=True)
class ListRequest:
    """Untrusted listing parameters as they arrive from the caller."""

    page: str | int | None = None
    limit: str | int | None = None
    sort_field: str | None = None
    sort_order: str | None = None
    filters: Mapping[str, str | int | None] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ListQuery:
    """A validated query plan; safe to hand to a ListingStore."""

    schema: ResourceSchema
    page: int
    limit: int
    sort_columns: tuple[str, ...]
    sort_order: SortOrder
    filters: Mapping[str, Any] = field(default_factory=dict)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True, slots=True)
class ListResult:
    rows: list[dict[str, Any]]
    total_count: int
    total_pages: int
    current_page: int
    limit: int
    valid_limits: list[int]
