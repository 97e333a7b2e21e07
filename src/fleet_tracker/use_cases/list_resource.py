from __future__ import annotations

import logging

from fleet_tracker.domain.errors import InvalidFilter, InvalidLimit, InvalidSortField
from fleet_tracker.domain.listing import (
    LimitPolicy,
    ListQuery,
    ListRequest,
    ListResult,
    ResourceSchema,
    SortFieldPolicy,
    SortOrder,
    parse_leading_int,
    total_pages_for,
)
from fleet_tracker.ports.listing_store import ListingStore

logger = logging.getLogger(__name__)


class ListQueryEngine:
    """
    Paginated, filterable, sortable listing for any registered resource.

    Every list endpoint goes through this one use case:
    1. resolve: validate the untrusted request against the resource schema
    2. count: total rows matching the filters (unsorted, unpaginated)
    3. fetch_page: joined rows for the requested page, skipped when the
       page starts past the last matching row

    Validation happens entirely before the first query, so a rejected request
    never touches the store. The engine holds no state between calls.
    """

    def __init__(self, listing_store: ListingStore) -> None:
        self._store = listing_store

    def execute(self, schema: ResourceSchema, request: ListRequest) -> ListResult:
        """
        Execute a listing request.

        Args:
            schema: Resource being listed
            request: Raw listing parameters

        Returns:
            ListResult with the page rows and pagination metadata

        Raises:
            InvalidSortField: Unknown sort key on a strict resource
            InvalidLimit: Page size outside the allowlist on a strict resource
            InvalidFilter: Filter value of the wrong type
            StoreUnavailable: The store failed (propagated unchanged)
        """
        query = self.resolve(schema, request)

        total_count = self._store.count(query)
        # A page past the last row is empty; its offset may not even fit the store's integers
        rows = self._store.fetch_page(query) if query.offset < total_count else []

        logger.debug(
            "Listed resource",
            extra={
                "resource": schema.name,
                "page": query.page,
                "limit": query.limit,
                "total_count": total_count,
                "returned": len(rows),
            },
        )

        return ListResult(
            rows=rows,
            total_count=total_count,
            total_pages=total_pages_for(total_count, query.limit),
            current_page=query.page,
            limit=query.limit,
            valid_limits=schema.valid_limits,
        )

    def resolve(self, schema: ResourceSchema, request: ListRequest) -> ListQuery:
        """
        Turn an untrusted request into a validated query plan. Performs no I/O.

        Raises:
            InvalidSortField, InvalidLimit, InvalidFilter
        """
        return ListQuery(
            schema=schema,
            page=self._resolve_page(request.page),
            limit=self._resolve_limit(schema, request.limit),
            sort_columns=self._resolve_sort_columns(schema, request.sort_field),
            sort_order=SortOrder.parse(request.sort_order),
            filters=self._resolve_filters(schema, request),
        )

    @staticmethod
    def _resolve_page(raw: str | int | None) -> int:
        # Never rejected: missing, garbage, zero and negative pages become 1
        page = parse_leading_int(raw)
        if page is None or page < 1:
            return 1
        return page

    @staticmethod
    def _resolve_limit(schema: ResourceSchema, raw: str | int | None) -> int:
        limit = parse_leading_int(raw)
        if limit is None or limit == 0:
            return schema.default_limit
        if limit in schema.allowed_limits:
            return limit
        if schema.limit_policy is LimitPolicy.REJECT:
            raise InvalidLimit(limit, schema.valid_limits)
        return schema.default_limit

    @staticmethod
    def _resolve_sort_columns(schema: ResourceSchema, raw: str | None) -> tuple[str, ...]:
        sort_field = raw.strip() if raw else ""
        if not sort_field:
            return schema.sort_fields[schema.default_sort_field]
        if sort_field in schema.sort_fields:
            return schema.sort_fields[sort_field]
        if schema.sort_field_policy is SortFieldPolicy.REJECT:
            raise InvalidSortField(sort_field, sorted(schema.sort_fields))
        return schema.sort_fields[schema.default_sort_field]

    @staticmethod
    def _resolve_filters(schema: ResourceSchema, request: ListRequest) -> dict[str, object]:
        resolved: dict[str, object] = {}
        for name, raw in request.filters.items():
            spec = schema.filters.get(name)
            if spec is None:
                raise InvalidFilter(name, raw, "not a filterable field")
            value = spec.coerce(name, raw)
            if value is not None:
                resolved[spec.column] = value
        return resolved
