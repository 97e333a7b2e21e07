from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from fleet_tracker.domain.listing import ListQuery, ResourceSchema


class ListingStore(ABC):
    """
    Port for paginated, joined reads over the relational store.

    Contract (Preconditions):
        - ListQuery instances are produced by ListQueryEngine.resolve and are
          already validated; implementations trust them and do not re-validate
        - Every identifier used in SQL comes from the query's ResourceSchema;
          every request-derived value is bound as a parameter

    Implementations raise StoreUnavailable when the store cannot answer.
    """

    @abstractmethod
    def count(self, query: ListQuery) -> int:
        """
        Count rows of the primary table matching the query's filters.

        Ignores sorting and paging.
        """
        ...

    @abstractmethod
    def fetch_page(self, query: ListQuery) -> list[dict[str, Any]]:
        """
        Fetch one page of joined rows.

        Rows are ordered by the query's sort columns and then by the primary
        key in the same direction, and are keyed by the schema's column labels.
        """
        ...

    @abstractmethod
    def fetch_one(self, schema: ResourceSchema, record_id: int) -> dict[str, Any] | None:
        """Fetch a single joined row by primary key, or None."""
        ...
