"""Domain error classes.

Protocol-agnostic errors that represent business and data-access failures.
Protocol adapters (the FastAPI exception handlers) translate them into
HTTP responses.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Carries a machine-readable error code plus free-form context that
    adapters can forward to the client.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message
            **context: Additional context for the error (field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Business rule validation error.

    Examples:
        - Negative maintenance kilometers
        - Record id that is not a positive integer

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "recurrency", "message": "Must be >= 0"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class ClientInputError(DomainError):
    """Malformed listing parameters supplied by the caller.

    Raised before any query reaches the data store.

    Protocol mappings:
        - REST: 400 Bad Request
    """

    error_code: str = "INVALID_QUERY"


class InvalidSortField(ClientInputError):
    """Requested sort key is not in the resource's allowlist."""

    error_code: str = "INVALID_SORT_FIELD"

    def __init__(self, sort_field: str, allowed: list[str]) -> None:
        super().__init__(
            "Invalid sort field",
            field="sortField",
            value=sort_field,
            allowed=allowed,
        )


class InvalidLimit(ClientInputError):
    """Requested page size is not in the resource's allowlist."""

    error_code: str = "INVALID_LIMIT"

    def __init__(self, limit: int, allowed: list[int]) -> None:
        super().__init__(
            "Invalid limit value",
            field="limit",
            value=limit,
            allowed=allowed,
        )


class InvalidFilter(ClientInputError):
    """Filter value does not match the type or choices declared for its field."""

    error_code: str = "INVALID_FILTER"

    def __init__(self, name: str, value: Any, reason: str) -> None:
        super().__init__(
            f"Invalid value for filter '{name}': {reason}",
            field=name,
            value=value,
        )


class NotFoundError(DomainError):
    """Resource not found.

    Used by single-record fetches and by updates/deletes that match no row.

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Car", "Driver")
            identifier: Resource identifier
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class InternalError(DomainError):
    """Internal domain error (unexpected conditions).

    Should be logged for investigation.

    Protocol mappings:
        - REST: 500 Internal Server Error
    """

    error_code: str = "INTERNAL_ERROR"


class StoreUnavailable(InternalError):
    """The relational store failed to answer a query.

    The underlying driver message is kept in ``reason`` for diagnostics.
    Never retried by the caller and never paired with partial results.
    """

    error_code: str = "STORE_UNAVAILABLE"

    def __init__(self, reason: str, **context: Any) -> None:
        super().__init__(f"Data store unavailable: {reason}", reason=reason, **context)
