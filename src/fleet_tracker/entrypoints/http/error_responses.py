"""Response models documenting the error body in the OpenAPI schema.

The handlers in exception_handlers.py build the same shape as plain dicts;
these models exist so routes can declare it under ``responses=``.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """One rejected field of a write payload or record id."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "maintenance_kilometers",
                "message": "Must be >= 0",
                "code": "INVALID_VALUE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Body of every non-2xx response.

    ``code`` is stable and meant for clients to branch on; ``detail`` is
    for humans. ``errors`` is only present for 422 responses; ``field``,
    ``value`` and ``allowed`` only for rejected listing parameters (400).
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None
    field: str | None = None
    value: Any = None
    allowed: list[Any] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "detail": "Invalid sort field",
                    "code": "INVALID_SORT_FIELD",
                    "field": "sortField",
                    "value": "price",
                    "allowed": ["car_id", "id", "maintenance_date"],
                },
                {
                    "detail": "Invalid limit value",
                    "code": "INVALID_LIMIT",
                    "field": "limit",
                    "value": 7,
                    "allowed": [10, 20, 50, 100, 200, 500],
                },
                {"detail": "Car with identifier '42' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Data store unavailable: connection refused",
                    "code": "STORE_UNAVAILABLE",
                },
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "recurrency",
                            "message": "Must be >= 0",
                            "code": "INVALID_VALUE",
                        },
                    ],
                },
            ]
        }
    )
