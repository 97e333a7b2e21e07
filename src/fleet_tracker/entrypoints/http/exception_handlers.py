"""FastAPI exception handlers.

Domain errors carry their own machine-readable code; this module decides
which HTTP status each error family maps to and renders every failure as
``{"detail", "code", "errors"?}``. Rejected listing parameters also carry
``field``, ``value`` and, for allowlists, ``allowed``.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from fleet_tracker.domain.errors import (
    ClientInputError,
    DomainError,
    InternalError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

HTTP_422 = 422  # HTTP_422_UNPROCESSABLE_CONTENT

# Checked in order; the first matching base class wins
STATUS_BY_ERROR: tuple[tuple[type[DomainError], int], ...] = (
    (ValidationError, HTTP_422),
    (ClientInputError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (InternalError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def status_code_for(exc: DomainError) -> int:
    """HTTP status for a domain error; unmapped families are client errors."""
    for error_cls, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_cls):
            return status_code
    return status.HTTP_400_BAD_REQUEST


# Context a client can act on; everything else stays in the logs
CLIENT_CONTEXT_KEYS = ("field", "value", "allowed")


def error_body(exc: DomainError) -> dict[str, Any]:
    payload = exc.to_dict()
    body: dict[str, Any] = {"detail": payload["message"], "code": payload["code"]}
    if "errors" in payload:
        body["errors"] = payload["errors"]
    if isinstance(exc, ClientInputError):
        body.update({key: exc.context[key] for key in CLIENT_CONTEXT_KEYS if key in exc.context})
    return body


def _request_context(request: Request) -> dict[str, str]:
    return {"path": request.url.path, "method": request.method}


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Translate a DomainError into its HTTP response.

    - ValidationError → 422
    - InvalidSortField / InvalidLimit / InvalidFilter → 400
    - NotFoundError → 404
    - InternalError / StoreUnavailable → 500, logged at ERROR with context
    """
    status_code = status_code_for(exc)

    if status_code >= 500:
        logger.error(
            "Domain error occurred",
            extra={
                "error_code": exc.error_code,
                "error_message": exc.message,
                "context": exc.context,
                **_request_context(request),
            },
        )
    else:
        logger.info(
            "Client error",
            extra={"error_code": exc.error_code, **_request_context(request)},
        )

    return JSONResponse(status_code=status_code, content=error_body(exc))


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render FastAPI/Pydantic request validation failures.

    Listing parameters arrive as plain strings, so in practice these come from
    write payloads (e.g. a maintenance_date that is not a date) and integer
    path ids on PUT/DELETE.
    """
    errors = [
        {
            # "body"/"query"/"path" only say where the value came from
            "field": ".".join(
                str(loc) for loc in error["loc"] if loc not in ("body", "query", "path")
            ),
            "message": error["msg"],
            "code": error["type"],
        }
        for error in exc.errors()
    ]

    logger.info(
        "Request validation error",
        extra={"errors": errors, **_request_context(request)},
    )

    return JSONResponse(
        status_code=HTTP_422,
        content={
            "detail": "Invalid request parameters",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        },
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: log the traceback, return an opaque 500."""
    logger.error(
        "Unexpected error occurred",
        exc_info=exc,
        extra={"error_type": type(exc).__name__, **_request_context(request)},
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An unexpected error occurred", "code": "INTERNAL_ERROR"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the handlers above to ``app``; call once from build_app()."""
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)
