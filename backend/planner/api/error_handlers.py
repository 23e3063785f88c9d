"""Error Handlers — global exception handlers for the Planner API.

Invariants:
    - PlannerError → its own status with the shared envelope
    - RequestValidationError → 400 with field-level details
    - SQLAlchemyError escaping a service → 500 DatabaseError, original error logged only
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Every JSON error body is {"success": false, "message", "error": {...}};
      clients that only read success/message keep working
    - SQLAlchemyError gets its own handler so store failures stay inside
      ExceptionMiddleware and never reach the server error middleware
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from planner.core.errors import (
    DatabaseError, ErrorCategory, ErrorSeverity, PlannerError, error_envelope,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_planner_error_handler(app)
    _register_validation_error_handler(app)
    _register_database_error_handler(app)
    _register_generic_error_handler(app)


def _register_planner_error_handler(app: FastAPI) -> None:
    """Register Planner domain/infrastructure error handler."""

    @app.exception_handler(PlannerError)
    async def planner_error_handler(request: Request, exc: PlannerError):
        """Handle all Planner domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"PlannerError: {getattr(exc, 'detail', exc.message)}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_database_error_handler(app: FastAPI) -> None:
    """Register handler for driver errors not already mapped by the session manager."""

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error(
            f"Database error on {request.url.path}: {exc}",
            exc_info=exc,
            extra={"error_code": "DATABASE_ERROR", "path": request.url.path},
        )
        error = DatabaseError(str(exc), "execute")
        return JSONResponse(
            status_code=error.http_status, content=error.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all; never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_envelope(
                "Server error", "INTERNAL_ERROR",
                ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
            ),
        )


# Absent or empty fields; anything else is a malformed body
_MISSING_FIELD_TYPES = frozenset({"missing", "string_too_short"})


def _validation_message(errors: list[dict]) -> str:
    if errors and all(e["type"] in _MISSING_FIELD_TYPES for e in errors):
        return "All fields are required"
    return "Invalid request body"


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return error_envelope(
        _validation_message(exc.errors()),
        "VALIDATION_ERROR",
        ErrorCategory.VALIDATION,
        ErrorSeverity.ERROR,
        details=[
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    )
