"""Error Handlers — global exception handlers for the Students API.

Invariants:
    - StudentsApiError → structured JSON with error code, message, severity
    - Not-found answered with settings.not_found_status (503 unless configured 404)
    - RequestValidationError → 400 with field-level error details
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (StudentsApiError), validation (Pydantic), catch-all (Exception)
    - Not-found status resolved per request from cached settings, so callers that
      want 404 flip one environment variable instead of a code path
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.config import get_settings
from app.core.errors import ErrorCategory, ErrorSeverity, StudentsApiError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_students_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def resolve_status(exc: StudentsApiError) -> int:
    """HTTP status for a domain/infrastructure error."""
    if exc.category is ErrorCategory.RESOURCE_NOT_FOUND:
        return get_settings().not_found_status
    return exc.http_status


def _register_students_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(StudentsApiError)
    async def students_error_handler(request: Request, exc: StudentsApiError):
        """Handle all Students API domain/infrastructure errors."""
        status_code = resolve_status(exc)
        log = logger.error if status_code >= 500 else logger.info
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "student_id": exc.context.student_id,
                "operation": exc.context.operation,
            },
        )
        return JSONResponse(
            status_code=status_code, content=exc.to_response(),
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


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": ErrorCategory.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": ErrorCategory.VALIDATION.value,
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
