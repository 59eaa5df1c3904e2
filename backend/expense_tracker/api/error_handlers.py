"""Error Handlers - global exception handlers rendering the response envelope.

Invariants:
    - ExpenseTrackerError -> its own http_status and message
    - RequestValidationError -> 400 with field-level messages joined into `message`
    - Exception (catch-all) -> 500, never leaks internal details
    - Every error body is {code, data: null, message, success: false}

Design Decisions:
    - Three-layer handler: domain (ExpenseTrackerError), validation (Pydantic), catch-all (Exception)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from expense_tracker.core.errors import ExpenseTrackerError, error_envelope

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ExpenseTrackerError)
    async def domain_error_handler(request: Request, exc: ExpenseTrackerError):
        """Handle all expense tracker domain/storage errors."""
        log = logger.warning if exc.http_status < 500 else logger.error
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_envelope(
                status.HTTP_400_BAD_REQUEST, format_validation_errors(exc),
            ),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_envelope(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "An unexpected error occurred",
            ),
        )


def format_validation_errors(exc: RequestValidationError) -> str:
    """Join field errors as 'field: message' pairs, comma separated."""
    parts = []
    for e in exc.errors():
        loc = [str(part) for part in e["loc"] if part != "body"]
        field = ".".join(loc) or "body"
        parts.append(f"{field}: {e['msg']}")
    return ", ".join(parts)
