"""Error Hierarchy - typed, categorized exceptions for every failure mode of the API.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400/404) are recoverable; storage errors (500/503) are critical
    - to_response() produces the {code, data, message, success} envelope
    - Catch-all responses never leak internal details

Design Decisions:
    - Single hierarchy with ExpenseTrackerError base: one FastAPI handler renders all
    - ErrorContext carries the resource and operation for structured logs only
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories, one per taxonomy bucket."""
    INVALID_ARGUMENT = "invalid_argument"
    RESOURCE_NOT_FOUND = "resource_not_found"
    UNAVAILABLE = "unavailable"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logging and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class ExpenseTrackerError(Exception):
    """Base exception for all expense tracker errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the standard response envelope."""
        return error_envelope(self.http_status, self.message)


def error_envelope(code: int, message: str) -> dict:
    """Envelope for a failed request (data is always null)."""
    return {"code": code, "data": None, "message": message, "success": False}


# ─── Client Errors (400-level) ──────────────────────────────────

class InvalidArgumentError(ExpenseTrackerError):
    """Malformed id, date, boolean or otherwise unusable request argument."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_ARGUMENT", ErrorCategory.INVALID_ARGUMENT,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class ResourceNotFoundError(ExpenseTrackerError):
    """Requested or referenced resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Storage Errors (500-level) ─────────────────────────────────

class StorageUnavailableError(ExpenseTrackerError):
    """Storage connection could not be established (connect or ping failed)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Storage unavailable: {message}",
            "STORAGE_UNAVAILABLE", ErrorCategory.UNAVAILABLE,
            ErrorSeverity.CRITICAL, context, 503,
        )


class DatabaseError(ExpenseTrackerError):
    """Driver error during an otherwise valid operation."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
