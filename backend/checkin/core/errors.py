"""Error Hierarchy — the four semantic failure kinds of the data-access layer.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error carries the originating operation (e.g. "FacilityRepository.update")
    - ServerError always retains the low-level storage exception as its cause
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with CheckinError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Where and when an error was raised."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class CheckinError(Exception):
    """Base exception for all check-in manager errors."""

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

    @property
    def operation(self) -> str | None:
        return self.context.operation

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "operation": self.context.operation,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class BadRequest(CheckinError):
    """Input failed validation."""
    def __init__(
        self, message: str, operation: str | None = None, field: str | None = None,
    ):
        super().__init__(
            message, "BAD_REQUEST", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ErrorContext(operation=operation), 400,
        )
        self.field = field


class NotFound(CheckinError):
    """Referenced entity does not exist."""
    def __init__(self, message: str, operation: str | None = None):
        super().__init__(
            message, "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ErrorContext(operation=operation), 404,
        )


class NotUnique(CheckinError):
    """A write would violate (or did violate) a uniqueness rule."""
    def __init__(self, message: str, operation: str | None = None):
        super().__init__(
            message, "NOT_UNIQUE", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ErrorContext(operation=operation), 400,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class ServerError(CheckinError):
    """Storage layer failed; the original exception is kept as the cause."""
    def __init__(self, cause: BaseException, operation: str | None = None):
        super().__init__(
            f"Storage error in {operation or 'unknown operation'}",
            "SERVER_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL,
            ErrorContext(
                operation=operation,
                debug_info={"cause_type": type(cause).__name__},
            ),
            500,
        )
        self.cause = cause
        self.__cause__ = cause
