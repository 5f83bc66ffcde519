"""Error Hierarchy: typed, categorized exceptions for every bookstore failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Declared domain kinds are NotFound (404) and Validation (400); everything else is 500
    - to_response() produces the REST envelope {"error": {...}, "message": str}
    - `message` is client-facing; `detail` is for logs only and never rendered

Design Decisions:
    - Single hierarchy with BookstoreError base: one global handler renders all of them
    - NotFound is a real exception type carrying kind, message and status
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
    DATABASE = "database"
    HTTP = "http"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    isbn: str | None = None
    details: list[dict[str, Any]] | None = None


class BookstoreError(Exception):
    """Base exception for all bookstore errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        detail: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.detail = detail or message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the standardized REST error envelope."""
        error = {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "status": self.http_status,
            "timestamp": self.context.timestamp.isoformat(),
        }
        if self.context.isbn is not None:
            error["isbn"] = self.context.isbn
        if self.context.details is not None:
            error["details"] = self.context.details
        return {"error": error, "message": self.message}


# ─── Domain Errors (400-level) ──────────────────────────────────

class BookValidationError(BookstoreError):
    """Request payload failed field presence or type checks."""
    def __init__(
        self,
        details: list[dict[str, Any]],
        message: str = "Invalid request data",
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.details = details
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.details = details


class ResourceNotFoundError(BookstoreError):
    """Requested resource does not exist."""
    def __init__(
        self,
        message: str,
        code: str = "RESOURCE_NOT_FOUND",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )


class BookNotFoundError(ResourceNotFoundError):
    """No row in `books` matches the isbn."""
    def __init__(self, isbn: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.isbn = isbn
        super().__init__(
            f"There is no book with an isbn '{isbn}'", "BOOK_NOT_FOUND", ctx,
        )
        self.isbn = isbn


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(BookstoreError):
    """A statement against `books` failed.

    `operation` is the SQL verb that failed (select, insert, update, delete).
    The reason goes to the log through `detail`; the response only says
    "Internal Server Error".
    """
    def __init__(self, reason: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            "Internal Server Error",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
            detail=f"Database {operation} failed: {reason}",
        )
        self.operation = operation
        self.reason = reason
