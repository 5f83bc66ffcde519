"""Error Handlers: global exception handlers for the bookstore API.

Invariants:
    - Every error body has the shape {"error": {...}, "message": str}
    - BookstoreError → its declared http_status
    - RequestValidationError → 400 with field-level details (via BookValidationError)
    - Framework HTTPException (unmatched route, wrong method) → its own status
    - Exception (catch-all) → 500, never leaks internal details
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookstore.core.errors import (
    BookstoreError, BookValidationError, ErrorCategory, ErrorSeverity,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_bookstore_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_bookstore_error_handler(app: FastAPI) -> None:

    @app.exception_handler(BookstoreError)
    async def bookstore_error_handler(request: Request, exc: BookstoreError):
        """Handle all bookstore domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"{type(exc).__name__}: {exc.detail}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
                "status_code": exc.http_status,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic request validation errors as a 400."""
        error = BookValidationError(_validation_details(exc))
        logger.warning(
            f"Validation error on {request.url.path}: {error.details}",
            extra={"error_code": error.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Handle framework HTTP errors, including the unmatched-route 404."""
        message = exc.detail if isinstance(exc.detail, str) else "HTTP error"
        logger.info(
            f"HTTP {exc.status_code} on {request.method} {request.url.path}",
            extra={"path": request.url.path, "status_code": exc.status_code},
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=_envelope(
                code="NOT_FOUND" if exc.status_code == 404 else "HTTP_ERROR",
                message=message,
                category=ErrorCategory.HTTP,
                severity=ErrorSeverity.WARNING,
                http_status=exc.status_code,
            ),
            headers=exc.headers,
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_envelope(
                code="INTERNAL_ERROR",
                message="Internal Server Error",
                category=ErrorCategory.INTERNAL,
                severity=ErrorSeverity.CRITICAL,
                http_status=500,
            ),
        )


def _envelope(
    code: str,
    message: str,
    category: ErrorCategory,
    severity: ErrorSeverity,
    http_status: int,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            "status": http_status,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
        "message": message,
    }


def _validation_details(exc: RequestValidationError) -> list[dict]:
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
