"""Health: a single check that answers only when the books table can be read.

Invariants:
    - GET /health returns 200 with the row count of `books`
    - Returns 503 when the database is not initialized or the count query fails
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy import func, select

from bookstore.config import get_settings
from bookstore.core.errors import DatabaseError
from bookstore.infrastructure import database
from bookstore.models.book import Book

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


def _unavailable(reason: str) -> JSONResponse:
    logger.warning(f"Health check failed: {reason}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "unavailable", "reason": reason},
    )


@router.get("")
async def health():
    manager = database.db_manager
    if manager is None:
        return _unavailable("database_not_initialized")
    try:
        async with manager.session() as db:
            result = await db.execute(select(func.count()).select_from(Book))
            books = result.scalar_one()
    except DatabaseError:
        return _unavailable("books_table_unreadable")
    return {
        "status": "ok",
        "version": get_settings().app_version,
        "books": books,
    }
