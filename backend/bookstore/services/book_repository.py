"""Book Repository: the five book operations, one parameterized statement each.

Invariants:
    - find_one/update/remove raise BookNotFoundError when no row matches the isbn
    - find_all orders by title ascending; an empty table yields []
    - update overwrites every mutable field (last writer wins)
    - Writes commit immediately; nothing spans requests
    - An isbn collision on create is rolled back and raised as DatabaseError (500)

Design Decisions:
    - INSERT/UPDATE/DELETE use RETURNING so existence check and write are one statement
"""

import logging

from sqlalchemy import select, insert, update, delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.core.domain_types import Isbn, MUTABLE_BOOK_FIELDS
from bookstore.core.errors import BookNotFoundError, DatabaseError
from bookstore.models.book import Book
from bookstore.schemas.book import BookCreate, BookUpdate

logger = logging.getLogger(__name__)


class BookRepository:
    """Data access for the `books` table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_one(self, isbn: Isbn) -> Book:
        """Return the book with this isbn."""
        result = await self.db.execute(
            select(Book).where(Book.isbn == isbn),
        )
        book = result.scalar_one_or_none()
        if book is None:
            logger.info("Book lookup missed", extra={"isbn": isbn})
            raise BookNotFoundError(isbn)
        return book

    async def find_all(self) -> list[Book]:
        """Return every book, ordered by title."""
        result = await self.db.execute(
            select(Book).order_by(Book.title),
        )
        return list(result.scalars().all())

    async def create(self, data: BookCreate) -> Book:
        """Insert a full row and return it as stored."""
        try:
            result = await self.db.execute(
                insert(Book).values(**data.model_dump()).returning(Book),
            )
            book = result.scalar_one()
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.warning("Duplicate isbn on create", extra={"isbn": data.isbn})
            raise DatabaseError(f"isbn '{data.isbn}' already exists", "insert")
        logger.info("Book created", extra={"isbn": book.isbn})
        return book

    async def update(self, isbn: Isbn, data: BookUpdate) -> Book:
        """Overwrite all mutable fields of the book and return it."""
        values = {name: getattr(data, name) for name in MUTABLE_BOOK_FIELDS}
        result = await self.db.execute(
            update(Book)
            .where(Book.isbn == isbn)
            .values(**values)
            .returning(Book)
            .execution_options(populate_existing=True),
        )
        book = result.scalar_one_or_none()
        if book is None:
            await self.db.rollback()
            raise BookNotFoundError(isbn)
        await self.db.commit()
        logger.info("Book updated", extra={"isbn": isbn})
        return book

    async def remove(self, isbn: Isbn) -> None:
        result = await self.db.execute(
            delete(Book).where(Book.isbn == isbn).returning(Book.isbn),
        )
        if result.scalar_one_or_none() is None:
            await self.db.rollback()
            raise BookNotFoundError(isbn)
        await self.db.commit()
        logger.info("Book deleted", extra={"isbn": isbn})
