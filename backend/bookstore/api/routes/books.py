"""Books: CRUD routes over the `books` table.

Invariants:
    - Request bodies are validated by Pydantic before reaching the handler (400 on failure)
    - Handlers delegate to a BookStore; misses surface as BookNotFoundError (404)
    - Responses are wrapped: {"book": ...}, {"books": [...]}, {"message": ...}
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.core.domain_types import Isbn
from bookstore.core.repository_protocols import BookStore
from bookstore.infrastructure.database import get_db
from bookstore.schemas.book import (
    BookCreate, BookUpdate, BookResponse,
    BookEnvelope, BookListEnvelope, MessageResponse,
)
from bookstore.services.book_repository import BookRepository

router = APIRouter(prefix="/books", tags=["books"])


def get_book_store(db: AsyncSession = Depends(get_db)) -> BookStore:
    """FastAPI dependency: a repository bound to the request's session."""
    return BookRepository(db)


@router.get("", response_model=BookListEnvelope)
async def list_books(store: BookStore = Depends(get_book_store)):
    """List all books ordered by title."""
    books = await store.find_all()
    return BookListEnvelope(
        books=[BookResponse.model_validate(b) for b in books],
    )


@router.get("/{isbn}", response_model=BookEnvelope)
async def get_book(isbn: str, store: BookStore = Depends(get_book_store)):
    book = await store.find_one(Isbn(isbn))
    return BookEnvelope(book=BookResponse.model_validate(book))


@router.post(
    "", response_model=BookEnvelope, status_code=status.HTTP_201_CREATED,
)
async def create_book(
    body: BookCreate, store: BookStore = Depends(get_book_store),
):
    """Create a book from a complete payload."""
    book = await store.create(body)
    return BookEnvelope(book=BookResponse.model_validate(book))


@router.put("/{isbn}", response_model=BookEnvelope)
async def update_book(
    isbn: str,
    body: BookUpdate | None = None,
    store: BookStore = Depends(get_book_store),
):
    """Overwrite a book's mutable fields. A missing body clears them all."""
    book = await store.update(Isbn(isbn), body or BookUpdate())
    return BookEnvelope(book=BookResponse.model_validate(book))


@router.delete("/{isbn}", response_model=MessageResponse)
async def delete_book(isbn: str, store: BookStore = Depends(get_book_store)):
    await store.remove(Isbn(isbn))
    return MessageResponse(message="Book deleted")
