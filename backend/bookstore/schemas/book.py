"""Book Schemas: Pydantic models with field-level validation for API boundaries.

Invariants:
    - BookCreate requires isbn, author, language, pages, publisher, title, year
    - BookCreate.isbn and BookCreate.title are stripped and non-empty
    - BookUpdate carries only mutable fields, every one optional; isbn in a body is ignored
    - Integer fields accept numeric strings ("264" -> 264), reject anything else

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - BookResponse reads straight from ORM rows (from_attributes)
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BookCreate(BaseModel):
    """Create payload: every field but amazon_url must be present."""
    isbn: str = Field(min_length=1, max_length=32)
    amazon_url: str | None = None
    author: str
    language: str
    pages: int = Field(ge=0)
    publisher: str
    title: str = Field(min_length=1)
    year: int

    @field_validator("isbn", "title")
    @classmethod
    def strip_required_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("cannot be empty or whitespace")
        return v


class BookUpdate(BaseModel):
    """Update payload: overwrites every mutable field, absent ones become null."""
    amazon_url: str | None = None
    author: str | None = None
    language: str | None = None
    pages: int | None = Field(None, ge=0)
    publisher: str | None = None
    title: str | None = None
    year: int | None = None


class BookResponse(BaseModel):
    """Book as returned by the API."""
    model_config = ConfigDict(from_attributes=True)

    isbn: str
    amazon_url: str | None = None
    author: str | None = None
    language: str | None = None
    pages: int | None = None
    publisher: str | None = None
    title: str | None = None
    year: int | None = None


class BookEnvelope(BaseModel):
    book: BookResponse


class BookListEnvelope(BaseModel):
    books: list[BookResponse]


class MessageResponse(BaseModel):
    message: str
