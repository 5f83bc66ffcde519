"""Book ORM: one row per book, keyed by the client-supplied isbn.

Invariants:
    - isbn is the primary key and never changes after insert
    - Every other column is nullable: PUT overwrites all of them, absent ones become NULL
"""

from sqlalchemy import String, Text, Integer
from sqlalchemy.orm import Mapped, mapped_column

from bookstore.db.base import Base


class Book(Base):
    """Book entity: the single resource served by the API."""
    __tablename__ = "books"

    isbn: Mapped[str] = mapped_column(String(32), primary_key=True)
    amazon_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    author: Mapped[str | None] = mapped_column(Text, nullable=True)
    language: Mapped[str | None] = mapped_column(Text, nullable=True)
    pages: Mapped[int | None] = mapped_column(Integer, nullable=True)
    publisher: Mapped[str | None] = mapped_column(Text, nullable=True)
    title: Mapped[str | None] = mapped_column(Text, nullable=True, index=True)
    year: Mapped[int | None] = mapped_column(Integer, nullable=True)

    def __repr__(self) -> str:
        return f"<Book isbn={self.isbn!r} title={self.title!r}>"
