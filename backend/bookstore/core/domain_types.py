"""Domain Types: rich types for the book resource.

Invariants:
    - Isbn wraps str: the externally supplied primary key
    - MUTABLE_BOOK_FIELDS is every column except isbn, in column order
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

Isbn = NewType("Isbn", str)


# ─── Field Groups ────────────────────────────────────────────────

MUTABLE_BOOK_FIELDS: tuple[str, ...] = (
    "amazon_url",
    "author",
    "language",
    "pages",
    "publisher",
    "title",
    "year",
)

BOOK_FIELDS: tuple[str, ...] = ("isbn", *MUTABLE_BOOK_FIELDS)
