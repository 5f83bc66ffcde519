"""Boundary Protocols: contracts between route handlers and persistence.

Invariants:
    - Routes depend on BookStore, never on the ORM session directly
    - Implementations provided by services/ via FastAPI dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - runtime_checkable so tests can assert an implementation conforms
"""

from typing import Any, Protocol, runtime_checkable

from bookstore.core.domain_types import Isbn


@runtime_checkable
class BookStore(Protocol):
    """Contract for book persistence: one statement per operation."""
    async def find_one(self, isbn: Isbn) -> Any: ...
    async def find_all(self) -> list[Any]: ...
    async def create(self, data: Any) -> Any: ...
    async def update(self, isbn: Isbn, data: Any) -> Any: ...
    async def remove(self, isbn: Isbn) -> None: ...
