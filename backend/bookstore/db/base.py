"""SQLAlchemy Declarative Base: shared base class for ORM models.

Invariants:
    - All models inherit from Base
    - Base.metadata is the single source of truth for table metadata
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all bookstore ORM models."""
    pass
