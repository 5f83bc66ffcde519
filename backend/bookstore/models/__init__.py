"""ORM Models: SQLAlchemy declarative models.

All models imported here so Base.metadata is complete for create_all and Alembic.
"""

from bookstore.models.book import Book  # noqa: F401
