"""Database Session Manager: one pooled AsyncSession per request, rolled back on failure.

Invariants:
    - A session that sees any exception is rolled back before it is closed
    - A SQLAlchemy exception leaving a session becomes DatabaseError, named after
      the SQL verb of the failed statement (select/insert/update/delete)
    - Driver text (statement, parameters, connection details) goes to the log only
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import OperationalError, SQLAlchemyError, StatementError

from bookstore.core.errors import DatabaseError

logger = logging.getLogger(__name__)

SQL_VERBS = ("select", "insert", "update", "delete")


def failed_operation(exc: SQLAlchemyError) -> str:
    """SQL verb of the statement behind `exc`, or "query" when there is none."""
    statement = exc.statement if isinstance(exc, StatementError) else None
    verb = (statement or "").lstrip().split(" ", 1)[0].lower()
    return verb if verb in SQL_VERBS else "query"


def failure_reason(exc: SQLAlchemyError) -> str:
    if isinstance(exc, OperationalError):
        return "database unreachable or unavailable"
    if isinstance(exc, StatementError):
        return "statement rejected by the database"
    return "session error"


class DatabaseSessionManager:
    """Owns the async engine for the books database and hands out sessions."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 10,
        max_overflow: int = 5,
        echo: bool = False,
    ):
        self.engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            echo=echo,
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            operation = failed_operation(e)
            logger.error(
                f"Database {operation} failed: {e}",
                extra={"error_code": "DATABASE_ERROR"},
            )
            raise DatabaseError(failure_reason(e), operation) from e
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def close(self) -> None:
        await self.engine.dispose()


# Initialized by the app lifespan
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs):
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)


async def close_db() -> None:
    global db_manager
    if db_manager:
        await db_manager.close()
        db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
