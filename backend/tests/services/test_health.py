"""Health: GET /health reports the book count, 503 when the table cannot be read."""

from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

import bookstore.infrastructure.database as db_module
from bookstore.config import get_settings


async def test_health_empty_table(client):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.json() == {
        "status": "ok",
        "version": get_settings().app_version,
        "books": 0,
    }


async def test_health_counts_books(client, seed_book):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.json()["books"] == 1


async def test_health_without_database(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get("/health")
    assert res.status_code == 503
    assert res.json() == {
        "status": "unavailable",
        "reason": "database_not_initialized",
    }


async def test_health_unreadable_table(client, monkeypatch):
    async def unreachable(*args, **kwargs):
        raise OperationalError(
            "SELECT count(*) FROM books", {}, Exception("server closed the connection"),
        )

    monkeypatch.setattr(AsyncSession, "execute", unreachable)
    res = await client.get("/health")
    assert res.status_code == 503
    assert res.json()["reason"] == "books_table_unreadable"
