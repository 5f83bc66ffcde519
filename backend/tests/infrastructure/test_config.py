"""Settings: environment overrides and driver URL rewriting."""

from bookstore.config import Settings


def test_postgres_url_rewritten_to_asyncpg():
    settings = Settings(database_url="postgresql://u:p@host:5432/books")
    assert settings.database_url == "postgresql+asyncpg://u:p@host:5432/books"


def test_other_urls_untouched():
    settings = Settings(database_url="sqlite+aiosqlite:///books.db")
    assert settings.database_url == "sqlite+aiosqlite:///books.db"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("DATABASE_POOL_SIZE", "3")
    settings = Settings()
    assert settings.log_level == "DEBUG"
    assert settings.database_pool_size == 3


def test_run_serves_on_configured_host_and_port(monkeypatch):
    from bookstore import main

    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "9123")
    monkeypatch.setattr(main, "get_settings", Settings)
    calls = []
    monkeypatch.setattr(main.uvicorn, "run", lambda app, **kw: calls.append((app, kw)))

    main.run()

    assert calls == [
        ("bookstore.main:app", {"host": "127.0.0.1", "port": 9123, "log_config": None}),
    ]
