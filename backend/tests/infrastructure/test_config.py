"""Settings — verifies environment-driven configuration."""

from app.config import Settings


def test_postgres_url_is_rewritten_for_asyncpg():
    settings = Settings(database_url="postgresql://u:p@host:5432/db")
    assert settings.database_url == "postgresql+asyncpg://u:p@host:5432/db"


def test_other_urls_untouched():
    settings = Settings(database_url="sqlite+aiosqlite:///x.db")
    assert settings.database_url == "sqlite+aiosqlite:///x.db"


def test_base_path_is_normalized():
    assert Settings(api_base_path="api/v2/").api_base_path == "/api/v2"
    assert Settings(api_base_path="/").api_base_path == ""


def test_tokens_from_environment(monkeypatch):
    monkeypatch.setenv("API_TOKENS", '["a", "b"]')
    assert Settings().api_tokens == ["a", "b"]
