"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets (api_tokens, database credentials) come from environment variables
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://booking:booking@db:5432/booking"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres hands out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # API
    api_base_path: str = "/api/v1"
    api_title: str = "Travel Booking API"
    api_version: str = "1.0.0"
    cors_origins: list[str] = ["http://localhost:5173"]

    @field_validator("api_base_path")
    @classmethod
    def normalize_base_path(cls, v: str) -> str:
        v = "/" + v.strip("/")
        return "" if v == "/" else v

    # Auth — bearer tokens accepted by the API; empty list rejects every caller
    api_tokens: list[str] = []

    # Pipeline
    request_timeout_seconds: float = 30.0
    slow_request_threshold_ms: int = 3000

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
