"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - DATABASE_URL is required; the process refuses to start without it
    - get_settings() is cached (lru_cache) — single instance per process
    - Database URLs are normalized to an async driver before anything uses them

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - not_found_status defaults to 503: a missing student is answered exactly like
      an unreachable store unless NOT_FOUND_STATUS=404 is set
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def normalize_database_url(url: str) -> str:
    """Map driverless URLs onto the async drivers SQLAlchemy needs."""
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("sqlite://"):
        return url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    # sqlx-style "sqlite:students.db"
    if url.startswith("sqlite:"):
        return "sqlite+aiosqlite:///" + url[len("sqlite:"):]
    return url


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_database_url(cls, v: str) -> str:
        if isinstance(v, str):
            return normalize_database_url(v)
        return v

    database_pool_size: int = 5
    database_max_overflow: int = 10

    # Server
    host: str = "0.0.0.0"
    port: int = 3001

    # API
    cors_origins: list[str] = ["http://localhost:3000"]
    not_found_status: int = 503

    @field_validator("not_found_status")
    @classmethod
    def check_not_found_status(cls, v: int) -> int:
        if v not in (404, 503):
            raise ValueError("not_found_status must be 404 or 503")
        return v

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
