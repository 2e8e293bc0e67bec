"""Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting can be overridden with a REPLICATION_ORDER_* environment variable
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults work out of the box: a private in-memory SQLite database
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Reconciler settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="REPLICATION_ORDER_", env_file=".env", case_sensitive=False,
    )

    # Database
    database_url: str = "sqlite+aiosqlite:///:memory:"
    echo_sql: bool = False

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_sqlite_url(cls, v: str) -> str:
        """Plain sqlite:// URLs need the aiosqlite driver for the async engine."""
        if isinstance(v, str) and v.startswith("sqlite://"):
            return v.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return v

    # Reconciliation
    strict_references: bool = False
    tag_separator: str = ", "

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
