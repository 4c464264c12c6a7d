"""Store Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting can be overridden from the environment or a .env file
    - get_settings() is cached (lru_cache), single instance per process

Design Decisions:
    - Defaults work out of the box: a local SQLite file next to the process
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Record store settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="RENTSTORE_", case_sensitive=False,
    )

    # Database
    database_url: str = "sqlite:///rentstore.db"
    database_echo: bool = False
    database_pool_size: int = 5
    database_max_overflow: int = 10

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted providers hand out postgresql:// but we drive psycopg 3."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+psycopg://", 1)
        return v

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
