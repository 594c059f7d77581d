"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Secrets (form service token) come from environment variables only
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults for every non-secret setting: runs locally against SQLite with no .env
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from witquery.core.domain_types import DEFAULT_SORT_BY_FIELD


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database (document store)
    database_url: str = "sqlite+aiosqlite:///./witquery.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """asyncpg needs postgresql+asyncpg:// rather than postgresql://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Work item form service
    form_service_url: str = "https://dev.azure.com/organization"
    form_service_token: str | None = None
    form_service_timeout_seconds: float = 30.0

    # Checklists
    checklist_collection: str = "CheckListItems"

    # Related work items
    default_sort_field: str = DEFAULT_SORT_BY_FIELD

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
