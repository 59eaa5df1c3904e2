"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - Connection strings come from environment variables (never hardcoded credentials)
    - get_settings() is cached (lru_cache) - single instance per process

Design Decisions:
    - Legacy env names MONGO_DB_INSTANCE / DB_INSTANCE accepted as aliases
    - Defaults provided for all settings: works out-of-the-box against a local mongod
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore",
        populate_by_name=True,
    )

    # MongoDB
    mongo_uri: str = Field(
        "mongodb://localhost:27017",
        validation_alias=AliasChoices("mongo_uri", "mongo_db_instance"),
    )
    mongo_database: str = Field(
        "expense_tracker",
        validation_alias=AliasChoices("mongo_database", "db_instance"),
    )
    mongo_server_selection_timeout_ms: int = 5_000
    # Client-side operation budget applied to every driver call
    mongo_operation_timeout_ms: int = 10_000

    # API
    cors_origins: list[str] = ["*"]
    server_mode: str = "development"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v

    @property
    def is_production(self) -> bool:
        return self.server_mode == "production"


@lru_cache
def get_settings() -> Settings:
    return Settings()
