"""Application settings read from the process environment.

Field names map case-insensitively to environment variables
(``DATABASE_URL``, ``CACHE_TTL_LIST_MINUTES`` ...). ``database_url`` and
``redis_url`` have no default and must be provided.

Usage:
    from src.core.config import settings

    engine = create_async_engine(settings.database_url)
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.constants import (
    TRANSACTION_COUNT_TTL_MINUTES,
    TRANSACTION_LIST_TTL_MINUTES,
    TRANSACTION_SINGLE_TTL_MINUTES,
)
from src.core.enums import Environment


class Settings(BaseSettings):
    """Flat settings model; one attribute per environment variable."""

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Environment = Field(default=Environment.DEVELOPMENT)
    debug: bool = False
    log_level: str = Field(default="INFO", description="Minimum log level name")

    app_name: str = "Ledger History API"
    app_version: str = "0.1.0"
    host: str = Field(default="0.0.0.0", description="uvicorn bind address")
    port: int = Field(default=8000, description="uvicorn bind port")

    # PostgreSQL
    database_url: str = Field(description="postgresql+asyncpg:// DSN")
    db_echo: bool = Field(default=False, description="Echo emitted SQL")
    db_pool_size: int = 20
    db_max_overflow: int = 10

    # Redis
    redis_url: str = Field(description="redis:// DSN")
    redis_max_connections: int = 50
    redis_socket_timeout: float = Field(
        default=5.0, description="Socket and connect timeout, seconds"
    )

    # Cache lifetimes, minutes
    cache_ttl_list_minutes: int = TRANSACTION_LIST_TTL_MINUTES
    cache_ttl_single_minutes: int = TRANSACTION_SINGLE_TTL_MINUTES
    cache_ttl_count_minutes: int = TRANSACTION_COUNT_TTL_MINUTES

    @field_validator(
        "cache_ttl_list_minutes",
        "cache_ttl_single_minutes",
        "cache_ttl_count_minutes",
    )
    @classmethod
    def ttl_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("cache TTL must be a positive number of minutes")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    @property
    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT


@lru_cache
def get_settings() -> Settings:
    """Settings loaded once per process."""
    return Settings()  # type: ignore[call-arg]


settings = get_settings()
