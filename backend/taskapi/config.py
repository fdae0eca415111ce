"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded in services)
    - get_settings() is cached (lru_cache) — single instance per process, read-only after startup

Design Decisions:
    - pydantic-settings reads env vars and an optional .env file
    - Secrets default to placeholders; deployments override JWT_SECRET and WEATHER_API_KEY
    - jwt_expire_minutes = 0 disables the exp claim (tokens never expire)
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://tasks:tasks@db:5432/tasks"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Auth
    jwt_secret: str = "change-me"
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 60 * 24
    bcrypt_rounds: int = 10

    # Weather provider
    weather_api_key: str = "placeholder"
    weather_api_url: str = "https://api.openweathermap.org/data/2.5/weather"
    weather_timeout_seconds: float = 10.0

    # Server
    host: str = "0.0.0.0"  # nosec B104
    port: int = 5000
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
