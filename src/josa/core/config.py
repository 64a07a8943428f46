"""Configuration management for josa."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="JOSA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Log level")
    log_format: str = Field(default="text", description="Log format (json or text)")

    # Selection
    log_fallbacks: bool = Field(
        default=False,
        description="Emit a debug event when the lenient path falls back",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
