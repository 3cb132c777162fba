"""Environment-based configuration using pydantic-settings.

Example:
    >>> from resultkit.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.log_traps
    True
    >>> settings.logging.level
    'INFO'

    # Or with environment variables:
    # RESULTKIT_TRACE_OWNERSHIP=true
    # RESULTKIT_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RESULTKIT_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "none"] = "console"
    colors: bool | None = Field(default=None, description="Force console colors on/off (None = auto-detect)")

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        """Accept lowercase level names."""
        return v.upper() if isinstance(v, str) else v

    @field_validator("format", mode="before")
    @classmethod
    def _normalize_format(cls, v: str) -> str:
        return v.lower() if isinstance(v, str) else v


class ResultKitSettings(BaseSettings):
    """Root settings for resultkit.

    Loads configuration from environment variables with RESULTKIT_ prefix.

    Example environment variables:
        RESULTKIT_LOG_TRAPS=false
        RESULTKIT_TRACE_OWNERSHIP=true
        RESULTKIT_LOG_LEVEL=DEBUG
        RESULTKIT_LOG_FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix="RESULTKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    log_traps: bool = Field(default=True, description="Log an error event before raising a panic")
    trace_ownership: bool = Field(default=False, description="Log debug events for every ownership transfer")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> ResultKitSettings:
    """Get the global settings instance (cached)."""
    return ResultKitSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
