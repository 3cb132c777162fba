"""Configuration management using pydantic-settings."""

from .settings import LoggingSettings, ResultKitSettings, clear_settings_cache, get_settings

__all__ = [
    "LoggingSettings",
    "ResultKitSettings",
    "clear_settings_cache",
    "get_settings",
]
