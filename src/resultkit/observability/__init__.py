"""Structured logging: context-aware logging for traps and ownership transfers."""

from .logging import (
    BoundLogger,
    ConsoleRenderer,
    JsonRenderer,
    LogEntry,
    LogRenderer,
    LogScope,
    NoOpRenderer,
    configure_from_settings,
    configure_logging,
    get_logger,
    reset_logging,
)

__all__ = [
    "BoundLogger",
    "ConsoleRenderer",
    "JsonRenderer",
    "LogEntry",
    "LogRenderer",
    "LogScope",
    "NoOpRenderer",
    "configure_from_settings",
    "configure_logging",
    "get_logger",
    "reset_logging",
]
