"""Shared fixtures: fresh settings and silent logging for every test."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from resultkit.foundation.config import clear_settings_cache
from resultkit.observability import configure_logging, reset_logging


@pytest.fixture(autouse=True)
def quiet_logging() -> Iterator[None]:
    """Reload settings and silence trap logging around each test."""
    clear_settings_cache()
    configure_logging(format="none")
    yield
    reset_logging()
    clear_settings_cache()
