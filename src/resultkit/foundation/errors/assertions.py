"""Trap primitive and diagnostic print helpers.

trap() is the single fatal entry point used by unwrap/expect and by consuming
or dereferencing spent holders. It logs the report (when enabled) and raises
the matching ResultPanic.
"""

from __future__ import annotations

import sys
import traceback
from pathlib import Path
from typing import NoReturn, TextIO

from .errors import panic_for
from .types import ErrorCode, TrapReport

_PKG_ROOT = Path(__file__).resolve().parents[2]
# Frames from these directories are library internals, skipped when locating the caller
_INTERNAL_DIRS = (str(_PKG_ROOT / "core"), str(_PKG_ROOT / "foundation"))


def _caller_location() -> str:
    """Return "<file> line <n>" of the innermost frame outside the library."""
    for frame in reversed(traceback.extract_stack()):
        filename = str(Path(frame.filename).resolve())
        if not filename.startswith(_INTERNAL_DIRS):
            return f"{frame.filename} line {frame.lineno}"
    return ""


def format_trap(code: ErrorCode, message: str, *, condition: str | None = None, location: str = "") -> str:
    """Format a trap message without raising."""
    return TrapReport(code=code, message=message, condition=condition, location=location).render()


def trap(code: ErrorCode, message: str, *, condition: str | None = None) -> NoReturn:
    """Log and raise the panic for `code`.

    Raises:
        ResultPanic: Always; the concrete subclass is selected by code
    """
    report = TrapReport(code=code, message=message, condition=condition, location=_caller_location())

    from resultkit.foundation.config import get_settings
    if get_settings().log_traps:
        from resultkit.observability import get_logger
        get_logger("resultkit").error(
            "trap", code=str(report.code), message=report.message, location=report.location,
        )
    raise panic_for(code)(report)


def ensure(condition: bool, code: ErrorCode, message: str, *, expr: str | None = None) -> None:
    """Trap with `code` unless `condition` holds."""
    if not condition:
        trap(code, message, condition=expr)


# ─────────────────────────────────────────────────────────────────────────────
# Print helpers
# ─────────────────────────────────────────────────────────────────────────────


def print_(*args: object, file: TextIO | None = None) -> None:
    """Print each argument followed by a space, no newline."""
    out = file or sys.stdout
    for arg in args:
        print(arg, end=" ", file=out)


def print_ln(*args: object, file: TextIO | None = None) -> None:
    """Print each argument followed by a space, then a newline."""
    print_(*args, file=file)
    print(file=file or sys.stdout)
