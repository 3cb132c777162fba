"""resultkit - Owning Result/Ok/Err value types with explicit move semantics.

A Result exclusively owns exactly one success or error value, which can be
moved out exactly once. Borrowed views (as_ref) read the same payload without
owning it and dangle once the owner lets go.

Quick Start:
    >>> from resultkit import Ok, Err, Result
    >>>
    >>> def parse(raw: str) -> Result[int, str]:
    ...     return Ok(int(raw)) if raw.isdigit() else Err(f"not a number: {raw}")
    >>>
    >>> r = parse("10")
    >>> r.is_ok()
    True
    >>> r.map(lambda n: n * 2).unwrap()
    20

Ownership:
    >>> from resultkit import Box, OwningOk
    >>> handle = Box([1.0] * 10)
    >>> ok = OwningOk(handle)      # takes over the value, empties handle
    >>> handle.is_empty()
    True
    >>> ok.release()
    Box([1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0])
    >>> ok.release()
    Box(<empty>)

Borrowed views:
    >>> r = Ok("payload")
    >>> view = r.as_ref()
    >>> view.peek()
    'payload'
    >>> r.unwrap()
    'payload'
    >>> view.is_alive()
    False

Lazy evaluation:
    >>> from resultkit import Thunk
    >>> expensive = Thunk(lambda: sum(range(1_000_000)))
    >>> expensive()   # computed once, cached after
    499999500000
"""

from __future__ import annotations

__version__ = "0.1.0"

from .core import (
    BorrowedHolder,
    BorrowedResult,
    Box,
    Err,
    NonOwningErr,
    NonOwningOk,
    Ok,
    OwningErr,
    OwningHolder,
    OwningOk,
    Rc,
    Result,
    Thunk,
    Weak,
)
from .foundation.config import ResultKitSettings, clear_settings_cache, get_settings
from .foundation.errors import (
    ConsumedValueError,
    DanglingReferenceError,
    ErrorCode,
    ResultPanic,
    TrapReport,
    UnwrapOnErrorError,
    WrongVariantError,
)
from .observability import configure_logging, get_logger

__all__ = [
    "__version__",
    # Result
    "Result", "BorrowedResult", "Ok", "Err",
    # Holders
    "OwningOk", "OwningErr", "NonOwningOk", "NonOwningErr", "OwningHolder", "BorrowedHolder",
    # Handles
    "Box", "Rc", "Weak",
    # Lazy evaluation
    "Thunk",
    # Errors
    "ErrorCode", "TrapReport", "ResultPanic",
    "ConsumedValueError", "WrongVariantError", "DanglingReferenceError", "UnwrapOnErrorError",
    # Configuration & logging
    "ResultKitSettings", "get_settings", "clear_settings_cache", "configure_logging", "get_logger",
]
