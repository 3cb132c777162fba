"""Error taxonomy, trap primitive and diagnostics for resultkit.

- ErrorCode/TrapReport: Classification and structured report of a trap
- ResultPanic and subclasses: The exceptions raised on fatal paths
- trap/ensure: Fatal assertion primitives
- format_trap/print_/print_ln: Message formatting and diagnostic output
"""

from .assertions import ensure, format_trap, print_, print_ln, trap
from .errors import (
    ConsumedValueError,
    DanglingReferenceError,
    ResultPanic,
    UnwrapOnErrorError,
    WrongVariantError,
    panic_for,
)
from .types import ErrorCode, JsonDict, JsonPrimitive, JsonValue, TrapReport

__all__ = [
    # Taxonomy
    "ErrorCode", "TrapReport",
    # Panics
    "ResultPanic", "ConsumedValueError", "WrongVariantError", "DanglingReferenceError", "UnwrapOnErrorError",
    "panic_for",
    # Primitives
    "trap", "ensure", "format_trap", "print_", "print_ln",
    # JSON aliases
    "JsonDict", "JsonPrimitive", "JsonValue",
]
