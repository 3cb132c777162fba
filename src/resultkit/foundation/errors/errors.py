"""Panic exceptions raised on the fatal paths of the result family.

A panic is an ordinary uncaught exception: left alone it terminates the
process, which is the Python counterpart of an assertion trap. Only the
terminal accessors (unwrap/expect), consuming access to a spent holder and
dereferencing a dangling borrowed holder raise these.
"""

from __future__ import annotations

from typing import ClassVar, Self

from .types import ErrorCode, TrapReport


class ResultPanic(RuntimeError):
    """Exception wrapping a TrapReport for raising."""

    __slots__ = ("report",)

    code: ClassVar[ErrorCode]

    def __init__(self, report: TrapReport) -> None:
        self.report = report
        super().__init__(report.render())

    @classmethod
    def create(cls, message: str, *, condition: str | None = None, location: str = "") -> Self:
        """Create panic of this class's code without going through trap()."""
        return cls(TrapReport(code=cls.code, message=message, condition=condition, location=location))


class ConsumedValueError(ResultPanic):
    """Value extracted from an owning result or holder that was already consumed."""
    code = ErrorCode.CONSUMED_VALUE


class WrongVariantError(ResultPanic):
    """Error-channel extraction (unwrap_err/expect_err) on an Ok result."""
    code = ErrorCode.WRONG_VARIANT


class DanglingReferenceError(ResultPanic):
    """Borrowed holder whose value was released by every strong owner."""
    code = ErrorCode.DANGLING_REFERENCE


class UnwrapOnErrorError(ResultPanic):
    """unwrap()/expect() on a result holding an error."""
    code = ErrorCode.UNWRAP_ON_ERR


_PANICS: dict[ErrorCode, type[ResultPanic]] = {
    cls.code: cls for cls in (ConsumedValueError, WrongVariantError, DanglingReferenceError, UnwrapOnErrorError)
}


def panic_for(code: ErrorCode) -> type[ResultPanic]:
    """Map error code to its panic class."""
    return _PANICS[code]
