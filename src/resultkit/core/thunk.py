"""Lazily evaluated, cached zero-argument computations (thunks).

The callable should take no arguments; capture whatever it needs in a
closure. Not thread-safe: concurrent first calls may evaluate twice. Guard a
shared Thunk with a lock if it must cross threads.
"""

from __future__ import annotations

from typing import Any, Callable, Final, Generic, TypeVar

R = TypeVar("R")

_UNSET: Final[Any] = object()


class Thunk(Generic[R]):
    """Evaluate-once cell: holds either the pending computation or its result.

    Example:
        >>> calls = []
        >>> t = Thunk(lambda: calls.append(1) or len(calls))
        >>> t(), t()
        (1, 1)
        >>> len(calls)
        1

    If the computation raises, the exception propagates and the thunk stays
    unevaluated; the next call tries again.
    """

    __slots__ = ("_func", "_value")

    def __init__(self, func: Callable[[], R]) -> None:
        if not callable(func):
            raise TypeError(f"Thunk requires a callable, got {type(func).__name__}")
        self._func: Callable[[], R] | None = func
        self._value: R = _UNSET

    def __call__(self) -> R:
        if self._value is _UNSET:
            self._value = self._func()  # type: ignore[misc]
            self._func = None  # drop captured state once cached
        return self._value

    def is_evaluated(self) -> bool:
        return self._value is not _UNSET

    def __repr__(self) -> str:
        return f"Thunk({self._value!r})" if self.is_evaluated() else "Thunk(<pending>)"
