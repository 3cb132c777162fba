"""Owning Result[T, E] and its read-only BorrowedResult view.

A Result exclusively owns exactly one payload holder (OwningOk or OwningErr)
and moves through three states:

    Ok-unconsumed ──┐
                    ├── terminal accessor / map / drop ──▶ Consumed
    Err-unconsumed ─┘

Ownership discipline:
- Queries (is_ok, is_ok_and, inspect, map_or, map_or_else, as_ref) read the
  live payload and never change state.
- map, map_err, and_then, or_else consume self and move the payload (or the
  untouched channel) into the returned Result.
- Terminal accessors (ok, err, unwrap, expect, unwrap_*) move the value out.
  Afterwards ok()/err() return None and unwrap()/expect() trap.

Examples:
    >>> r: Result[int, str] = Ok(10)
    >>> r.is_ok(), r.ok(), r.ok()
    (True, 10, None)

    >>> Ok([1.0] * 10).map(sum).unwrap()
    10.0

    >>> Err("bad").map_or(0, lambda x: x * 2)
    0
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from resultkit.foundation.errors import ErrorCode, trap

from .err import NonOwningErr, OwningErr
from .ok import NonOwningOk, OwningOk

if TYPE_CHECKING:
    from .holder import BorrowedHolder, OwningHolder

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped success type
F = TypeVar("F")  # Mapped error type


class Result(Generic[T, E]):
    """Owning tagged union of a success value or an error value.

    Built from an owning holder, which is moved into the Result (the caller's
    holder is left owning nothing). Prefer the Ok()/Err() constructors.
    """

    __slots__ = ("_holder", "_is_ok")

    def __init__(self, holder: OwningOk[T] | OwningErr[E]) -> None:
        if isinstance(holder, OwningOk):
            self._is_ok = True
        elif isinstance(holder, OwningErr):
            self._is_ok = False
        else:
            raise TypeError(f"Result requires OwningOk or OwningErr, got {type(holder).__name__}")
        self._holder: OwningHolder[T] | OwningHolder[E] = type(holder).take_from(holder)

    # ─── Type Checking ───────────────────────────────────────────────

    def is_ok(self) -> bool:
        return self._is_ok

    def is_err(self) -> bool:
        return not self._is_ok

    def is_consumed(self) -> bool:
        """True once the payload was moved out (or the Result was built from a void holder)."""
        return not self._holder.is_owning()

    def is_ok_and(self, pred: Callable[[T], bool]) -> bool:
        """Ok, unconsumed, and pred holds for the value."""
        return self._is_ok and self._holder.is_owning() and bool(pred(self._holder.peek()))  # type: ignore[arg-type]

    def is_err_and(self, pred: Callable[[E], bool]) -> bool:
        """Err, unconsumed, and pred holds for the error."""
        return not self._is_ok and self._holder.is_owning() and bool(pred(self._holder.peek()))  # type: ignore[arg-type]

    # ─── Inspection ────────────────────────────────────────────────────

    def inspect(self, f: Callable[[T], object]) -> Result[T, E]:
        """Call f with the live Ok value for side effects, return self."""
        if self._is_ok and self._holder.is_owning():
            f(self._holder.peek())  # type: ignore[arg-type]
        return self

    def inspect_err(self, f: Callable[[E], object]) -> Result[T, E]:
        """Call f with the live Err value for side effects, return self."""
        if not self._is_ok and self._holder.is_owning():
            f(self._holder.peek())  # type: ignore[arg-type]
        return self

    def as_ref(self) -> BorrowedResult[T, E]:
        """Non-owning view over the payload. Dangles once this Result is consumed."""
        return BorrowedResult(self._holder.borrow())  # type: ignore[arg-type]

    # ─── Functor Operations (consume self) ─────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Apply f to the Ok value, moving the result forward. Err is re-homed unchanged.

        f runs before ownership is released, so self stays intact if f raises.
        A consumed Result maps to a consumed Result. The mapped value goes
        through Ok(), so if f returns a Box the new Result takes over its
        contents and leaves that Box empty; it does not store the Box itself.
        """
        if not self._is_ok:
            return Result(OwningErr.take_from(self._holder))  # type: ignore[arg-type]
        if not self._holder.is_owning():
            return Result(OwningOk.void())
        mapped = f(self._holder.peek())  # type: ignore[arg-type]
        self._holder.drop()
        return Ok(mapped)

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        """Apply f to the Err value, moving the result forward. Ok is re-homed unchanged."""
        if self._is_ok:
            return Result(OwningOk.take_from(self._holder))  # type: ignore[arg-type]
        if not self._holder.is_owning():
            return Result(OwningErr.void())
        mapped = f(self._holder.peek())  # type: ignore[arg-type]
        self._holder.drop()
        return Err(mapped)

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Monadic bind: chain an operation that can fail. Consumes self."""
        if not self._is_ok:
            return Result(OwningErr.take_from(self._holder))  # type: ignore[arg-type]
        if not self._holder.is_owning():
            return Result(OwningOk.void())
        chained = f(self._holder.peek())  # type: ignore[arg-type]
        self._holder.drop()
        return chained

    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Recover from Err via f. Consumes self."""
        if self._is_ok:
            return Result(OwningOk.take_from(self._holder))  # type: ignore[arg-type]
        if not self._holder.is_owning():
            return Result(OwningErr.void())
        recovered = f(self._holder.peek())  # type: ignore[arg-type]
        self._holder.drop()
        return recovered

    # ─── Folding (non-consuming) ───────────────────────────────────────

    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        """f(value) if Ok and unconsumed, else default (evaluated eagerly)."""
        if self._is_ok and self._holder.is_owning():
            return f(self._holder.peek())  # type: ignore[arg-type]
        return default

    def map_or_else(self, default_fn: Callable[[E], U], f: Callable[[T], U]) -> U:
        """f(value) if Ok, default_fn(error) if Err.

        Unlike the other folds this is not total: a consumed Result has no
        error left to feed default_fn, so it traps instead of inventing one.
        Use map_or for a fallback that works in every state.

        Raises:
            ConsumedValueError: If the payload was already moved out
        """
        value = self._peek_or_trap("map_or_else")
        return f(value) if self._is_ok else default_fn(value)  # type: ignore[arg-type]

    # ─── Value Extraction (terminal) ───────────────────────────────────

    def ok(self) -> T | None:
        """Move the Ok value out; None if Err (the error is discarded) or consumed."""
        if self._is_ok and self._holder.is_owning():
            return self._holder.get()  # type: ignore[return-value]
        self._holder.drop()
        return None

    def err(self) -> E | None:
        """Move the Err value out; None if Ok (the value is discarded) or consumed."""
        if not self._is_ok and self._holder.is_owning():
            return self._holder.get()  # type: ignore[return-value]
        self._holder.drop()
        return None

    def unwrap(self) -> T:
        """Move the Ok value out.

        Raises:
            UnwrapOnErrorError: If Result is Err
            ConsumedValueError: If the payload was already moved out
        """
        return self._extract_ok("called unwrap()")

    def expect(self, msg: str) -> T:
        """Move the Ok value out, trapping with msg on Err or consumed."""
        return self._extract_ok(msg)

    def unwrap_err(self) -> E:
        """Move the Err value out. Traps with WrongVariantError on Ok."""
        return self._extract_err("called unwrap_err()")

    def expect_err(self, msg: str) -> E:
        """Move the Err value out, trapping with msg on Ok or consumed."""
        return self._extract_err(msg)

    def unwrap_or(self, default: T) -> T:
        """Ok value, or default when Err or consumed. Consumes self."""
        if self._is_ok and self._holder.is_owning():
            return self._holder.get()  # type: ignore[return-value]
        self._holder.drop()
        return default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Ok value, or f(error). Consumes self.

        Raises:
            ConsumedValueError: If the payload was already moved out
        """
        value = self._peek_or_trap("unwrap_or_else")
        self._holder.drop()
        return value if self._is_ok else f(value)  # type: ignore[return-value,arg-type]

    def unwrap_or_default(self, factory: Callable[[], T]) -> T:
        """Ok value, or factory() when Err or consumed (e.g. `unwrap_or_default(int)`). Consumes self."""
        if self._is_ok and self._holder.is_owning():
            return self._holder.get()  # type: ignore[return-value]
        self._holder.drop()
        return factory()

    def match(self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Exhaustive case analysis. Consumes self.

        Example:
            >>> Ok(42).match(ok=lambda x: f"success: {x}", err=lambda e: f"failed: {e}")
            'success: 42'
        """
        value = self._peek_or_trap("match")
        self._holder.drop()
        return ok(value) if self._is_ok else err(value)  # type: ignore[arg-type]

    def drop(self) -> None:
        """Discard the payload without returning it. Idempotent."""
        self._holder.drop()

    # ─── Internals ─────────────────────────────────────────────────────

    def _peek_or_trap(self, op: str) -> T | E:
        if not self._holder.is_owning():
            trap(ErrorCode.CONSUMED_VALUE, f"{op} on a consumed Result", condition="not result.is_consumed()")
        return self._holder.peek()

    def _extract_ok(self, msg: str) -> T:
        if not self._holder.is_owning():
            trap(ErrorCode.CONSUMED_VALUE, f"{msg}: value already consumed", condition="not result.is_consumed()")
        if not self._is_ok:
            trap(ErrorCode.UNWRAP_ON_ERR, f"{msg}: {self._holder.peek()!r}", condition="result.is_ok()")
        return self._holder.get()  # type: ignore[return-value]

    def _extract_err(self, msg: str) -> E:
        if not self._holder.is_owning():
            trap(ErrorCode.CONSUMED_VALUE, f"{msg}: error already consumed", condition="not result.is_consumed()")
        if self._is_ok:
            trap(ErrorCode.WRONG_VARIANT, f"{msg}: {self._holder.peek()!r}", condition="result.is_err()")
        return self._holder.get()  # type: ignore[return-value]

    # ─── Dunder Methods ────────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._is_ok

    def __repr__(self) -> str:
        variant = "Ok" if self._is_ok else "Err"
        if not self._holder.is_owning():
            return f"{variant}(<consumed>)"
        return f"{variant}({self._holder.peek()!r})"

    def __eq__(self, other: object) -> bool:
        """Structural equality over variant, state and payload (non-consuming)."""
        if not isinstance(other, Result):
            return NotImplemented
        if self._is_ok != other._is_ok or self.is_consumed() != other.is_consumed():
            return False
        return self.is_consumed() or self._holder.peek() == other._holder.peek()

    __hash__ = None  # type: ignore[assignment]


class BorrowedResult(Generic[T, E]):
    """Read-only, non-owning view: discriminant plus a borrowed holder.

    Valid only while the owning Result (or every Rc it was built from) keeps
    the payload alive. Reads after that trap with DanglingReferenceError;
    is_ok_and/is_err_and return False instead.
    """

    __slots__ = ("_holder", "_is_ok")

    def __init__(self, holder: NonOwningOk[T] | NonOwningErr[E]) -> None:
        if isinstance(holder, NonOwningOk):
            self._is_ok = True
        elif isinstance(holder, NonOwningErr):
            self._is_ok = False
        else:
            raise TypeError(f"BorrowedResult requires NonOwningOk or NonOwningErr, got {type(holder).__name__}")
        self._holder: BorrowedHolder[T] | BorrowedHolder[E] = holder

    @classmethod
    def of(cls, result: Result[T, E]) -> BorrowedResult[T, E]:
        return result.as_ref()

    def is_ok(self) -> bool:
        return self._is_ok

    def is_err(self) -> bool:
        return not self._is_ok

    def is_alive(self) -> bool:
        return self._holder.is_alive()

    def is_ok_and(self, pred: Callable[[T], bool]) -> bool:
        return self._is_ok and self._holder.is_alive() and bool(pred(self._holder.get()))  # type: ignore[arg-type]

    def is_err_and(self, pred: Callable[[E], bool]) -> bool:
        return not self._is_ok and self._holder.is_alive() and bool(pred(self._holder.get()))  # type: ignore[arg-type]

    def peek(self) -> T | E:
        """Live payload of whichever variant is active."""
        return self._holder.get()

    def inspect(self, f: Callable[[T], object]) -> BorrowedResult[T, E]:
        if self._is_ok:
            f(self._holder.get())  # type: ignore[arg-type]
        return self

    def inspect_err(self, f: Callable[[E], object]) -> BorrowedResult[T, E]:
        if not self._is_ok:
            f(self._holder.get())  # type: ignore[arg-type]
        return self

    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        return f(self._holder.get()) if self._is_ok else default  # type: ignore[arg-type]

    def map_or_else(self, default_fn: Callable[[E], U], f: Callable[[T], U]) -> U:
        value = self._holder.get()
        return f(value) if self._is_ok else default_fn(value)  # type: ignore[arg-type]

    def __bool__(self) -> bool:
        return self._is_ok

    def __repr__(self) -> str:
        variant = "Ok" if self._is_ok else "Err"
        if not self._holder.is_alive():
            return f"&{variant}(<dangling>)"
        return f"&{variant}({self._holder.get()!r})"


# ═════════════════════════════════════════════════════════════════════════════
# Constructor Functions
# ═════════════════════════════════════════════════════════════════════════════


def Ok(value: T) -> Result[T, E]:  # noqa: N802
    """Construct an owning Ok result. A Box argument is taken over (and emptied)."""
    return Result(OwningOk(value))


def Err(error: E) -> Result[T, E]:  # noqa: N802
    """Construct an owning Err result. A Box argument is taken over (and emptied)."""
    return Result(OwningErr(error))
