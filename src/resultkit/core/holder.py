"""Shared machinery for the Ok/Err payload holders.

OwningOk/OwningErr and NonOwningOk/NonOwningErr differ only in which channel
they tag. The ownership rules live here once:

- An owning holder keeps its value in a private Rc that is never cloned
  outward. Consuming access (get/release/drop) drops that Rc, so every view
  produced by borrow() dangles from then on.
- A borrowed holder keeps only a Weak and can never extend the value's life.
"""

from __future__ import annotations

from typing import Any, ClassVar, Generic, Self, TypeVar

from resultkit.foundation.config import get_settings
from resultkit.foundation.errors import ErrorCode, trap

from .handles import Box, Rc, Weak

T = TypeVar("T")


def _trace(holder: object, event: str, **kw: Any) -> None:
    """Debug-log an ownership transfer when RESULTKIT_TRACE_OWNERSHIP is on."""
    if not get_settings().trace_ownership:
        return
    from resultkit.observability import get_logger
    get_logger("resultkit").bind_holder(type(holder).__name__, holder._channel).debug(event, **kw)  # type: ignore[attr-defined]


def _require_channel(cls: type) -> None:
    """Only the Ok/Err subclasses are instantiable; the bases carry no channel."""
    if not hasattr(cls, "_channel"):
        raise TypeError(f"{cls.__name__} has no channel; use the Ok or Err holder classes")


class BorrowedHolder(Generic[T]):
    """Non-owning payload holder. Built only from a shared Rc handle."""

    __slots__ = ("_weak",)

    _channel: ClassVar[str]

    def __init__(self, shared: Rc[T]) -> None:
        _require_channel(type(self))
        if not isinstance(shared, Rc):
            raise TypeError(f"{type(self).__name__} requires an Rc handle, got {type(shared).__name__}")
        self._weak: Weak[T] = shared.downgrade()

    @classmethod
    def _from_weak(cls, weak: Weak[T]) -> Self:
        _require_channel(cls)
        holder = cls.__new__(cls)
        holder._weak = weak
        return holder

    @classmethod
    def take_from(cls, other: Self) -> Self:
        """New holder sharing `other`'s back reference."""
        if not isinstance(other, cls):
            raise TypeError(f"cannot convert {type(other).__name__} to {cls.__name__}")
        return cls._from_weak(other._weak)

    def is_alive(self) -> bool:
        return self._weak.is_alive()

    def get(self) -> T:
        """Resolve the back reference. Traps with DanglingReferenceError once released."""
        rc = self._weak.upgrade()
        if rc is None:
            trap(
                ErrorCode.DANGLING_REFERENCE,
                f"{type(self).__name__}.get() on a value released by all owners",
                condition="holder.is_alive()",
            )
        with rc:
            return rc.get()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({'<alive>' if self.is_alive() else '<dangling>'})"


class OwningHolder(Generic[T]):
    """Exclusive owner of one payload value.

    Construction from a Box takes the box's value and empties the box.
    """

    __slots__ = ("_cell",)

    _channel: ClassVar[str]
    _borrowed: ClassVar[type[BorrowedHolder[Any]]]

    def __init__(self, value: T | Box[T]) -> None:
        _require_channel(type(self))
        from_box = isinstance(value, Box)
        self._cell: Rc[T] | None = Rc(value.take() if from_box else value)  # type: ignore[union-attr]
        _trace(self, "ownership acquired", via="box" if from_box else "value")

    @classmethod
    def void(cls) -> Self:
        """Holder that owns nothing; allocates no cell."""
        _require_channel(cls)
        holder = cls.__new__(cls)
        holder._cell = None
        return holder

    @classmethod
    def take_from(cls, other: Self) -> Self:
        """Re-home ownership from `other` into a new holder. `other` is left owning nothing."""
        _require_channel(cls)
        if not isinstance(other, cls):
            raise TypeError(f"cannot convert {type(other).__name__} to {cls.__name__}")
        holder = cls.__new__(cls)
        holder._cell, other._cell = other._cell, None
        if holder._cell is not None:
            _trace(holder, "ownership moved", via="take_from")
        return holder

    def is_owning(self) -> bool:
        return self._cell is not None

    def peek(self) -> T:
        """Non-consuming read. Traps with ConsumedValueError if nothing is owned."""
        if self._cell is None:
            trap(
                ErrorCode.CONSUMED_VALUE,
                f"{type(self).__name__}.peek() after ownership was released",
                condition="holder.is_owning()",
            )
        return self._cell.get()

    def get(self) -> T:
        """Consuming access: move the value out and release ownership.

        Raises:
            ConsumedValueError: If ownership was already released
        """
        if self._cell is None:
            trap(
                ErrorCode.CONSUMED_VALUE,
                f"{type(self).__name__}.get() after ownership was released",
                condition="holder.is_owning()",
            )
        value = self._cell.get()
        self._release_cell("get")
        return value

    def release(self) -> Box[T]:
        """Consuming access returning a fresh Box; an empty Box once nothing is owned."""
        if self._cell is None:
            return Box.empty()
        box = Box(self._cell.get())
        self._release_cell("release")
        return box

    def drop(self) -> None:
        """Discard the owned value. Idempotent."""
        if self._cell is not None:
            self._release_cell("drop")

    def borrow(self) -> BorrowedHolder[T]:
        """Non-owning view of the owned value; dangling if nothing is owned."""
        weak = self._cell.downgrade() if self._cell is not None else Weak.dangling()
        return self._borrowed._from_weak(weak)

    def _release_cell(self, via: str) -> None:
        cell, self._cell = self._cell, None
        cell.drop()  # type: ignore[union-attr]
        _trace(self, "ownership released", via=via)

    def __repr__(self) -> str:
        if self._cell is None:
            return f"{type(self).__name__}(<released>)"
        return f"{type(self).__name__}({self._cell.get()!r})"
