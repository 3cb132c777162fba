"""Ownership handles: Box (single owner), Rc (shared owners), Weak (back reference).

Python has no raw pointers or move semantics, so ownership is made explicit
with handle objects:

- Box[T]: a single-owner cell. Handing a Box to an owning holder takes the
  value out and leaves the caller's box empty (the "moved-from" handle).
- Rc[T]: a reference-counted shared handle. The value is released when the
  last strong handle is dropped (or garbage collected).
- Weak[T]: a non-owning reference to an Rc cell. Never extends the value's
  lifetime; upgrade() yields an explicit Rc-or-None.

Example:
    >>> box = Box([1.0, 2.0])
    >>> value = box.take()
    >>> box.is_empty()
    True

    >>> shared = Rc("payload")
    >>> weak = shared.downgrade()
    >>> shared.drop()
    >>> weak.upgrade() is None
    True
"""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Any, Callable, Final, Generic, TypeVar

from resultkit.foundation.errors import ErrorCode, ensure, trap

if TYPE_CHECKING:
    from types import TracebackType

T = TypeVar("T")

# Marks an empty Box or a released Rc cell; None is a legal payload
_EMPTY: Final[Any] = object()


class Box(Generic[T]):
    """Single-owner handle to a value."""

    __slots__ = ("_value",)

    def __init__(self, value: T = _EMPTY) -> None:
        self._value = value

    @classmethod
    def empty(cls) -> Box[T]:
        return cls()

    def is_empty(self) -> bool:
        return self._value is _EMPTY

    def get(self) -> T:
        """Read held value without moving it out. Traps if empty."""
        ensure(self._value is not _EMPTY, ErrorCode.CONSUMED_VALUE, "read from an empty Box", expr="not box.is_empty()")
        return self._value

    def take(self) -> T:
        """Move held value out, leaving this box empty. Traps if already empty."""
        value = self.get()
        self._value = _EMPTY
        return value

    def __bool__(self) -> bool:
        return self._value is not _EMPTY

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Box):
            return NotImplemented
        return self._value is other._value or self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return "Box(<empty>)" if self._value is _EMPTY else f"Box({self._value!r})"


class _RcCell:
    """Shared storage behind Rc handles."""

    __slots__ = ("value", "strong", "__weakref__")

    def __init__(self, value: object) -> None:
        self.value = value
        self.strong = 1


class Rc(Generic[T]):
    """Reference-counted shared-ownership handle.

    Each Rc is one strong owner. drop() releases this owner; the value is
    released once every strong owner has dropped. Usable as a context manager
    that drops on exit.
    """

    __slots__ = ("_cell",)

    def __init__(self, value: T) -> None:
        self._cell: _RcCell | None = _RcCell(value)

    @classmethod
    def _adopt(cls, cell: _RcCell) -> Rc[T]:
        """New strong handle onto an existing live cell."""
        rc = cls.__new__(cls)
        cell.strong += 1
        rc._cell = cell
        return rc

    def _live(self) -> _RcCell:
        if self._cell is None:
            trap(ErrorCode.CONSUMED_VALUE, "use of a dropped Rc handle", condition="not rc.is_dropped()")
        return self._cell

    def get(self) -> T:
        return self._live().value  # type: ignore[no-any-return]

    def clone(self) -> Rc[T]:
        """Another strong owner of the same value."""
        return Rc._adopt(self._live())

    def downgrade(self) -> Weak[T]:
        """Non-owning reference to the same value."""
        return Weak(self._live())

    def drop(self) -> None:
        """Release this strong owner. Idempotent."""
        cell, self._cell = self._cell, None
        if cell is None:
            return
        cell.strong -= 1
        if cell.strong == 0:
            cell.value = _EMPTY

    def __del__(self) -> None:
        self.drop()

    def is_dropped(self) -> bool:
        return self._cell is None

    @property
    def strong_count(self) -> int:
        return 0 if self._cell is None else self._cell.strong

    def __enter__(self) -> Rc[T]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.drop()

    def __repr__(self) -> str:
        if self._cell is None:
            return "Rc(<dropped>)"
        return f"Rc({self._cell.value!r}, strong={self._cell.strong})"


def _dead() -> None:
    return None


class Weak(Generic[T]):
    """Non-owning back reference into an Rc cell.

    Resolves to nothing once every strong owner dropped the value or the cell
    was garbage collected.
    """

    __slots__ = ("_ref",)

    def __init__(self, cell: _RcCell | None = None) -> None:
        self._ref: Callable[[], _RcCell | None] = _dead if cell is None else weakref.ref(cell)

    @classmethod
    def dangling(cls) -> Weak[T]:
        """Weak reference that never resolves."""
        return cls()

    def _cell(self) -> _RcCell | None:
        cell = self._ref()
        return cell if cell is not None and cell.strong > 0 else None

    def upgrade(self) -> Rc[T] | None:
        """New strong handle if the value is still alive, else None.

        The returned Rc is an owner like any other; drop it when done.
        """
        cell = self._cell()
        return None if cell is None else Rc._adopt(cell)

    def is_alive(self) -> bool:
        return self._cell() is not None

    def __repr__(self) -> str:
        return "Weak(<alive>)" if self.is_alive() else "Weak(<dangling>)"
