"""Success-channel payload holders."""

from __future__ import annotations

from typing import TypeVar

from .holder import BorrowedHolder, OwningHolder

T = TypeVar("T")


class NonOwningOk(BorrowedHolder[T]):
    """Borrowed success value.

    Holds a weak reference derived from an Rc; the user must keep a strong
    owner alive for as long as get() is expected to succeed.

    Example:
        >>> shared = Rc("nonowning ok")
        >>> NonOwningOk(shared).get()
        'nonowning ok'
    """

    __slots__ = ()
    _channel = "ok"


class OwningOk(OwningHolder[T]):
    """Owned success value.

    Example:
        >>> ok = OwningOk(10)
        >>> ok.get()
        10
        >>> ok.release()
        Box(<empty>)
    """

    __slots__ = ()
    _channel = "ok"
    _borrowed = NonOwningOk
