"""Failure-channel payload holders.

Structurally identical to the Ok holders; kept as separate types so the
channel is visible in signatures and isinstance checks.
"""

from __future__ import annotations

from typing import TypeVar

from .holder import BorrowedHolder, OwningHolder

E = TypeVar("E")


class NonOwningErr(BorrowedHolder[E]):
    """Borrowed error value."""

    __slots__ = ()
    _channel = "err"


class OwningErr(OwningHolder[E]):
    """Owned error value."""

    __slots__ = ()
    _channel = "err"
    _borrowed = NonOwningErr
