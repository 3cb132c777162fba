"""Core value types: Result, payload holders, ownership handles and Thunk."""

from .err import NonOwningErr, OwningErr
from .handles import Box, Rc, Weak
from .holder import BorrowedHolder, OwningHolder
from .ok import NonOwningOk, OwningOk
from .result import BorrowedResult, Err, Ok, Result
from .thunk import Thunk

__all__ = [
    "Result", "BorrowedResult", "Ok", "Err",
    "OwningOk", "OwningErr", "NonOwningOk", "NonOwningErr", "OwningHolder", "BorrowedHolder",
    "Box", "Rc", "Weak",
    "Thunk",
]
