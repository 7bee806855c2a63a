from __future__ import annotations

from .errors import ErrorKind, Incomplete, ParseError
from .position import Position
from .span import CompareResult, Spanned

__all__ = [
    "CompareResult",
    "ErrorKind",
    "Incomplete",
    "ParseError",
    "Position",
    "Spanned",
]
