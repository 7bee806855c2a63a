from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .span import Spanned


class ErrorKind(str, Enum):
    # Generic requirement failures
    TAKE_WHILE1 = "take_while1"
    TAKE_TILL1 = "take_till1"
    EOF = "eof"

    # Literal matching
    CHAR = "char"
    TAG = "tag"
    CRLF = "crlf"

    # Character classes
    ALPHA = "alpha"
    DIGIT = "digit"
    ALPHANUMERIC = "alphanumeric"
    SPACE = "space"
    MULTISPACE = "multispace"


@dataclass(slots=True)
class Incomplete(Exception):
    """More input might let the match succeed."""

    needed: int = 1

    def __str__(self) -> str:
        return f"incomplete input: at least {self.needed} more element(s) needed"


@dataclass(slots=True)
class ParseError(Exception):
    span: Spanned
    kind: ErrorKind
    hint: str | None = None

    def __str__(self) -> str:
        base = f"{self.span.pos().format()}: {self.kind.value} requirement not met"
        if self.hint:
            return f"{base}\nhint: {self.hint}"
        return base
