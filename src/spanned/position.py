from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """A concrete position inside the original input.

    Offsets are 0-based UTF-8 byte counts; line/column are 1-based.
    """

    offset: int = 0
    line: int = 1
    column: int = 1

    def format(self) -> str:
        return f"{self.line}:{self.column}"
