"""Position-tracking view over the remaining input of a parser.

A ``Spanned`` keeps the original buffer plus a ``[start, end)`` window into it,
and the line, column and byte offset of ``start``. Every narrowing builds a new
value; the position of the new window is derived from the old one by scanning
only the elements that were dropped from the front. A full left-to-right parse
therefore scans each element of the input for newlines at most once, no matter
how often the position is queried.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from functools import total_ordering
from typing import Callable, Generic, Iterator, TypeVar

from .errors import ErrorKind, Incomplete, ParseError
from .position import Position


T = TypeVar("T", str, bytes)
R = TypeVar("R")

Predicate = Callable[[object], bool]


class CompareResult(str, Enum):
    OK = "ok"
    INCOMPLETE = "incomplete"
    ERROR = "error"


def _scan_newlines(chunk: str | bytes) -> tuple[int, int]:
    """Return ``(newlines, tail_start)`` for a consumed chunk.

    ``tail_start`` is the index just after the last newline, or 0 when the
    chunk has none.
    """
    nl = "\n" if isinstance(chunk, str) else b"\n"
    lines = chunk.count(nl)
    if lines == 0:
        return 0, 0
    return lines, chunk.rindex(nl) + 1


def _count_chars(chunk: bytes) -> int:
    # UTF-8 continuation bytes are 0b10xxxxxx; everything else starts a code point.
    return sum(1 for b in chunk if b & 0xC0 != 0x80)


def _byte_len(chunk: str | bytes) -> int:
    if isinstance(chunk, bytes) or chunk.isascii():
        return len(chunk)
    return len(chunk.encode("utf-8"))


def _width(tail: str | bytes, utf8: bool) -> int:
    if isinstance(tail, str):
        return len(tail) if utf8 else _byte_len(tail)
    return _count_chars(tail) if utf8 else len(tail)


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class Spanned(Generic[T]):
    source: T
    start: int
    end: int
    line: int = 1
    col: int = 1
    byte_offset: int = 0
    utf8: bool = False

    @classmethod
    def new(cls, data: str | bytes | bytearray | memoryview, utf8: bool = False) -> "Spanned":
        if isinstance(data, (bytearray, memoryview)):
            data = bytes(data)
        if not isinstance(data, (str, bytes)):
            raise TypeError(f"cannot track positions over {type(data).__name__!r}")
        return cls(source=data, start=0, end=len(data), utf8=utf8)

    @property
    def data(self) -> T:
        """The current window; a copy of the origin unless it spans all of it."""
        if self.start == 0 and self.end == len(self.source):
            return self.source
        return self.source[self.start : self.end]

    def pos(self) -> Position:
        return Position(offset=self.byte_offset, line=self.line, column=self.col)

    # Narrowing

    def _narrow(self, lo: int, hi: int) -> Spanned[T]:
        if lo == self.start:
            return replace(self, end=hi)

        consumed = self.source[self.start : lo]
        lines, tail_start = _scan_newlines(consumed)
        width = _width(consumed[tail_start:], self.utf8)
        return replace(
            self,
            start=lo,
            end=hi,
            line=self.line + lines,
            # A fresh line starts counting at column 1.
            col=self.col + width if lines == 0 else width + 1,
            byte_offset=self.byte_offset + _byte_len(consumed),
        )

    def narrow(self, start: int | None = None, stop: int | None = None) -> Spanned[T]:
        """Return the span over ``data[start:stop]`` with its position updated."""
        lo, hi, _ = slice(start, stop).indices(len(self))
        return self._narrow(self.start + lo, self.start + max(lo, hi))

    def _check_count(self, n: int) -> None:
        if not 0 <= n <= len(self):
            raise ValueError(f"cannot take {n} element(s) from a span of length {len(self)}")

    def take(self, n: int) -> Spanned[T]:
        self._check_count(n)
        return self._narrow(self.start, self.start + n)

    def take_split(self, n: int) -> tuple[Spanned[T], Spanned[T]]:
        """Split into ``(remainder, prefix)`` at element ``n``."""
        self._check_count(n)
        return (
            self._narrow(self.start + n, self.end),
            self._narrow(self.start, self.start + n),
        )

    # Predicate-based splitting

    def split_at_position(self, predicate: Predicate) -> tuple[Spanned[T], Spanned[T]]:
        n = self.position(predicate)
        if n is None:
            raise Incomplete(needed=1)
        return self.take_split(n)

    def split_at_position1(
        self, predicate: Predicate, _kind: ErrorKind
    ) -> tuple[Spanned[T], Spanned[T]]:
        # A zero-length match is accepted here and _kind goes unused; only the
        # complete variant rejects it.
        n = self.position(predicate)
        if n is None:
            raise Incomplete(needed=1)
        return self.take_split(n)

    def split_at_position_complete(self, predicate: Predicate) -> tuple[Spanned[T], Spanned[T]]:
        try:
            return self.split_at_position(predicate)
        except Incomplete:
            return self.take_split(len(self))

    def split_at_position1_complete(
        self, predicate: Predicate, kind: ErrorKind
    ) -> tuple[Spanned[T], Spanned[T]]:
        n = self.position(predicate)
        if n == 0 or (n is None and not self):
            raise ParseError(span=self, kind=kind)
        return self.take_split(len(self) if n is None else n)

    # Iteration

    def __len__(self) -> int:
        return self.end - self.start

    def __iter__(self) -> Iterator[object]:
        src = self.source
        for i in range(self.start, self.end):
            yield src[i]

    def __getitem__(self, key: int | slice):
        if isinstance(key, slice):
            if key.step not in (None, 1):
                raise ValueError("spans only support contiguous slices")
            return self.narrow(key.start, key.stop)
        i = key + len(self) if key < 0 else key
        if not 0 <= i < len(self):
            raise IndexError("span index out of range")
        return self.source[self.start + i]

    def iter_indices(self) -> Iterator[tuple[int, object]]:
        return enumerate(self)

    def iter_elements(self) -> Iterator[object]:
        return iter(self)

    def position(self, predicate: Predicate) -> int | None:
        """Index of the first element satisfying ``predicate``, if any."""
        src = self.source
        for i in range(self.start, self.end):
            if predicate(src[i]):
                return i - self.start
        return None

    def slice_index(self, count: int) -> int:
        if len(self) < count:
            raise Incomplete(needed=count - len(self))
        return count

    # Delegated capabilities

    def coerce(self, pattern: str | bytes | bytearray) -> T:
        """Convert ``pattern`` to the wrapped representation (via UTF-8)."""
        if isinstance(pattern, (bytearray, memoryview)):
            pattern = bytes(pattern)
        if isinstance(self.source, str):
            return pattern.decode("utf-8") if isinstance(pattern, bytes) else pattern
        return pattern.encode("utf-8") if isinstance(pattern, str) else pattern

    def _compare(self, pattern: str | bytes, fold: bool) -> CompareResult:
        pat = self.coerce(pattern)
        head = self.source[self.start : min(self.end, self.start + len(pat))]
        if fold:
            pat, head = pat.lower(), head.lower()
        if head == pat:
            return CompareResult.OK
        if len(head) < len(pat) and pat.startswith(head):
            return CompareResult.INCOMPLETE
        return CompareResult.ERROR

    def compare(self, pattern: str | bytes) -> CompareResult:
        return self._compare(pattern, fold=False)

    def compare_no_case(self, pattern: str | bytes) -> CompareResult:
        return self._compare(pattern, fold=True)

    def find_substring(self, sub: str | bytes) -> int | None:
        i = self.source.find(self.coerce(sub), self.start, self.end)
        return None if i < 0 else i - self.start

    def find_token(self, token: str | bytes | int) -> bool:
        if isinstance(token, int):
            if isinstance(self.source, str):
                if token >= 0x80:
                    return token in self.as_bytes()
                token = chr(token)
        else:
            token = self.coerce(token)
        return self.source.find(token, self.start, self.end) >= 0

    def __contains__(self, item: str | bytes | int) -> bool:
        if isinstance(item, int):
            return self.find_token(item)
        return self.find_substring(item) is not None

    def offset(self, other: Spanned[T]) -> int:
        """Byte distance from this span to ``other`` (same origin).

        Not an index for ``take``/``narrow`` on ``str`` spans; use ``distance``.
        """
        return other.byte_offset - self.byte_offset

    def distance(self, other: Spanned[T]) -> int:
        """Distance to ``other`` in element units, as taken by ``take``/``narrow``."""
        return other.start - self.start

    def parse_to(self, target: Callable[[T], R]) -> R | None:
        try:
            return target(self.data)
        except (ValueError, TypeError):
            return None

    def as_bytes(self) -> bytes:
        data = self.data
        return data.encode("utf-8") if isinstance(data, str) else data

    def __bytes__(self) -> bytes:
        return self.as_bytes()

    # Content comparison

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Spanned):
            other = other.data
        if isinstance(other, (str, bytes)):
            return self.data == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Spanned):
            other = other.data
        if isinstance(other, (str, bytes)):
            return self.data < other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.data)

    def __repr__(self) -> str:
        return (
            f"Spanned({self.data!r}, line={self.line}, col={self.col}, "
            f"byte_offset={self.byte_offset})"
        )
