"""Single-step recognizers for complete input.

Each recognizer takes a ``Spanned`` and returns ``(remainder, output)``, or
raises ``ParseError`` carrying the span it failed at. Running out of input is a
failure here, never ``Incomplete``.
"""

from __future__ import annotations

from typing import Callable

from .errors import ErrorKind, ParseError
from .span import CompareResult, Spanned


Recognizer = Callable[[Spanned], tuple[Spanned, object]]


def _as_char(el: object) -> str:
    # bytes spans yield ints
    return chr(el) if isinstance(el, int) else el


def is_alpha(el: object) -> bool:
    c = _as_char(el)
    return c.isascii() and c.isalpha()


def is_digit(el: object) -> bool:
    c = _as_char(el)
    return c.isascii() and c.isdigit()


def is_alphanumeric(el: object) -> bool:
    return is_alpha(el) or is_digit(el)


def is_space(el: object) -> bool:
    return _as_char(el) in " \t"


def is_multispace(el: object) -> bool:
    return _as_char(el) in " \t\r\n"


def anychar(span: Spanned) -> tuple[Spanned, object]:
    if not span:
        raise ParseError(span=span, kind=ErrorKind.EOF)
    rest, _ = span.take_split(1)
    return rest, span[0]


def char(c: str) -> Recognizer:
    def parse(span: Spanned) -> tuple[Spanned, object]:
        if not span or _as_char(span[0]) != c:
            raise ParseError(span=span, kind=ErrorKind.CHAR, hint=f"expected {c!r}")
        rest, _ = span.take_split(1)
        return rest, span[0]

    return parse


def _tag(pattern: str | bytes, fold: bool) -> Recognizer:
    def parse(span: Spanned) -> tuple[Spanned, Spanned]:
        res = span.compare_no_case(pattern) if fold else span.compare(pattern)
        if res is not CompareResult.OK:
            raise ParseError(span=span, kind=ErrorKind.TAG, hint=f"expected {pattern!r}")
        return span.take_split(len(span.coerce(pattern)))

    return parse


def tag(pattern: str | bytes) -> Recognizer:
    return _tag(pattern, fold=False)


def tag_no_case(pattern: str | bytes) -> Recognizer:
    return _tag(pattern, fold=True)


def take(n: int) -> Recognizer:
    def parse(span: Spanned) -> tuple[Spanned, Spanned]:
        if len(span) < n:
            raise ParseError(span=span, kind=ErrorKind.EOF, hint=f"{n - len(span)} more element(s) needed")
        return span.take_split(n)

    return parse


def take_while(pred: Callable[[object], bool]) -> Recognizer:
    return lambda span: span.split_at_position_complete(lambda el: not pred(el))


def take_while1(pred: Callable[[object], bool], kind: ErrorKind = ErrorKind.TAKE_WHILE1) -> Recognizer:
    return lambda span: span.split_at_position1_complete(lambda el: not pred(el), kind)


def take_till(pred: Callable[[object], bool]) -> Recognizer:
    return lambda span: span.split_at_position_complete(pred)


def take_till1(pred: Callable[[object], bool]) -> Recognizer:
    return lambda span: span.split_at_position1_complete(pred, ErrorKind.TAKE_TILL1)


alpha0 = take_while(is_alpha)
alpha1 = take_while1(is_alpha, ErrorKind.ALPHA)
digit0 = take_while(is_digit)
digit1 = take_while1(is_digit, ErrorKind.DIGIT)
alphanumeric0 = take_while(is_alphanumeric)
alphanumeric1 = take_while1(is_alphanumeric, ErrorKind.ALPHANUMERIC)
space0 = take_while(is_space)
space1 = take_while1(is_space, ErrorKind.SPACE)
multispace0 = take_while(is_multispace)
multispace1 = take_while1(is_multispace, ErrorKind.MULTISPACE)


def not_line_ending(span: Spanned) -> tuple[Spanned, Spanned]:
    n = span.position(lambda el: _as_char(el) in "\r\n")
    if n is None:
        return span.take_split(len(span))
    if _as_char(span[n]) == "\r" and span[n:].compare("\r\n") is not CompareResult.OK:
        raise ParseError(span=span[n:], kind=ErrorKind.TAG, hint="lone carriage return")
    return span.take_split(n)


def line_ending(span: Spanned) -> tuple[Spanned, Spanned]:
    for ending in ("\n", "\r\n"):
        if span.compare(ending) is CompareResult.OK:
            return span.take_split(len(ending))
    raise ParseError(span=span, kind=ErrorKind.CRLF, hint="expected a line ending")
