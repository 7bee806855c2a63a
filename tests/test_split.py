from __future__ import annotations

import pytest

from spanned import ErrorKind, Incomplete, ParseError, Position, Spanned


def _is_space(c: object) -> bool:
    return c == " "


def test_split_at_position_found() -> None:
    rest, head = Spanned.new("abc def").split_at_position(_is_space)
    assert head.data == "abc"
    assert rest.data == " def"
    assert rest.pos() == Position(offset=3, line=1, column=4)


def test_split_at_position_missing_is_incomplete() -> None:
    with pytest.raises(Incomplete) as e:
        Spanned.new("abcdef").split_at_position(_is_space)
    assert e.value.needed == 1


def test_split_at_position1_accepts_zero_length_match() -> None:
    rest, head = Spanned.new(" abc").split_at_position1(_is_space, ErrorKind.ALPHA)
    assert head.data == ""
    assert rest.data == " abc"


def test_split_at_position1_missing_is_incomplete() -> None:
    with pytest.raises(Incomplete):
        Spanned.new("abc").split_at_position1(_is_space, ErrorKind.ALPHA)


def test_split_at_position_complete_consumes_everything() -> None:
    rest, head = Spanned.new("ab\nc").split_at_position_complete(lambda c: c == "x")
    assert head.data == "ab\nc"
    assert rest.data == ""
    assert rest.pos() == Position(offset=4, line=2, column=2)


def test_split_at_position_complete_found() -> None:
    rest, head = Spanned.new("ab c").split_at_position_complete(_is_space)
    assert (rest.data, head.data) == (" c", "ab")


def test_split_at_position1_complete_rejects_zero_length() -> None:
    span = Spanned.new(" abc")
    with pytest.raises(ParseError) as e:
        span.split_at_position1_complete(_is_space, ErrorKind.ALPHA)
    assert e.value.span is span
    assert e.value.kind is ErrorKind.ALPHA


def test_split_at_position1_complete_rejects_empty_input() -> None:
    with pytest.raises(ParseError) as e:
        Spanned.new("").split_at_position1_complete(_is_space, ErrorKind.DIGIT)
    assert e.value.kind is ErrorKind.DIGIT


def test_split_at_position1_complete_without_match_takes_all() -> None:
    rest, head = Spanned.new("abc").split_at_position1_complete(_is_space, ErrorKind.ALPHA)
    assert head.data == "abc"
    assert rest.data == ""
    assert rest.col == 4


def test_error_span_reports_failure_position() -> None:
    span = Spanned.new("ab\n  x").narrow(3)
    with pytest.raises(ParseError) as e:
        span.split_at_position1_complete(_is_space, ErrorKind.SPACE)
    assert (e.value.span.line, e.value.span.col, e.value.span.byte_offset) == (2, 1, 3)
    assert str(e.value) == "2:1: space requirement not met"


def test_error_message_includes_hint() -> None:
    err = ParseError(span=Spanned.new("x"), kind=ErrorKind.TAG, hint="expected 'y'")
    assert str(err) == "1:1: tag requirement not met\nhint: expected 'y'"


def test_bytes_predicates_receive_ints() -> None:
    rest, head = Spanned.new(b"12ab").split_at_position_complete(lambda b: not 48 <= b <= 57)
    assert head.data == b"12"
    assert rest.data == b"ab"
    assert rest.col == 3
