# topmark:header:start
#
#   project      : Embedres
#   file         : test_literals.py
#   file_relpath : tests/test_literals.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reading rendered literals back: strings, string lists and integers."""

from __future__ import annotations

import pytest

from embedres.errors import LiteralSyntaxError
from embedres.literals import parse_int_literal, parse_list_literal, parse_string_literal
from tests.conftest import parametrize


@parametrize(
    "source, expected",
    [
        ('""', b""),
        ('"abc"', b"abc"),
        ('  "abc"\n', b"abc"),
        ('"\\\\ \\" \\\'"', b"\\ \" '"),
        ('"\\n\\r\\t\\b\\ "', b"\n\r\t\b "),
        ('"\\x00\\x7f\\xFF"', b"\x00\x7f\xff"),
        ('"\\065\\o101"', b"AA"),
        ('"ab\\\n   cd"', b"abcd"),
        ('"ab\\\r\n\t cd"', b"abcd"),
        ('"ab\\\n\\ cd"', b"ab cd"),
        ('"café"', "café".encode()),
    ],
)
def test_parse_string_literal(source: str, expected: bytes) -> None:
    """Escapes and backslash-newline continuations decode to the original bytes."""
    assert parse_string_literal(source) == expected


@parametrize(
    "source, offset",
    [
        ("abc", 0),
        ('"abc', 0),
        ('"ab\\', 3),
        ('"\\q"', 1),
        ('"\\x4"', 3),
        ('"\\300"', 2),
        ('"a" x', 4),
    ],
)
def test_parse_string_literal_errors(source: str, offset: int) -> None:
    """Malformed literals raise `LiteralSyntaxError` with the offending offset."""
    with pytest.raises(LiteralSyntaxError) as excinfo:
        parse_string_literal(source)
    assert excinfo.value.offset == offset


@parametrize(
    "source, expected",
    [
        ("[]", []),
        ("[ ]", []),
        ('[ "a" ]', [b"a"]),
        ('[ "a" ; "b" ; "c" ]', [b"a", b"b", b"c"]),
        ('[ "a" ;\n  "b" ; ]', [b"a", b"b"]),
        ('["x\\\n y";""]', [b"xy", b""]),
    ],
)
def test_parse_list_literal(source: str, expected: list[bytes]) -> None:
    """Lists of string literals separated by ``;`` (trailing ``;`` allowed)."""
    assert parse_list_literal(source) == expected


@parametrize("source", ['"a"', '[ "a" "b" ]', '[ "a" ;', "[ 1 ]", '[ "a" ] ]'])
def test_parse_list_literal_errors(source: str) -> None:
    """Malformed lists raise `LiteralSyntaxError`."""
    with pytest.raises(LiteralSyntaxError):
        parse_list_literal(source)


@parametrize("source, expected", [("0", 0), ("-12", -12), ("+3", 3), (" 42\n", 42)])
def test_parse_int_literal(source: str, expected: int) -> None:
    """Decimal integers, optionally signed."""
    assert parse_int_literal(source) == expected


@parametrize("source", ["", "1.0", "0x1", "- 1", "12a"])
def test_parse_int_literal_errors(source: str) -> None:
    """Anything but a decimal integer raises `LiteralSyntaxError`."""
    with pytest.raises(LiteralSyntaxError):
        parse_int_literal(source)
