# topmark:header:start
#
#   project      : Embedres
#   file         : literals.py
#   file_relpath : src/embedres/literals.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read back the literals emitted by the subformats.

This is a small reader for the ML literal syntax produced by `pprint`, used by
round-trip validation tooling and tests:

- string literals: ``"..."`` with the escapes ``\\\\``, ``\\"``, ``\\'``, ``\\n``,
  ``\\r``, ``\\t``, ``\\b``, ``\\ `` (space), ``\\xHH``, ``\\DDD`` (decimal) and
  ``\\oOOO`` (octal). A backslash followed by a line break skips the line break and
  the spaces and tabs that start the next line.
- list literals: ``[ "a" ; "b" ]`` (a trailing ``;`` is accepted),
- decimal integer literals.

Characters outside escapes are taken as-is and encoded as UTF-8.
"""

from __future__ import annotations

import re
from typing import Final

from embedres.errors import LiteralSyntaxError

_SIMPLE_ESCAPES: Final[dict[str, int]] = {
    "\\": 0x5C,
    '"': 0x22,
    "'": 0x27,
    "n": 0x0A,
    "r": 0x0D,
    "t": 0x09,
    "b": 0x08,
    " ": 0x20,
}

_HEX_DIGITS: Final[str] = "0123456789abcdefABCDEF"
_INT_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in " \t\r\n":
        pos += 1
    return pos


def _read_code(text: str, pos: int, count: int, digits: str, base: int) -> int:
    chunk = text[pos : pos + count]
    if len(chunk) != count or any(ch not in digits for ch in chunk):
        raise LiteralSyntaxError(f"expected {count} base-{base} digit(s) in escape", pos)
    code = int(chunk, base)
    if code > 0xFF:
        raise LiteralSyntaxError(f"character code {code} out of range in escape", pos)
    return code


def _read_string(text: str, pos: int) -> tuple[bytes, int]:
    """Read one string literal starting at ``pos``; return its bytes and the end offset."""
    if pos >= len(text) or text[pos] != '"':
        raise LiteralSyntaxError("expected '\"'", pos)
    start = pos
    pos += 1
    out = bytearray()
    n = len(text)
    while True:
        if pos >= n:
            raise LiteralSyntaxError("unterminated string literal", start)
        ch = text[pos]
        if ch == '"':
            return bytes(out), pos + 1
        if ch != "\\":
            out += ch.encode("utf-8")
            pos += 1
            continue

        pos += 1
        if pos >= n:
            raise LiteralSyntaxError("unterminated escape", pos - 1)
        esc = text[pos]
        if esc in _SIMPLE_ESCAPES:
            out.append(_SIMPLE_ESCAPES[esc])
            pos += 1
        elif esc == "\n" or text.startswith("\r\n", pos):
            pos += 1 if esc == "\n" else 2
            while pos < n and text[pos] in " \t":
                pos += 1
        elif esc == "x":
            out.append(_read_code(text, pos + 1, 2, _HEX_DIGITS, 16))
            pos += 3
        elif esc == "o":
            out.append(_read_code(text, pos + 1, 3, "01234567", 8))
            pos += 4
        elif esc.isdigit():
            out.append(_read_code(text, pos, 3, "0123456789", 10))
            pos += 3
        else:
            raise LiteralSyntaxError(f"invalid escape '\\{esc}'", pos - 1)


def _expect_end(text: str, pos: int) -> None:
    pos = _skip_whitespace(text, pos)
    if pos != len(text):
        raise LiteralSyntaxError("unexpected trailing characters", pos)


def parse_string_literal(text: str) -> bytes:
    """Decode a single string literal (surrounding whitespace allowed).

    Raises:
        LiteralSyntaxError: If ``text`` is not exactly one well-formed string literal.
    """
    value, pos = _read_string(text, _skip_whitespace(text, 0))
    _expect_end(text, pos)
    return value


def parse_list_literal(text: str) -> list[bytes]:
    """Decode a list literal of string literals.

    Raises:
        LiteralSyntaxError: If ``text`` is not a well-formed list of string literals.
    """
    pos = _skip_whitespace(text, 0)
    if not text.startswith("[", pos):
        raise LiteralSyntaxError("expected '['", pos)
    pos = _skip_whitespace(text, pos + 1)
    items: list[bytes] = []
    while not text.startswith("]", pos):
        item, pos = _read_string(text, pos)
        items.append(item)
        pos = _skip_whitespace(text, pos)
        if text.startswith(";", pos):
            pos = _skip_whitespace(text, pos + 1)
        elif not text.startswith("]", pos):
            raise LiteralSyntaxError("expected ';' or ']'", pos)
    _expect_end(text, pos + 1)
    return items


def parse_int_literal(text: str) -> int:
    """Decode a decimal integer literal.

    Raises:
        LiteralSyntaxError: If ``text`` is not a decimal integer.
    """
    stripped = text.strip()
    if not _INT_RE.fullmatch(stripped):
        raise LiteralSyntaxError("expected a decimal integer", _skip_whitespace(text, 0))
    return int(stripped)
