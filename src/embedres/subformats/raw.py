# topmark:header:start
#
#   project      : Embedres
#   file         : raw.py
#   file_relpath : src/embedres/subformats/raw.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Raw subformat: resource contents as a single string literal.

This is the default subformat. The generation-time value is the byte string itself.
Rendering picks one of two strategies:

- **text**: when the content looks like text (see `looks_like_text`), the string is
  emitted character by character. Each character is wrapped in a group that the
  layout engine renders either inline or after a ``\\``-newline continuation, and
  line feeds in the content force line breaks in the literal so that it follows
  the original lines.
- **binary**: otherwise the content is emitted as fixed-size blocks of ``\\xHH``
  escapes, one block per line, sized from the width left after the start column.

Continuation lines rely on the literal syntax skipping blanks after a
backslash-newline; a space that has to survive at the start of a continuation line
is therefore written as ``\\ ``.
"""

from __future__ import annotations

from itertools import chain
from typing import TYPE_CHECKING

from embedres.config.logging import get_logger
from embedres.constants import HEX_DIGITS, HEX_ESCAPE_WIDTH, RUNTIME_MODULE
from embedres.document import concat, group, hardline, ifflat, separate, text
from embedres.subformats.base import SubFormat
from embedres.subformats.registry import register_subformat
from embedres.subformats.types import format_resource_path

if TYPE_CHECKING:
    from embedres.config.logging import EmbedresLogger
    from embedres.document import Doc
    from embedres.subformats.types import ResourcePath

logger: EmbedresLogger = get_logger(__name__)

TAB: int = 0x09
LF: int = 0x0A
CR: int = 0x0D
SPACE: int = 0x20
QUOTE: int = 0x22
BACKSLASH: int = 0x5C
DEL: int = 0x7F


def _needs_hex_escape(byte: int) -> bool:
    return byte >= 0x80 or byte == DEL or (byte < SPACE and byte not in (TAB, LF, CR))


def looks_like_text(data: bytes) -> bool:
    """Return True if ``data`` should be rendered as an escaped text literal.

    Control bytes (other than TAB, LF and CR) and bytes with the high bit set need a
    4-character escape. Content is text when at most 10% of its bytes need one; the
    empty string is text.
    """
    escaped: int = sum(1 for byte in data if _needs_hex_escape(byte))
    return escaped * 10 <= len(data)


def hex_escape(byte: int) -> str:
    """Return the ``\\xHH`` escape of ``byte`` (uppercase hex digits)."""
    return "\\x" + HEX_DIGITS[byte >> 4] + HEX_DIGITS[byte & 15]


def _continuation(tail: str) -> Doc:
    """Backslash, forced line break, then ``tail`` on the next line."""
    return text("\\") + hardline() + text(tail)


def _breakable(escape: str) -> Doc:
    """Render ``escape`` inline, or on a continuation line if it does not fit."""
    return group(ifflat(text(escape), _continuation(" " + escape)))


def _char_escape(byte: int) -> str:
    if byte == TAB:
        return "\\t"
    if byte == QUOTE:
        return '\\"'
    if byte == BACKSLASH:
        return "\\\\"
    if _needs_hex_escape(byte):
        return hex_escape(byte)
    return chr(byte)


def _render_char(cur: int, nxt: int | None) -> Doc:
    """Return the document for byte ``cur`` followed by ``nxt`` (None at the end)."""
    if cur == SPACE:
        return group(ifflat(text(" "), _continuation("\\ ")))
    if cur == CR and nxt == LF:
        # the line break is emitted after the LF
        return _breakable("\\r")
    if cur in (CR, LF):
        escape = "\\r" if cur == CR else "\\n"
        # A bare backslash keeps a leading space of the next line from being skipped.
        # The space after it must then fit flat, which needs width >= indent + 2;
        # narrower budgets turn the pair into an escaped backslash.
        tail = "\\" if nxt == SPACE else " "
        return ifflat(text(escape), _breakable(escape) + _continuation(tail))
    return _breakable(_char_escape(cur))


def _render_text(data: bytes) -> Doc:
    lookahead = chain(data[1:], (None,))
    parts: list[Doc] = [_render_char(cur, nxt) for cur, nxt in zip(data, lookahead)]
    return group(concat(text('"'), *parts, text('"')))


def _render_blob(column: int, width: int, data: bytes) -> Doc:
    block_len: int = (width - column) // HEX_ESCAPE_WIDTH
    if block_len < 1:
        logger.debug(
            "No room for a hex escape (column=%d, width=%d); using one escape per line",
            column,
            width,
        )
        block_len = 1

    blocks: list[Doc] = []
    for ofs in range(0, len(data), block_len):
        blob: str = "".join(hex_escape(byte) for byte in data[ofs : ofs + block_len])
        blocks.append(text(blob) if ofs == 0 else text(" " + blob))
    logger.trace("Hex blob: %d block(s) of up to %d byte(s)", len(blocks), block_len)

    return text('"') + separate(text("\\") + hardline(), blocks) + text('"')


def render_string(column: int, width: int, data: bytes) -> Doc:
    """Return the string literal document for ``data``.

    Args:
        column (int): Column at which the literal starts.
        width (int): Expected maximum line width.
        data (bytes): Content to render.

    Returns:
        Doc: A text-strategy or hex-blob document, depending on `looks_like_text`.
    """
    if looks_like_text(data):
        return _render_text(data)
    return _render_blob(column, width, data)


@register_subformat("raw")
class RawSubFormat(SubFormat[bytes]):
    """The default subformat: raw contents as a string."""

    def from_raw(self, path: ResourcePath, data: bytes) -> bytes:
        return bytes(data)

    def to_raw(self, path: ResourcePath, value: bytes) -> bytes:
        return value

    def pprint(self, column: int, width: int, path: ResourcePath, value: bytes) -> Doc:
        logger.debug(
            "raw: rendering %s (%d bytes) as %s",
            format_resource_path(path),
            len(value),
            "text" if looks_like_text(value) else "hex blob",
        )
        return render_string(column, width, value)

    def name(self, path: ResourcePath, value: bytes) -> str:
        return "raw"

    def type_name(self, path: ResourcePath, value: bytes) -> str:
        return "string"

    def mod_name(self, path: ResourcePath, value: bytes) -> str:
        return f"{RUNTIME_MODULE}.Raw"
