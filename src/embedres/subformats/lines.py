# topmark:header:start
#
#   project      : Embedres
#   file         : lines.py
#   file_relpath : src/embedres/subformats/lines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lines subformat: resource contents split into a list of lines.

Every CR and every LF byte is a separator. A separator at the very start or at the
very end of the content is ignored, so a final newline does not produce a trailing
empty line. Inside the content each separator counts, which means a CRLF pair yields
an extra empty line: ``b"a\\r\\nb"`` splits into ``[b"a", b"", b"b"]``, and `to_raw`
joins lines with LF only. Files with CR or CRLF line endings therefore do not
round-trip exactly.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from embedres.config.logging import get_logger
from embedres.constants import RUNTIME_MODULE
from embedres.document import break_, group, nest, separate_map, text
from embedres.document import column as with_column
from embedres.subformats.base import SubFormat
from embedres.subformats.raw import render_string
from embedres.subformats.registry import register_subformat

if TYPE_CHECKING:
    from embedres.config.logging import EmbedresLogger
    from embedres.document import Doc
    from embedres.subformats.types import ResourcePath

logger: EmbedresLogger = get_logger(__name__)

_SEPARATOR_RE: re.Pattern[bytes] = re.compile(rb"[\r\n]")

# Indentation of wrapped elements relative to the opening bracket.
LIST_INDENT: int = 2


def split_lines(data: bytes) -> list[bytes]:
    """Split ``data`` at every CR or LF byte (see module docstring for edge cases)."""
    if not data:
        return []
    fields: list[bytes] = _SEPARATOR_RE.split(data)
    if _SEPARATOR_RE.match(data, len(data) - 1):
        fields.pop()
    if _SEPARATOR_RE.match(data) and fields:
        fields.pop(0)
    return fields


@register_subformat("lines")
class LinesSubFormat(SubFormat[list[bytes]]):
    """Splits the input into lines, rendered as a list of string literals."""

    def from_raw(self, path: ResourcePath, data: bytes) -> list[bytes]:
        return split_lines(data)

    def to_raw(self, path: ResourcePath, value: list[bytes]) -> bytes:
        return b"\n".join(value)

    def pprint(self, column: int, width: int, path: ResourcePath, value: list[bytes]) -> Doc:
        if not value:
            return text("[]")

        def element(line: bytes) -> Doc:
            # Each literal is laid out from the column it actually starts at.
            return with_column(lambda col: render_string(col, width, line))

        contents: Doc = separate_map(text(" ;") + break_(1), element, value)
        return group(text("[ ") + nest(LIST_INDENT, contents) + text(" ]"))

    def name(self, path: ResourcePath, value: list[bytes]) -> str:
        return "lines"

    def type_name(self, path: ResourcePath, value: list[bytes]) -> str:
        return "string list"

    def mod_name(self, path: ResourcePath, value: list[bytes]) -> str:
        return f"{RUNTIME_MODULE}.Lines"
