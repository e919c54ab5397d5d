# topmark:header:start
#
#   project      : Embedres
#   file         : integer.py
#   file_relpath : src/embedres/subformats/integer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Integer subformat, mostly useful as a minimal example of a SubFormat."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from embedres.constants import RUNTIME_MODULE
from embedres.document import text
from embedres.errors import ParseError
from embedres.subformats.base import SubFormat
from embedres.subformats.registry import register_subformat

if TYPE_CHECKING:
    from embedres.document import Doc
    from embedres.subformats.types import ResourcePath

_INT_RE: re.Pattern[str] = re.compile(r"[+-]?[0-9]+")


@register_subformat("int")
class IntSubFormat(SubFormat[int]):
    """A signed decimal integer; surrounding whitespace is ignored."""

    def from_raw(self, path: ResourcePath, data: bytes) -> int:
        try:
            raw_text: str = data.decode("ascii").strip()
        except UnicodeDecodeError as exc:
            raise ParseError(path, "int", "content is not ASCII") from exc
        if not _INT_RE.fullmatch(raw_text):
            shown = raw_text if len(raw_text) <= 20 else raw_text[:20] + "..."
            raise ParseError(path, "int", f"not a decimal integer: {shown!r}")
        try:
            return int(raw_text)
        except ValueError as exc:  # exceeds the interpreter's digit limit
            raise ParseError(path, "int", str(exc)) from exc

    def to_raw(self, path: ResourcePath, value: int) -> bytes:
        return str(value).encode("ascii")

    def pprint(self, column: int, width: int, path: ResourcePath, value: int) -> Doc:
        return text(str(value))

    def name(self, path: ResourcePath, value: int) -> str:
        return "int"

    def type_name(self, path: ResourcePath, value: int) -> str:
        return "int"

    def mod_name(self, path: ResourcePath, value: int) -> str:
        return f"{RUNTIME_MODULE}.Int"
