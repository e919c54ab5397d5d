# topmark:header:start
#
#   project      : Embedres
#   file         : errors.py
#   file_relpath : src/embedres/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for Embedres.

Usage:
    `ParseError` is raised by `SubFormat.from_raw` when raw content does not fit the
    subformat's domain. Encoders never recover from it; the pipeline records the
    failure for the offending resource and keeps going with the others.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from embedres.subformats.types import ResourcePath


class EmbedresError(Exception):
    """Base class for all Embedres errors."""


class ParseError(EmbedresError, ValueError):
    """Raw resource content does not conform to a subformat.

    Attributes:
        path (ResourcePath): Path of the offending resource.
        subformat (str): Name of the subformat that rejected the content.
        reason (str): Human-readable explanation.
    """

    def __init__(self, path: ResourcePath, subformat: str, reason: str) -> None:
        self.path = path
        self.subformat = subformat
        self.reason = reason
        super().__init__(f"{'/'.join(path) or '<root>'}: cannot parse as {subformat}: {reason}")


class UnknownSubformatError(EmbedresError, LookupError):
    """No subformat is registered under the requested name."""

    def __init__(self, name: str, known: tuple[str, ...] = ()) -> None:
        self.name = name
        self.known = known
        hint = f" (known: {', '.join(known)})" if known else ""
        super().__init__(f"Unknown subformat: {name}{hint}")


class LiteralSyntaxError(EmbedresError, ValueError):
    """Rendered literal text cannot be read back.

    Attributes:
        offset (int): 0-based character offset of the problem in the input text.
    """

    def __init__(self, message: str, offset: int) -> None:
        self.offset = offset
        super().__init__(f"{message} at offset {offset}")
