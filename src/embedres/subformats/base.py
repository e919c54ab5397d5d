# topmark:header:start
#
#   project      : Embedres
#   file         : base.py
#   file_relpath : src/embedres/subformats/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subformat base module.

This module defines the `SubFormat` base class: the set of operations every
resource codec exposes to the generator. A subformat owns one generation-time value
type ``T`` (what `from_raw` returns) and knows how to pretty print it as a source
literal, and how to dump it back to bytes.

Every operation receives the resource path. Most subformats ignore it; it exists
so that decorating or dispatching subformats can key off the resource location.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

from embedres.subformats.types import SubFormatInfo

if TYPE_CHECKING:
    from embedres.document import Doc
    from embedres.subformats.types import ResourcePath

T = TypeVar("T")


class SubFormat(ABC, Generic[T]):
    """Base class for resource subformats.

    Responsibilities:
        - **Parsing:** turn raw file bytes into the generation-time value
          (`from_raw`), raising `embedres.errors.ParseError` on malformed input.
        - **Dumping:** reconstitute raw bytes from a value (`to_raw`); used for
          round-trip validation and tooling.
        - **Rendering:** build a layout document for the value, given the column
          where rendering starts and the line width budget (`pprint`).
        - **Metadata:** display name, run-time type name and run-time module name
          used to annotate generated code.

    Rendering must be pure: no I/O, no shared state, a fresh document per call.
    """

    @abstractmethod
    def from_raw(self, path: ResourcePath, data: bytes) -> T:
        """Parse raw resource content into the generation-time value."""

    @abstractmethod
    def to_raw(self, path: ResourcePath, value: T) -> bytes:
        """Dump a value back to raw bytes (inverse of `from_raw`)."""

    @abstractmethod
    def pprint(self, column: int, width: int, path: ResourcePath, value: T) -> Doc:
        """Return the literal representation of ``value`` as a layout document.

        Args:
            column (int): Column at which rendering of the literal starts.
            width (int): Expected maximum line width.
            path (ResourcePath): Path to the resource in the resource tree.
            value (T): The value to render.

        Returns:
            Doc: The layout document.
        """

    def pprint_header(self, path: ResourcePath, value: T) -> Doc | None:
        """Optional code to put before the resource definitions (e.g. a type definition)."""
        return None

    def pprint_footer(self, path: ResourcePath, value: T) -> Doc | None:
        """Optional code to put after the resource definitions."""
        return None

    @abstractmethod
    def name(self, path: ResourcePath, value: T) -> str:
        """Name used to identify the subformat."""

    @abstractmethod
    def type_name(self, path: ResourcePath, value: T) -> str:
        """Run-time type name of the literals produced by `pprint`."""

    @abstractmethod
    def mod_name(self, path: ResourcePath, value: T) -> str:
        """Name of the subformat module at run time."""

    def describe(self, path: ResourcePath, value: T) -> SubFormatInfo:
        """Bundle the metadata accessors into a `SubFormatInfo`."""
        return SubFormatInfo(
            name=self.name(path, value),
            type_name=self.type_name(path, value),
            mod_name=self.mod_name(path, value),
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
