# topmark:header:start
#
#   project      : Embedres
#   file         : types.py
#   file_relpath : src/embedres/subformats/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type definitions shared by subformats and the encoding pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

ResourcePath: TypeAlias = tuple[str, ...]
"""Opaque, ordered path segments locating a resource in the source tree."""


def format_resource_path(path: ResourcePath) -> str:
    """Return ``path`` joined with ``/`` for diagnostics and pattern matching."""
    return "/".join(path)


@dataclass(frozen=True)
class SubFormatInfo:
    """Naming metadata describing a subformat for a given resource.

    Attributes:
        name (str): Display name of the subformat (e.g. ``"raw"``).
        type_name (str): Run-time type of the generated literal (e.g. ``"string list"``).
        mod_name (str): Run-time module implementing the subformat.
    """

    name: str
    type_name: str
    mod_name: str
