# topmark:header:start
#
#   project      : Embedres
#   file         : test_registry.py
#   file_relpath : tests/subformats/test_registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for subformat registration and lookup."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from embedres.errors import UnknownSubformatError
from embedres.subformats import SubFormat
from embedres.subformats.raw import RawSubFormat
from embedres.subformats.registry import (
    get_subformat,
    get_subformat_registry,
    register_subformat,
    subformat_names,
)

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any


def test_builtin_subformats_are_registered() -> None:
    """The built-in subformats are available by name, in sorted order."""
    assert subformat_names() == ("int", "lines", "raw")


def test_registry_is_read_only() -> None:
    """The registry view cannot be mutated by callers."""
    registry: Mapping[str, SubFormat[Any]] = get_subformat_registry()
    with pytest.raises(TypeError):
        registry["other"] = RawSubFormat()  # type: ignore[index]


def test_lookup_returns_shared_instance() -> None:
    """Each name maps to a single stateless instance."""
    assert get_subformat("raw") is get_subformat("raw")
    assert repr(get_subformat("raw")) == "RawSubFormat()"


def test_unknown_subformat_lists_known_names() -> None:
    """Looking up an unregistered name fails with the known names in the message."""
    with pytest.raises(UnknownSubformatError) as excinfo:
        get_subformat("yaml")
    assert excinfo.value.name == "yaml"
    assert excinfo.value.known == ("int", "lines", "raw")
    assert "int, lines, raw" in str(excinfo.value)


def test_unknown_subformat_is_a_lookup_error() -> None:
    """Callers catching `LookupError` also catch unknown names."""
    with pytest.raises(LookupError):
        get_subformat("")


def test_duplicate_registration_is_rejected() -> None:
    """Registering a second subformat under a taken name raises ValueError."""
    with pytest.raises(ValueError, match="already registered"):
        register_subformat("raw")(RawSubFormat)
    assert isinstance(get_subformat("raw"), RawSubFormat)
