# topmark:header:start
#
#   project      : Embedres
#   file         : registry.py
#   file_relpath : src/embedres/subformats/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registry of SubFormats.

This module provides a decorator to register `SubFormat` implementations under a
name, and read-only lookups used by the encoding pipeline. Built-in subformats are
imported on first lookup (see `embedres.subformats.register_all_subformats`).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from embedres.config.logging import get_logger
from embedres.errors import UnknownSubformatError

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from embedres.subformats.base import SubFormat

logger = get_logger(__name__)


_registry: dict[str, SubFormat[Any]] = {}


def register_subformat(
    name: str,
) -> Callable[[type[SubFormat[Any]]], type[SubFormat[Any]]]:
    """Class decorator to register a SubFormat under ``name``.

    Args:
        name (str): Name used to select the subformat (configuration, pipeline).

    Returns:
        Callable[[type[SubFormat[Any]]], type[SubFormat[Any]]]: A decorator that
            registers the class as a SubFormat.
    """

    def decorator(cls: type[SubFormat[Any]]) -> type[SubFormat[Any]]:
        """Instantiate ``cls`` once and store the instance under ``name``.

        Raises:
            ValueError: If a subformat is already registered under ``name``.
        """
        logger.debug("Registering subformat %s as '%s'", cls.__name__, name)
        if name in _registry:
            raise ValueError(f"Subformat '{name}' is already registered.")
        _registry[name] = cls()
        return cls

    return decorator


def get_subformat_registry() -> Mapping[str, SubFormat[Any]]:
    """Return a read-only mapping of subformat names to SubFormat instances."""
    from embedres.subformats import register_all_subformats

    register_all_subformats()
    return MappingProxyType(_registry)


def subformat_names() -> tuple[str, ...]:
    """Return all registered subformat names (sorted)."""
    return tuple(sorted(get_subformat_registry()))


def get_subformat(name: str) -> SubFormat[Any]:
    """Return the subformat registered under ``name``.

    Raises:
        UnknownSubformatError: If no subformat is registered under ``name``.
    """
    registry = get_subformat_registry()
    subformat = registry.get(name)
    if subformat is None:
        logger.warning("Subformat '%s' is not registered", name)
        raise UnknownSubformatError(name, tuple(sorted(registry)))
    return subformat
