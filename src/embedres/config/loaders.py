# topmark:header:start
#
#   project      : Embedres
#   file         : loaders.py
#   file_relpath : src/embedres/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides the runtime defaults (no I/O) and a reader for on-disk TOML
files (``embedres.toml`` / ``pyproject.toml``). Parsing is done with `tomlkit` and
returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeAlias, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from embedres.config.keys import Toml
from embedres.config.logging import get_logger
from embedres.constants import DEFAULT_COLUMN, DEFAULT_SUBFORMAT, DEFAULT_WIDTH

if TYPE_CHECKING:
    from pathlib import Path

    from embedres.config.logging import EmbedresLogger

logger: EmbedresLogger = get_logger(__name__)

TomlTable: TypeAlias = dict[str, Any]


def load_defaults_dict() -> TomlTable:
    """Return Embedres **runtime defaults** as a Python dict.

    This function intentionally performs **no I/O**.

    Returns:
        A TOML-table-compatible dict containing the runtime defaults. The returned
        value is a new dict so callers can mutate it safely.
    """
    return {
        Toml.SECTION_RENDER: {
            Toml.KEY_WIDTH: DEFAULT_WIDTH,
            Toml.KEY_COLUMN: DEFAULT_COLUMN,
        },
        Toml.SECTION_SUBFORMATS: {
            Toml.KEY_DEFAULT: DEFAULT_SUBFORMAT,
            Toml.KEY_PATTERNS: {},
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``embedres.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}
