# topmark:header:start
#
#   project      : Embedres
#   file         : keys.py
#   file_relpath : src/embedres/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for Embedres configuration.

This module defines the authoritative string constants used when reading
Embedres configuration from TOML sources (``embedres.toml`` and
``[tool.embedres]`` in ``pyproject.toml``).

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by Embedres configuration.

    The ordering of constants mirrors the layout of a configuration file:

        [render]
        width = 80
        column = 0

        [subformats]
        default = "raw"

        [subformats.patterns]
        lines = ["*.txt"]
    """

    # [render]
    SECTION_RENDER: Final[str] = "render"

    KEY_WIDTH: Final[str] = "width"
    KEY_COLUMN: Final[str] = "column"

    # [subformats]
    SECTION_SUBFORMATS: Final[str] = "subformats"

    KEY_DEFAULT: Final[str] = "default"
    # [subformats.patterns]: subformat name -> list of gitwildmatch patterns
    KEY_PATTERNS: Final[str] = "patterns"
