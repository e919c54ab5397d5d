# topmark:header:start
#
#   project      : Embedres
#   file         : constants.py
#   file_relpath : src/embedres/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Embedres Constants."""

from __future__ import annotations

from typing import Final

DEFAULT_TOML_CONFIG_NAME: Final[str] = "embedres.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "embedres"

DEFAULT_WIDTH: Final[int] = 80
DEFAULT_COLUMN: Final[int] = 0
DEFAULT_SUBFORMAT: Final[str] = "raw"

# Uppercase hex digits used by every `\xHH` escape.
HEX_DIGITS: Final[str] = "0123456789ABCDEF"

# Width of one `\xHH` escape in the rendered literal.
HEX_ESCAPE_WIDTH: Final[int] = 4

# Runtime module holding the subformat helpers referenced by generated code.
RUNTIME_MODULE: Final[str] = "EmbedresSubformats"
