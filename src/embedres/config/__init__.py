# topmark:header:start
#
#   project      : Embedres
#   file         : __init__.py
#   file_relpath : src/embedres/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for Embedres (render width/column and subformat selection).

Build a `MutableConfig` (defaults, TOML files, programmatic overrides), then
`freeze()` it into an immutable `Config` for the encoding pipeline.
"""

from __future__ import annotations

from embedres.config.model import Config, MutableConfig

__all__ = [
    "Config",
    "MutableConfig",
]
