# topmark:header:start
#
#   project      : Embedres
#   file         : __init__.py
#   file_relpath : src/embedres/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Embedres package.

Embedres renders file contents as re-parseable ML source literals. Each resource
is decoded by a *subformat* (raw string, list of lines, integer, ...) and then
pretty printed into a width-aware layout document that the generator turns into
source text.
"""

from __future__ import annotations
