# topmark:header:start
#
#   project      : Embedres
#   file         : __init__.py
#   file_relpath : src/embedres/subformats/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Auto-import all subformat modules in the current package."""

import importlib
import pkgutil
from functools import lru_cache
from pathlib import Path

from embedres.config.logging import get_logger
from embedres.subformats.base import SubFormat
from embedres.subformats.types import ResourcePath, SubFormatInfo

__all__ = [
    "ResourcePath",
    "SubFormat",
    "SubFormatInfo",
    "register_all_subformats",
]

logger = get_logger(__name__)

# Support modules that do not register a subformat.
_NON_SUBFORMAT_MODULES: frozenset[str] = frozenset({"base", "registry", "types"})


@lru_cache(maxsize=1)
def register_all_subformats() -> None:
    """Import all subformat modules in the current package (once per process)."""
    package_dir = Path(__file__).parent
    for module_info in pkgutil.iter_modules([str(package_dir)]):
        if not module_info.ispkg and module_info.name not in _NON_SUBFORMAT_MODULES:
            # Importing the module runs its @register_subformat decorator
            importlib.import_module(f"{__name__}.{module_info.name}")
    logger.debug("Scanned %s for subformat modules", package_dir)
