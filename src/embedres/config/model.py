# topmark:header:start
#
#   project      : Embedres
#   file         : model.py
#   file_relpath : src/embedres/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot used by the encoding pipeline.
    - `MutableConfig`: a mutable builder used while loading and merging config
      sources; it can be frozen into `Config` and thawed back for edits.

Scope:
    - *In scope*: data shapes, field-level defaulting and sanitation, merge policy
      (`MutableConfig.merge_with`), and freeze/thaw mechanics.
    - *Out of scope*: TOML I/O, which lives in `embedres.config.loaders`.

Immutability:
    - `Config` stores tuples and read-only mappings and is ``frozen=True``. Use
      `Config.thaw` → edit → `MutableConfig.freeze` for safe updates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from embedres.config.keys import Toml
from embedres.config.loaders import load_defaults_dict, load_toml_dict
from embedres.config.logging import get_logger
from embedres.constants import (
    DEFAULT_COLUMN,
    DEFAULT_SUBFORMAT,
    DEFAULT_TOML_CONFIG_NAME,
    DEFAULT_WIDTH,
    PYPROJECT_TOOL_SECTION,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from embedres.config.loaders import TomlTable
    from embedres.config.logging import EmbedresLogger

logger: EmbedresLogger = get_logger(__name__)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Config:
    """Immutable runtime configuration for Embedres.

    Attributes:
        width (int): Target line width of rendered literals.
        column (int): Column at which rendered literals start.
        default_subformat (str): Subformat used when no pattern matches a resource.
        subformat_patterns (Mapping[str, tuple[str, ...]]): Subformat name → gitwildmatch
            patterns selecting it for matching resource paths.
        config_files (tuple[Path | str, ...]): Config sources merged into this snapshot.
        diagnostics (tuple[str, ...]): Warnings collected while loading and sanitizing.
    """

    width: int = DEFAULT_WIDTH
    column: int = DEFAULT_COLUMN
    default_subformat: str = DEFAULT_SUBFORMAT
    subformat_patterns: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    config_files: tuple[Path | str, ...] = ()
    diagnostics: tuple[str, ...] = ()

    _specs: Mapping[str, PathSpec] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        specs: dict[str, PathSpec] = {
            name: PathSpec.from_lines(GitWildMatchPattern, list(patterns))
            for name, patterns in self.subformat_patterns.items()
            if patterns
        }
        object.__setattr__(self, "_specs", MappingProxyType(specs))

    def spec_for(self, subformat: str) -> PathSpec | None:
        """Return the compiled path patterns selecting ``subformat``, if any."""
        return self._specs.get(subformat)

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this configuration."""
        return MutableConfig(
            width=self.width,
            column=self.column,
            default_subformat=self.default_subformat,
            subformat_patterns={k: list(v) for k, v in self.subformat_patterns.items()},
            config_files=list(self.config_files),
            diagnostics=list(self.diagnostics),
        )


@dataclass
class MutableConfig:
    """Mutable configuration used while loading and merging.

    ``None`` means *unset* (inherit from the layer below); `freeze` resolves unset
    values to the runtime defaults.
    """

    width: int | None = None
    column: int | None = None
    default_subformat: str | None = None
    subformat_patterns: dict[str, list[str]] = field(default_factory=lambda: {})
    config_files: list[Path | str] = field(default_factory=lambda: [])
    diagnostics: list[str] = field(default_factory=lambda: [])

    def _warn(self, message: str) -> None:
        logger.warning("%s", message)
        self.diagnostics.append(message)

    # ---------------------------- Build/freeze ----------------------------
    def sanitize(self) -> None:
        """Replace invalid values by defaults, recording a diagnostic for each."""
        from embedres.subformats.registry import subformat_names

        known: tuple[str, ...] = subformat_names()

        if self.width is not None and self.width <= 0:
            self._warn(f"Invalid width {self.width}; using {DEFAULT_WIDTH}")
            self.width = None
        if self.column is not None and self.column < 0:
            self._warn(f"Invalid column {self.column}; using {DEFAULT_COLUMN}")
            self.column = None
        if self.default_subformat is not None and self.default_subformat not in known:
            self._warn(
                f"Unknown default subformat '{self.default_subformat}'; "
                f"using '{DEFAULT_SUBFORMAT}'"
            )
            self.default_subformat = None
        for name in [n for n in self.subformat_patterns if n not in known]:
            self._warn(f"Ignoring patterns for unknown subformat '{name}'")
            del self.subformat_patterns[name]

    def freeze(self) -> Config:
        """Freeze this mutable builder into an immutable Config."""
        self.sanitize()
        return Config(
            width=self.width if self.width is not None else DEFAULT_WIDTH,
            column=self.column if self.column is not None else DEFAULT_COLUMN,
            default_subformat=self.default_subformat or DEFAULT_SUBFORMAT,
            subformat_patterns=MappingProxyType(
                {k: tuple(v) for k, v in sorted(self.subformat_patterns.items())}
            ),
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a `MutableConfig` populated with the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict(), config_file=None)

    @classmethod
    def from_toml_dict(
        cls,
        toml_data: TomlTable,
        *,
        config_file: Path | str | None = None,
    ) -> MutableConfig:
        """Build a `MutableConfig` from a parsed TOML table.

        Values of the wrong type are skipped with a diagnostic; keys that are absent
        stay unset.

        Args:
            toml_data (TomlTable): The parsed TOML content (top-level sections).
            config_file (Path | str | None): Source of the data, for diagnostics.

        Returns:
            MutableConfig: The resulting builder.
        """
        cfg = cls()
        if config_file is not None:
            cfg.config_files.append(config_file)
        source: str = str(config_file) if config_file is not None else "<defaults>"

        render: Any = toml_data.get(Toml.SECTION_RENDER, {})
        if isinstance(render, dict):
            for key in (Toml.KEY_WIDTH, Toml.KEY_COLUMN):
                if key not in render:
                    continue
                value: Any = render[key]
                if _is_int(value):
                    setattr(cfg, key, value)
                else:
                    cfg._warn(f"{source}: [{Toml.SECTION_RENDER}] {key} must be an integer")

        subformats: Any = toml_data.get(Toml.SECTION_SUBFORMATS, {})
        if isinstance(subformats, dict):
            default: Any = subformats.get(Toml.KEY_DEFAULT)
            if isinstance(default, str):
                cfg.default_subformat = default
            elif default is not None:
                cfg._warn(f"{source}: [{Toml.SECTION_SUBFORMATS}] default must be a string")

            patterns: Any = subformats.get(Toml.KEY_PATTERNS, {})
            if isinstance(patterns, dict):
                for name, pats in patterns.items():
                    if isinstance(pats, list) and all(isinstance(p, str) for p in pats):
                        cfg.subformat_patterns[str(name)] = list(pats)
                    else:
                        cfg._warn(
                            f"{source}: patterns for subformat '{name}' must be a list of strings"
                        )

        logger.debug("Loaded config from %s: %s", source, cfg)
        return cfg

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``embedres.toml`` and ``pyproject.toml`` files, extracting the
        ``[tool.embedres]`` section from the latter.

        Returns:
            MutableConfig | None: The builder, or None if ``pyproject.toml`` has no
                ``[tool.embedres]`` section.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        toml_data: TomlTable = load_toml_dict(path)

        if path.name == "pyproject.toml":
            tool_table: Any = toml_data.get("tool", {})
            tool_section: Any = (
                tool_table.get(PYPROJECT_TOOL_SECTION, {}) if isinstance(tool_table, dict) else {}
            )
            if not isinstance(tool_section, dict) or not tool_section:
                logger.debug("No [tool.%s] section in %s", PYPROJECT_TOOL_SECTION, path)
                return None
            toml_data = tool_section

        return cls.from_toml_dict(toml_data, config_file=path)

    @classmethod
    def load_merged(cls, *paths: Path) -> MutableConfig:
        """Merge defaults with each config file in order (later files win).

        Directories are searched for ``embedres.toml``.
        """
        merged: MutableConfig = cls.from_defaults()
        for path in paths:
            target: Path = path / DEFAULT_TOML_CONFIG_NAME if path.is_dir() else path
            layer: MutableConfig | None = cls.from_toml_file(target)
            if layer is not None:
                merged = merged.merge_with(layer)
        return merged

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder where values set in ``other`` override ``self``.

        Patterns are merged per subformat: a subformat listed in ``other`` replaces
        the patterns of the same subformat in ``self``.
        """
        patterns: dict[str, list[str]] = {k: list(v) for k, v in self.subformat_patterns.items()}
        patterns.update({k: list(v) for k, v in other.subformat_patterns.items()})
        return MutableConfig(
            width=other.width if other.width is not None else self.width,
            column=other.column if other.column is not None else self.column,
            default_subformat=other.default_subformat or self.default_subformat,
            subformat_patterns=patterns,
            config_files=[*self.config_files, *other.config_files],
            diagnostics=[*self.diagnostics, *other.diagnostics],
        )
