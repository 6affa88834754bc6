# topmark:header:start
#
#   project      : SrcEmit
#   file         : model.py
#   file_relpath : src/srcemit/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot consulted once per emission call or batch.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Sources (lowest to highest precedence):
    1) Built-in defaults
    2) Project configs discovered upward from the anchor directory, root-most first;
       within a directory ``pyproject.toml`` (``[tool.srcemit]``) is merged before
       ``srcemit.toml`` (``[srcemit]``)
    3) Extra config files passed explicitly (``--config``), in the given order
    4) CLI overrides (`MutableConfig.apply_cli_args`)
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Final

from srcemit.config.io import (
    get_int_value_or_none,
    get_string_value_or_none,
    get_table_value,
    load_toml_dict,
)
from srcemit.config.logging import get_logger
from srcemit.config.types import NewlineStyle

if TYPE_CHECKING:
    from srcemit.config.io import TomlTable
    from srcemit.config.logging import SrcEmitLogger
    from srcemit.config.types import ArgsLike

logger: SrcEmitLogger = get_logger(__name__)

PYPROJECT_TOML: Final[str] = "pyproject.toml"
SRCEMIT_TOML: Final[str] = "srcemit.toml"

# Section holding SrcEmit settings in `srcemit.toml`
SRCEMIT_SECTION: Final[str] = "srcemit"


class ConfigError(ValueError):
    """Raised when a configuration value is present but invalid."""


def parse_newline_style(raw: str | None, *, source: str) -> NewlineStyle | None:
    """Parse a newline style token, rejecting unknown values.

    Args:
        raw (str | None): Token from a config file or the CLI (``None`` means unset).
        source (str): Human-readable origin used in the error message.

    Returns:
        NewlineStyle | None: The parsed style, or ``None`` when ``raw`` is ``None``.

    Raises:
        ConfigError: If ``raw`` does not name a known newline style.
    """
    if raw is None:
        return None
    style: NewlineStyle | None = NewlineStyle.parse(raw)
    if style is None:
        raise ConfigError(
            f"Invalid newline_style {raw!r} in {source} "
            f"(expected one of: {', '.join(NewlineStyle.keys())})"
        )
    return style


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for SrcEmit.

    Attributes:
        newline_style (NewlineStyle): The line-ending policy applied to every file
            of an emission call or batch.
        verbosity_level (int | None): None = inherit, 0 = terse, 1 = verbose.
        config_files (tuple[Path | str, ...]): Paths or identifiers of the config
            sources that contributed to this snapshot.
    """

    newline_style: NewlineStyle = NewlineStyle.AUTO
    verbosity_level: int | None = None
    config_files: tuple[Path | str, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config.

        Returns:
            MutableConfig: A mutable builder initialized from this snapshot.
        """
        return MutableConfig(
            newline_style=self.newline_style,
            verbosity_level=self.verbosity_level,
            config_files=list(self.config_files),
        )


# ------------------ Mutable builder ------------------


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Fields left as ``None`` are "unset" and do not override lower layers when merged.

    Attributes:
        newline_style (NewlineStyle | None): Requested newline style, if any.
        verbosity_level (int | None): Requested verbosity, if any.
        config_files (list[Path | str]): Config sources used so far.
    """

    newline_style: NewlineStyle | None = None
    verbosity_level: int | None = None
    config_files: list[Path | str] = field(default_factory=lambda: [])

    def freeze(self) -> Config:
        """Freeze this mutable builder into an immutable Config."""
        return Config(
            newline_style=self.newline_style or NewlineStyle.AUTO,
            verbosity_level=self.verbosity_level,
            config_files=tuple(self.config_files),
        )

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the built-in defaults."""
        return cls(
            newline_style=NewlineStyle.AUTO,
            verbosity_level=None,
            config_files=["<defaults>"],
        )

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> MutableConfig:
        """Build a draft from an already extracted SrcEmit settings table.

        Recognized keys: ``newline_style`` (string) and ``verbosity`` (integer).

        Args:
            data (TomlTable): The ``[srcemit]`` / ``[tool.srcemit]`` table.
            config_file (Path | None): Originating file, used for provenance and errors.

        Returns:
            MutableConfig: The parsed draft.

        Raises:
            ConfigError: If ``newline_style`` is not a known style.
        """
        source: str = str(config_file) if config_file else "<dict>"
        draft = cls(
            newline_style=parse_newline_style(
                get_string_value_or_none(data, "newline_style"), source=source
            ),
            verbosity_level=get_int_value_or_none(data, "verbosity"),
        )
        if config_file is not None:
            draft.config_files = [config_file]
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``srcemit.toml`` (``[srcemit]`` table) and ``pyproject.toml``
        (``[tool.srcemit]`` table).

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The parsed draft, or None if the SrcEmit section is missing.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        toml_data: TomlTable = load_toml_dict(path)

        section: TomlTable
        if path.name == PYPROJECT_TOML:
            section = get_table_value(get_table_value(toml_data, "tool"), SRCEMIT_SECTION)
        else:
            section = get_table_value(toml_data, SRCEMIT_SECTION)
        if not section:
            logger.debug("No SrcEmit section in %s", path)
            return None

        draft: MutableConfig = cls.from_toml_dict(section, config_file=path)
        logger.debug("Generated MutableConfig: %s", draft)
        return draft

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files discovered by walking upward from ``start``.

        The list is ordered root-most first so that nearer files win when merged.
        Within one directory, ``pyproject.toml`` precedes ``srcemit.toml``.
        """
        found: list[Path] = []
        directory: Path = start.resolve()
        for current in (directory, *directory.parents):
            per_dir: list[Path] = [
                current / name
                for name in (PYPROJECT_TOML, SRCEMIT_TOML)
                if (current / name).is_file()
            ]
            found[:0] = per_dir
        logger.trace("Discovered config files: %s", found)
        return found

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft `MutableConfig`.

        Args:
            anchor (Path | None): Discovery start directory (CWD if None). If it is a
                file, its parent directory is used.
            extra_config_files (Iterable[Path] | None): Explicit config files merged
                after discovery, in the given order.
            no_config (bool): If True, skip project discovery.

        Returns:
            MutableConfig: A mutable configuration draft ready to be frozen or further edited.
        """
        draft: MutableConfig = cls.from_defaults()

        start: Path = anchor or Path.cwd()
        if start.is_file():
            start = start.parent

        if not no_config:
            for cfg_path in cls.discover_local_config_files(start):
                mc: MutableConfig | None = cls.from_toml_file(cfg_path)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            mc = cls.from_toml_file(Path(extra))
            if mc is not None:
                draft = draft.merge_with(mc)

        return draft

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where set values from ``other`` override this draft.

        Args:
            other (MutableConfig): The config whose values override those of this draft.

        Returns:
            MutableConfig: A new mutable configuration representing the merged result.
        """
        return MutableConfig(
            newline_style=(
                other.newline_style if other.newline_style is not None else self.newline_style
            ),
            verbosity_level=(
                other.verbosity_level
                if other.verbosity_level is not None
                else self.verbosity_level
            ),
            config_files=[*self.config_files, *other.config_files],
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Apply CLI (or API) overrides in place and return ``self``.

        Recognized keys: ``newline_style`` (str or `NewlineStyle`) and
        ``verbosity_level`` (int). ``None`` values are ignored.

        Raises:
            ConfigError: If ``newline_style`` is not a known style.
        """
        raw_style: object = args.get("newline_style")
        if isinstance(raw_style, NewlineStyle):
            self.newline_style = raw_style
        elif isinstance(raw_style, str):
            self.newline_style = parse_newline_style(raw_style, source="command line")

        verbosity: object = args.get("verbosity_level")
        if isinstance(verbosity, int):
            self.verbosity_level = verbosity
        return self
