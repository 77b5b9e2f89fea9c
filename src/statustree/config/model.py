# topmark:header:start
#
#   project      : StatusTree
#   file         : model.py
#   file_relpath : src/statustree/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot used by the CLI commands.
    - `MutableConfig`: a mutable builder used during discovery/merge; it can be
      frozen into `Config` and thawed back for edits.

Merge order (lowest → highest precedence):
    1) Built-in defaults
    2) ``[tool.statustree]`` in ``pyproject.toml`` of the working directory
    3) ``statustree.toml`` in the working directory
    4) Explicit config files (``--config``), in the order given
    5) CLI overrides (`MutableConfig.apply_args`)

Every `MutableConfig` field is tri-state (``None`` = inherit), so a layer only
overrides what it actually sets. Invalid TOML values are recorded in
``diagnostics`` and the inherited value is kept.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from statustree.config.io import (
    get_int_value_or_none_checked,
    get_string_value_or_none_checked,
    get_table_value,
    get_warning_level_checked,
    load_toml_dict,
    read_toml_dict,
)
from statustree.config.keys import Toml
from statustree.config.logging import get_logger
from statustree.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_SECTION
from statustree.model.icons import IconType
from statustree.model.levels import WarningLevel

if TYPE_CHECKING:
    from statustree.config.io import TomlTable
    from statustree.config.logging import StatusTreeLogger

# ArgsLike: generic mapping accepted by `MutableConfig.apply_args` (CLI namespaces, test dicts).
ArgsLike = Mapping[str, Any]

logger: StatusTreeLogger = get_logger(__name__)

DEFAULT_INDENT: Final[int] = 2
DEFAULT_FOLDER_ICON: Final[str] = IconType.FOLDER
DEFAULT_FILE_ICON: Final[str] = IconType.UNKNOWN_FILE
DEFAULT_FAIL_ON: Final[WarningLevel] = WarningLevel.ERROR


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for StatusTree.

    Attributes:
        indent (int): JSON indentation width; ``0`` selects compact single-line output.
        folder_icon (str): Icon type given to directories by the ``files`` command.
        file_icon (str): Icon type given to files by the ``files`` command.
        fail_on (WarningLevel): Level at which ``check`` reports failure.
        config_files (tuple[str, ...]): Config sources merged into this snapshot.
        diagnostics (tuple[str, ...]): Warnings collected while reading config files.
    """

    indent: int
    folder_icon: str
    file_icon: str
    fail_on: WarningLevel
    config_files: tuple[str, ...]
    diagnostics: tuple[str, ...]

    @property
    def json_indent(self) -> int | None:
        """Return the indent argument for the JSON encoder (``None`` for compact)."""
        return self.indent or None

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config.

        Mirrors `MutableConfig.freeze`. Prefer thaw→edit→freeze rather than
        mutating a runtime `Config`.
        """
        return MutableConfig(
            indent=self.indent,
            folder_icon=self.folder_icon,
            file_icon=self.file_icon,
            fail_on=self.fail_on,
            config_files=list(self.config_files),
            diagnostics=list(self.diagnostics),
        )


# ------------------ Mutable builder ------------------


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Attributes:
        indent (int | None): JSON indentation width, or None to inherit.
        folder_icon (str | None): Directory icon type, or None to inherit.
        file_icon (str | None): File icon type, or None to inherit.
        fail_on (WarningLevel | None): ``check`` failure threshold, or None to inherit.
        config_files (list[str]): Config sources merged so far.
        diagnostics (list[str]): Warnings collected while reading config files.
    """

    indent: int | None = None
    folder_icon: str | None = None
    file_icon: str | None = None
    fail_on: WarningLevel | None = None
    config_files: list[str] = field(default_factory=lambda: [])
    diagnostics: list[str] = field(default_factory=lambda: [])

    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`, filling unset fields with defaults."""
        return Config(
            indent=self.indent if self.indent is not None else DEFAULT_INDENT,
            folder_icon=self.folder_icon if self.folder_icon is not None else DEFAULT_FOLDER_ICON,
            file_icon=self.file_icon if self.file_icon is not None else DEFAULT_FILE_ICON,
            fail_on=self.fail_on if self.fail_on is not None else DEFAULT_FAIL_ON,
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    # ------------------------------- Loading -------------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the built-in defaults."""
        return cls(
            indent=DEFAULT_INDENT,
            folder_icon=DEFAULT_FOLDER_ICON,
            file_icon=DEFAULT_FILE_ICON,
            fail_on=DEFAULT_FAIL_ON,
            config_files=["<defaults>"],
        )

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Create a draft config from a parsed TOML dict.

        Args:
            data (TomlTable): The parsed StatusTree table (already unwrapped from
                ``[tool.statustree]`` for ``pyproject.toml``).
            config_file (Path | None): Optional path of the source TOML file.

        Returns:
            MutableConfig: The resulting draft; unset keys stay ``None``.
        """
        diagnostics: list[str] = []

        codec_tbl: TomlTable = get_table_value(data, Toml.SECTION_CODEC)
        logger.trace("TOML [codec]: %s", codec_tbl)
        files_tbl: TomlTable = get_table_value(data, Toml.SECTION_FILES)
        logger.trace("TOML [files]: %s", files_tbl)
        check_tbl: TomlTable = get_table_value(data, Toml.SECTION_CHECK)
        logger.trace("TOML [check]: %s", check_tbl)

        draft = cls(
            indent=get_int_value_or_none_checked(
                codec_tbl,
                Toml.KEY_INDENT,
                where=f"[{Toml.SECTION_CODEC}]",
                diagnostics=diagnostics,
                minimum=0,
            ),
            folder_icon=get_string_value_or_none_checked(
                files_tbl,
                Toml.KEY_FOLDER_ICON,
                where=f"[{Toml.SECTION_FILES}]",
                diagnostics=diagnostics,
            ),
            file_icon=get_string_value_or_none_checked(
                files_tbl,
                Toml.KEY_FILE_ICON,
                where=f"[{Toml.SECTION_FILES}]",
                diagnostics=diagnostics,
            ),
            fail_on=get_warning_level_checked(
                check_tbl,
                Toml.KEY_FAIL_ON,
                where=f"[{Toml.SECTION_CHECK}]",
                diagnostics=diagnostics,
            ),
            config_files=[str(config_file)] if config_file is not None else [],
            diagnostics=diagnostics,
        )
        return draft

    @classmethod
    def from_toml_file(cls, path: Path, *, strict: bool = False) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``statustree.toml`` and ``pyproject.toml`` files, extracting
        the ``[tool.statustree]`` section from the latter.

        Args:
            path (Path): The TOML file.
            strict (bool): If True, unreadable or malformed files raise
                `ConfigLoadError` instead of being logged and skipped.

        Returns:
            MutableConfig | None: The draft if successful; None when a
                ``pyproject.toml`` has no ``[tool.statustree]`` section.
        """
        data: TomlTable = read_toml_dict(path) if strict else load_toml_dict(path)
        if path.name == PYPROJECT_FILE_NAME:
            data = get_table_value(data, PYPROJECT_SECTION)
            if not data:
                logger.debug("No [%s] section in %s", PYPROJECT_SECTION, path)
                return None
        logger.debug("Loaded config from %s", path)
        return cls.from_toml_dict(data, config_file=path)

    @classmethod
    def discover_local_config_files(cls, directory: Path) -> list[Path]:
        """Return the config files present in ``directory``, lowest precedence first."""
        found: list[Path] = []
        for name in (PYPROJECT_FILE_NAME, CONFIG_FILE_NAME):
            candidate: Path = directory / name
            if candidate.is_file():
                found.append(candidate)
        logger.debug("Discovered config files in %s: %s", directory, found)
        return found

    @classmethod
    def load_merged(
        cls,
        *,
        cwd: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft `MutableConfig`.

        Args:
            cwd (Path | None): Directory searched for ``pyproject.toml`` and
                ``statustree.toml`` (defaults to the current working directory).
            extra_config_files (Iterable[Path] | None): Explicit files merged after
                discovery, in the given order. These are loaded strictly.
            no_config (bool): If True, skip discovery in ``cwd``.

        Returns:
            MutableConfig: A draft ready to be frozen or further edited.

        Raises:
            ConfigLoadError: If an explicit config file cannot be read or parsed.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            for cfg_path in cls.discover_local_config_files(cwd or Path.cwd()):
                mc: MutableConfig | None = cls.from_toml_file(cfg_path)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            mc = cls.from_toml_file(Path(extra), strict=True)
            if mc is not None:
                draft = draft.merge_with(mc)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        return MutableConfig(
            indent=other.indent if other.indent is not None else self.indent,
            folder_icon=other.folder_icon if other.folder_icon is not None else self.folder_icon,
            file_icon=other.file_icon if other.file_icon is not None else self.file_icon,
            fail_on=other.fail_on if other.fail_on is not None else self.fail_on,
            config_files=self.config_files + other.config_files,
            diagnostics=self.diagnostics + other.diagnostics,
        )

    def apply_args(self, args: ArgsLike) -> MutableConfig:
        """Apply CLI overrides in place and return ``self``.

        Recognized keys: ``indent``, ``folder_icon``, ``file_icon``, ``fail_on``.
        ``None`` values are ignored.
        """
        if args.get("indent") is not None:
            self.indent = int(args["indent"])
        if args.get("folder_icon") is not None:
            self.folder_icon = str(args["folder_icon"])
        if args.get("file_icon") is not None:
            self.file_icon = str(args["file_icon"])
        if args.get("fail_on") is not None:
            self.fail_on = args["fail_on"]
        logger.trace("Config after CLI overrides: %s", self)
        return self
