# topmark:header:start
#
#   project      : StatusTree
#   file         : io.py
#   file_relpath : src/statustree/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML loading and value getters for StatusTree configuration.

Two families of helpers live here:
- *Unchecked* helpers (`load_toml_dict`, `get_table_value`): return empty
  defaults and only log.
- *Checked* getters: validate the expected shape and record a **warning** in
  the caller's diagnostics list (and log it). The caller keeps its default.

Checked getters never raise: a user mistake in a config file is surfaced
without aborting the run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from statustree.config.logging import get_logger
from statustree.core.errors import StatusTreeError
from statustree.model.levels import WarningLevel

if TYPE_CHECKING:
    from pathlib import Path

    from statustree.config.logging import StatusTreeLogger

logger: StatusTreeLogger = get_logger(__name__)

TomlTable = dict[str, Any]


class ConfigLoadError(StatusTreeError):
    """A configuration file could not be read or parsed."""


def read_toml_dict(path: Path) -> TomlTable:
    """Read and parse a TOML file, raising on failure.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content (empty for a document that is not a table).

    Raises:
        ConfigLoadError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ConfigLoadError(f"Error loading TOML from {path}: {e}") from e
    except TomlkitParseError as e:
        raise ConfigLoadError(f"Error decoding TOML from {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``statustree.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        return read_toml_dict(path)
    except ConfigLoadError as e:
        logger.error("%s", e)
        return {}


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table.

    Returns a new empty dict if the sub-table is missing or not a mapping.
    Dotted keys (``"tool.statustree"``) descend one table per segment.
    """
    current: Any = table
    for part in key.split("."):
        value: Any | None = current.get(part) if isinstance(current, dict) else None
        if not isinstance(value, dict):
            logger.debug("No TOML table at %r", key)
            return {}
        current = value
    return cast("TomlTable", current)


def get_string_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: list[str],
) -> str | None:
    """Return an optional string value, warning when present but not `str`."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value

    loc: Final[str] = f"{where}.{key}"
    logger.warning("Expected string in %s, got %s: %r", loc, type(value).__name__, value)
    diagnostics.append(f"Expected string in {loc}, got {type(value).__name__}: {value!r}")
    return None


def get_int_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: list[str],
    minimum: int | None = None,
) -> int | None:
    """Return an optional int value, warning when present but not a valid `int`.

    Notes:
        - Missing key -> None
        - `bool` is rejected (since `bool` is a subclass of `int`).
        - Values below ``minimum`` are rejected.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"

    # Note: bool is a subclass of int; exclude it.
    if isinstance(value, bool) or not isinstance(value, int):
        logger.warning("Expected int in %s, got %s: %r", loc, type(value).__name__, value)
        diagnostics.append(f"Expected int in {loc}, got {type(value).__name__}: {value!r}")
        return None

    if minimum is not None and value < minimum:
        logger.warning("Value out of range in %s: %r (minimum: %d)", loc, value, minimum)
        diagnostics.append(f"Value out of range in {loc}: {value!r} (minimum: {minimum})")
        return None

    return value


def get_warning_level_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: list[str],
) -> WarningLevel | None:
    """Parse a warning level name (case-insensitive) from TOML.

    - Missing key -> None
    - Wrong type or unknown level name -> warning + None
    """
    raw: str | None = get_string_value_or_none_checked(
        table, key, where=where, diagnostics=diagnostics
    )
    if raw is None:
        return None

    name: str = raw.strip().lower()
    for level in WarningLevel:
        if level.lower_case_name == name:
            return level

    loc: Final[str] = f"{where}.{key}"
    allowed: str = ", ".join(level.lower_case_name for level in WarningLevel)
    logger.warning("Invalid value for %s: %r (allowed: %s)", loc, raw, allowed)
    diagnostics.append(f"Invalid value for {loc}: {raw!r} (allowed: {allowed})")
    return None
