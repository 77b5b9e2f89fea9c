# topmark:header:start
#
#   project      : StatusTree
#   file         : io.py
#   file_relpath : src/statustree/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input handling for Click commands.

Every command takes a single FILE argument; ``-`` reads the content from STDIN.
OS-level failures are translated into CLI errors carrying sysexits-aligned exit
codes, and library decode failures into `StatusTreeFormatError`.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, NamedTuple

import click

from statustree.cli.errors import (
    StatusTreeFileNotFoundError,
    StatusTreeFormatError,
    StatusTreeIOError,
)
from statustree.codec.serializers import deserialize_report
from statustree.config.logging import get_logger
from statustree.constants import STDIN_PATH
from statustree.core.errors import FormatError

if TYPE_CHECKING:
    from statustree.config.logging import StatusTreeLogger
    from statustree.model.report import Report

logger: StatusTreeLogger = get_logger(__name__)


class InputText(NamedTuple):
    """Text read from a FILE argument.

    Attributes:
        text: The decoded content.
        name: Display name (the path, or ``"<stdin>"``).
        stem: File name without suffix (``"stdin"`` for STDIN), used as a default title.
    """

    text: str
    name: str
    stem: str


def read_input_text(path: str, *, encoding: str = "utf-8") -> InputText:
    """Read a FILE argument (``-`` for STDIN).

    Raises:
        StatusTreeFileNotFoundError: If the path does not exist.
        StatusTreeIOError: If the path cannot be read or decoded.
    """
    if path == STDIN_PATH:
        try:
            text: str = click.get_binary_stream("stdin").read().decode(encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise StatusTreeIOError(f"Cannot read STDIN: {exc}") from exc
        logger.debug("Read %d characters from STDIN", len(text))
        return InputText(text, "<stdin>", "stdin")

    file_path = Path(path)
    try:
        text = file_path.read_text(encoding=encoding)
    except FileNotFoundError as exc:
        raise StatusTreeFileNotFoundError(f"File not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise StatusTreeIOError(f"Cannot read {path}: {exc}") from exc
    logger.debug("Read %d characters from %s", len(text), path)
    return InputText(text, path, file_path.stem)


def read_report_input(path: str) -> Report:
    """Read and decode a report from a FILE argument (``-`` for STDIN).

    Raises:
        StatusTreeFormatError: If the content does not follow the wire format.
    """
    source: InputText = read_input_text(path)
    try:
        return deserialize_report(source.text)
    except FormatError as exc:
        raise StatusTreeFormatError(f"{source.name}: {exc}") from exc
