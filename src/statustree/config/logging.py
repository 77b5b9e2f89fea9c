# topmark:header:start
#
#   project      : StatusTree
#   file         : logging.py
#   file_relpath : src/statustree/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging for StatusTree: a TRACE level, a logger class and a colored formatter.

Tree mutations (node creation, level changes) are logged at TRACE so that building
large reports stays quiet unless explicitly requested via ``STATUSTREE_LOG_LEVEL``
or ``-vvv``. Log records always go to stderr: stdout carries the documents the
CLI prints.

Colors follow the CLI color mode. `setup_logging` only replaces the handler it
installed itself, so handlers added by the host (or by pytest) stay in place.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, TextIO, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

ENV_LOG_LEVEL: Final[str] = "STATUSTREE_LOG_LEVEL"

# Default threshold when neither the CLI nor the environment sets one.
DEFAULT_LOG_LEVEL: Final[int] = logging.CRITICAL

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = (
    "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"
)

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}

# Most severe first; the first threshold a record reaches picks its style.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright.bold),
    (logging.ERROR, chalk.red_bright),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class StatusTreeLogger(logging.Logger):
    """Logger with an extra `trace` method below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level.

        Args:
            msg (object): The message to be logged.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Extra record attributes.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(StatusTreeLogger)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors whole records by severity with yachalk.

    Args:
        fmt (str): The `logging` format string.
        color (bool): If False, records are returned uncolored.
    """

    color: bool

    def __init__(self, fmt: str, *, color: bool = True) -> None:
        super().__init__(fmt)
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record``, colored by its level when color is enabled."""
        message: str = super().format(record)
        if not self.color:
            return message
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim(message)


class _StatusTreeHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Marker class for the handler installed by `setup_logging`."""


def resolve_env_log_level() -> int | None:
    """Return the level named by ``STATUSTREE_LOG_LEVEL``, or None.

    Accepts level names in any case (``trace``, ``WARN``, ...) and plain numbers.
    Unknown names are ignored.
    """
    value: str = os.environ.get(ENV_LOG_LEVEL, "").strip().upper()
    if not value:
        return None
    if value.isdigit():
        return int(value)
    return _LEVEL_NAMES.get(value)


def setup_logging(
    level: int | None = None,
    *,
    color: bool = True,
    stream: TextIO | None = None,
) -> None:
    """Configure the root logger for StatusTree.

    Args:
        level (int | None): Threshold; None consults `resolve_env_log_level`
            and falls back to `DEFAULT_LOG_LEVEL`.
        color (bool): Whether records are colored.
        stream (TextIO | None): Destination stream (defaults to `sys.stderr`).
    """
    if level is None:
        env_level: int | None = resolve_env_log_level()
        level = env_level if env_level is not None else DEFAULT_LOG_LEVEL

    root_logger: logging.Logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        if isinstance(handler, _StatusTreeHandler):
            root_logger.removeHandler(handler)

    handler = _StatusTreeHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(
        ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT, color=color)
    )
    root_logger.addHandler(handler)


def get_logger(name: str) -> StatusTreeLogger:
    """Return the `StatusTreeLogger` called ``name``."""
    return cast("StatusTreeLogger", logging.getLogger(name))
