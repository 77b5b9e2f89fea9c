# topmark:header:start
#
#   project      : StatusTree
#   file         : options.py
#   file_relpath : src/statustree/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the StatusTree CLI.

This module centralizes reusable options (verbosity, color, config, report
building) and their resolution logic, so commands and groups can stay thin.
The helpers here are Click-aware.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from statustree.cli.errors import StatusTreeUsageError
from statustree.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the final logging level based on verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level as an integer.

    Raises:
        StatusTreeUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        One or more -q flags set ERROR level.
        Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise StatusTreeUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO

    if quiet_count >= 1:  # -q
        return logging.ERROR

    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds -v/--verbose and -q/--quiet options (counted, mutually exclusive)."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity (stderr). Repeat up to three times for TRACE.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log errors.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode: Explicit color mode from CLI options (auto, always, never).
        output_format: Output format string, e.g. "json".
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        Disables color for JSON output.
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stdout is a TTY.
    """
    if output_format and output_format.lower() == "json":
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color (auto, always, never) and --no-color options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply common configuration options: ``--no-config`` and ``--config/-c``."""
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore statustree.toml and pyproject.toml in the working directory.",
    )(f)
    f = click.option(
        "--config",
        "-c",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        help="Additional config file(s) to load and merge.",
    )(f)
    return f


def common_indent_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply ``--indent N`` (JSON indentation width, 0 for compact output)."""
    return click.option(
        "--indent",
        "indent",
        type=click.IntRange(min=0),
        default=None,
        help="JSON indentation width (0 for compact single-line output).",
    )(f)


def common_report_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply options naming the report built from an input file (``--title``, ``--tab``)."""
    f = click.option(
        "--title",
        "title",
        default=None,
        help="Report title (defaults to the input file name).",
    )(f)
    f = click.option(
        "--tab",
        "tab_name",
        default=None,
        help="Name of the tab holding the tree (defaults to the report title).",
    )(f)
    f = click.option(
        "--main-text",
        "main_text",
        default="",
        help="Report main text.",
    )(f)
    return f
