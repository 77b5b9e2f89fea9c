# topmark:header:start
#
#   project      : StatusTree
#   file         : errors.py
#   file_relpath : src/statustree/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the StatusTree CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Library errors (e.g. `FormatError`) are translated
    into these at the command boundary.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from statustree.core.exit_codes import ExitCode


class StatusTreeCliError(click.ClickException):
    """Base class for all StatusTree CLI errors."""

    exit_code = ExitCode.UNEXPECTED_ERROR

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(self.format_message())
                return
        super().show(file)


class StatusTreeUsageError(StatusTreeCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class StatusTreeFormatError(StatusTreeCliError):
    """Error for input documents that do not follow the report wire format."""

    exit_code = ExitCode.FORMAT_ERROR


class StatusTreeFileNotFoundError(StatusTreeCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class StatusTreeIOError(StatusTreeCliError):
    """Error for I/O errors reading input files."""

    exit_code = ExitCode.IO_ERROR


class StatusTreeConfigError(StatusTreeCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR
