# topmark:header:start
#
#   project      : StatusTree
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running StatusTree in a controlled working directory.

`run_cli_in()` changes the process working directory to the given ``tmp_path``
before invoking the Click CLI, so that relative paths and config discovery
(``statustree.toml``, ``pyproject.toml``) are resolved against the test directory.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from statustree.cli.main import cli
from statustree.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["check", "r.json"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv, input=input_text)
    finally:
        os.chdir(cwd)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test does **not** depend on files created in
    ``tmp_path`` (e.g., ``--help`` / ``version``) or reads from STDIN.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_LEVEL_REACHED(result: Result) -> None:
    """Assert that the command exited with LEVEL_REACHED (code 1)."""
    assert result.exit_code == ExitCode.LEVEL_REACHED, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
