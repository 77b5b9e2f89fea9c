# topmark:header:start
#
#   project      : StatusTree
#   file         : check.py
#   file_relpath : src/statustree/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""StatusTree `check` command.

Decodes a report and prints its maximum warning level. The exit status tells
whether the level reached the ``--fail-on`` threshold (``[check] fail_on`` in
the config, ``error`` by default):

- ``0``: the report is below the threshold.
- ``1``: the report's level is at least as severe as the threshold.
- ``65``: the input does not follow the report wire format.
- ``66``: the input file does not exist.

``--fail-on none`` fails for every report, since every level is at least `NONE`.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from statustree.cli.cli_types import EnumChoiceParam, WarningLevelParam
from statustree.cli.cmd_common import color_enabled, get_config, get_console
from statustree.cli.io import read_report_input
from statustree.config.logging import get_logger
from statustree.core.exit_codes import ExitCode
from statustree.core.formats import OutputFormat
from statustree.rendering.outline import level_color

if TYPE_CHECKING:
    from statustree.cli.console import ConsoleLike
    from statustree.config.logging import StatusTreeLogger
    from statustree.config.model import Config
    from statustree.model.levels import WarningLevel
    from statustree.model.report import Report

logger: StatusTreeLogger = get_logger(__name__)


@click.command(
    name="check",
    help="Check a report's maximum warning level against a threshold. Use '-' to read STDIN.",
)
@click.argument("file", metavar="FILE", type=str)
@click.option(
    "--fail-on",
    "fail_on",
    type=WarningLevelParam(),
    default=None,
    help="Fail (exit 1) when the report reaches this level (default: error).",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.pass_context
def check_command(
    ctx: click.Context,
    *,
    file: str,
    fail_on: WarningLevel | None,
    output_format: OutputFormat | None,
) -> None:
    """Check the maximum warning level of the report in FILE.

    Args:
        ctx (click.Context): Current Click context.
        file (str): Path to a report document, or ``-`` for STDIN.
        fail_on (WarningLevel | None): Threshold override.
        output_format (OutputFormat | None): Output format (text by default).
    """
    console: ConsoleLike = get_console(ctx)
    config: Config = get_config(ctx, fail_on=fail_on)
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    report: Report = read_report_input(file)
    level: WarningLevel = report.get_maximum_warning_level()
    reached: bool = level.is_at_least(config.fail_on)
    logger.info(
        "%s: maximum level %s, threshold %s, reached=%s",
        file,
        level.lower_case_name,
        config.fail_on.lower_case_name,
        reached,
    )

    if fmt == OutputFormat.JSON:
        console.print(
            json.dumps(
                {
                    "file": file,
                    "level": level.lower_case_name,
                    "fail_on": config.fail_on.lower_case_name,
                    "reached": reached,
                }
            )
        )
    else:
        label: str = level.lower_case_name
        if color_enabled(ctx, fmt):
            label = level_color(level)(label)
        console.print(f"{file}: {label}")

    if reached:
        ctx.exit(ExitCode.LEVEL_REACHED)
