# topmark:header:start
#
#   project      : StatusTree
#   file         : show.py
#   file_relpath : src/statustree/cli/commands/show.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""StatusTree `show` command.

Decodes a report and prints it, either as a text outline of every tab (colored
by warning level) or as canonical JSON re-encoded by the codec.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from statustree.cli.cli_types import EnumChoiceParam
from statustree.cli.cmd_common import emit_report, get_config
from statustree.cli.io import read_report_input
from statustree.cli.options import common_indent_options
from statustree.core.formats import OutputFormat

if TYPE_CHECKING:
    from statustree.config.model import Config
    from statustree.model.report import Report


@click.command(
    name="show",
    help="Print a report as a text outline or as canonical JSON. Use '-' to read STDIN.",
)
@click.argument("file", metavar="FILE", type=str)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}; default: text).",
)
@common_indent_options
@click.pass_context
def show_command(
    ctx: click.Context,
    *,
    file: str,
    output_format: OutputFormat | None,
    indent: int | None,
) -> None:
    """Print the report stored in FILE."""
    config: Config = get_config(ctx, indent=indent)
    report: Report = read_report_input(file)
    emit_report(ctx, report, output_format=output_format or OutputFormat.TEXT, config=config)
