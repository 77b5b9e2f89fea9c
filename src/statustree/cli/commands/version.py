# topmark:header:start
#
#   project      : StatusTree
#   file         : version.py
#   file_relpath : src/statustree/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""StatusTree `version` command.

Prints the current StatusTree version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from statustree.cli.cli_types import EnumChoiceParam
from statustree.cli.cmd_common import get_console
from statustree.constants import STATUSTREE_VERSION
from statustree.core.formats import OutputFormat

if TYPE_CHECKING:
    from statustree.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of StatusTree.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of StatusTree.

    Args:
        output_format (OutputFormat | None): Optional output format (plain text or JSON).
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    if output_format == OutputFormat.JSON:
        console.print(json.dumps({"version": STATUSTREE_VERSION}))
    else:
        console.print(console.styled(STATUSTREE_VERSION, bold=True))
