# topmark:header:start
#
#   project      : StatusTree
#   file         : outline.py
#   file_relpath : src/statustree/cli/commands/outline.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""StatusTree `outline` command.

Builds a report from an outline markup file, one node per non-blank line:

- leading tab characters give the depth;
- an optional level marker (``-`` none, ``+`` info, ``!`` warn, ``x`` error)
  followed by whitespace;
- an optional icon tag such as ``$tick$``;
- the label.

Example (``\t`` stands for a tab character)::

    Mods
    \t+ $jar$ fabric-api
    \tx $jar$ broken-mod
    \t\tMissing dependency

The report has a single tab holding the tree and is printed as JSON (or as a
text outline with ``--format text``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from statustree.cli.cli_types import EnumChoiceParam
from statustree.cli.cmd_common import emit_report, get_config
from statustree.cli.io import read_input_text
from statustree.cli.options import common_indent_options, common_report_options
from statustree.config.logging import get_logger
from statustree.core.formats import OutputFormat
from statustree.model.report import Report

if TYPE_CHECKING:
    from statustree.cli.io import InputText
    from statustree.config.logging import StatusTreeLogger
    from statustree.config.model import Config
    from statustree.model.report import Tab

logger: StatusTreeLogger = get_logger(__name__)


def build_outline_report(
    markup: str,
    *,
    title: str,
    tab_name: str,
    main_text: str = "",
) -> Report:
    """Build a single-tab report from outline markup (blank lines are skipped)."""
    report = Report(title, main_text)
    tab: Tab = report.add_tab(tab_name)
    count: int = 0
    for line in markup.splitlines():
        if not line.strip():
            continue
        tab.add_child(line)
        count += 1
    logger.debug("Built outline tab %r from %d line(s)", tab_name, count)
    return report


@click.command(
    name="outline",
    help="Build a report from outline markup (tabs, level markers, $icon$ tags).",
)
@click.argument("file", metavar="FILE", type=str)
@common_report_options
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}; default: json).",
)
@common_indent_options
@click.pass_context
def outline_command(
    ctx: click.Context,
    *,
    file: str,
    title: str | None,
    tab_name: str | None,
    main_text: str,
    output_format: OutputFormat | None,
    indent: int | None,
) -> None:
    """Build and print a report from the outline markup in FILE."""
    config: Config = get_config(ctx, indent=indent)
    source: InputText = read_input_text(file)
    report_title: str = title or source.stem
    report: Report = build_outline_report(
        source.text,
        title=report_title,
        tab_name=tab_name or report_title,
        main_text=main_text,
    )
    emit_report(ctx, report, output_format=output_format or OutputFormat.JSON, config=config)
