# topmark:header:start
#
#   project      : StatusTree
#   file         : files.py
#   file_relpath : src/statustree/cli/commands/files.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""StatusTree `files` command.

Builds a report from a list of ``/``-separated paths, one per non-blank line.
Folders and files are tagged with the ``[files]`` icon types from the config
(``folder`` and ``file`` by default). Afterwards, chains of single-child
folders are collapsed into ``a/b/c`` labels and every folder's children are
sorted by name.
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


def build_files_report(
    paths: str,
    *,
    title: str,
    tab_name: str,
    folder_icon: str,
    file_icon: str,
    main_text: str = "",
) -> Report:
    """Build a single-tab file tree report from newline-separated paths."""
    report = Report(title, main_text)
    tab: Tab = report.add_tab(tab_name)
    for line in paths.splitlines():
        path: str = line.strip()
        if path:
            tab.node.get_file_node(path, folder_icon, file_icon)
    tab.node.merge_single_child_file_path(folder_icon)
    logger.debug(
        "Built file tree tab %r with %d top-level node(s)", tab_name, len(tab.node.children)
    )
    return report


@click.command(
    name="files",
    help="Build a file tree report from '/'-separated paths, one per line.",
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
def files_command(
    ctx: click.Context,
    *,
    file: str,
    title: str | None,
    tab_name: str | None,
    main_text: str,
    output_format: OutputFormat | None,
    indent: int | None,
) -> None:
    """Build and print a file tree report from the paths listed in FILE."""
    config: Config = get_config(ctx, indent=indent)
    source: InputText = read_input_text(file)
    report_title: str = title or source.stem
    report: Report = build_files_report(
        source.text,
        title=report_title,
        tab_name=tab_name or report_title,
        folder_icon=config.folder_icon,
        file_icon=config.file_icon,
        main_text=main_text,
    )
    emit_report(ctx, report, output_format=output_format or OutputFormat.JSON, config=config)
