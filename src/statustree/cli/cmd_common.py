# topmark:header:start
#
#   project      : StatusTree
#   file         : cmd_common.py
#   file_relpath : src/statustree/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by StatusTree subcommands.

Group-level state lives in ``ctx.obj`` (initialized by `statustree.cli.main.cli`):

- ``"console"``: the `ConsoleLike` used for program output.
- ``"config"``: the frozen `Config` resolved from defaults and config files.
- ``"color_enabled"``: whether human-facing output may use ANSI colors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from statustree.codec.serializers import serialize_report
from statustree.config.model import MutableConfig
from statustree.core.formats import OutputFormat, is_machine_format
from statustree.rendering.outline import render_report_lines

if TYPE_CHECKING:
    import click

    from statustree.cli.console import ConsoleLike
    from statustree.config.model import Config
    from statustree.model.report import Report


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the program-output console stored on the Click context."""
    ctx.ensure_object(dict)
    return cast("ConsoleLike", ctx.obj["console"])


def get_config(ctx: click.Context, **overrides: Any) -> Config:
    """Return the group-level config with per-command CLI overrides applied.

    Args:
        ctx (click.Context): Current Click context.
        **overrides (Any): Keys accepted by `MutableConfig.apply_args`; ``None`` is ignored.

    Returns:
        Config: The effective config for this command.
    """
    ctx.ensure_object(dict)
    base: Config | None = ctx.obj.get("config")
    draft: MutableConfig = base.thaw() if base is not None else MutableConfig.from_defaults()
    return draft.apply_args(overrides).freeze()


def color_enabled(ctx: click.Context, output_format: OutputFormat | None = None) -> bool:
    """Return whether human-facing output may be colored (never for machine formats)."""
    if is_machine_format(output_format):
        return False
    ctx.ensure_object(dict)
    return bool(ctx.obj.get("color_enabled", False))


def emit_report(
    ctx: click.Context,
    report: Report,
    *,
    output_format: OutputFormat,
    config: Config,
) -> None:
    """Print a report as JSON (wire format) or as a text outline."""
    console: ConsoleLike = get_console(ctx)
    if output_format == OutputFormat.JSON:
        console.print(serialize_report(report, indent=config.json_indent))
        return
    for line in render_report_lines(report, color=color_enabled(ctx, output_format)):
        console.print(line)
