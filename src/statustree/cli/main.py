# topmark:header:start
#
#   project      : StatusTree
#   file         : main.py
#   file_relpath : src/statustree/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""StatusTree CLI entry point.

Key ideas:
- Group-level options (verbosity, color, config files) are initialized once and
  placed into ``ctx.obj``.
- Subcommands reuse the helpers in `statustree.cli.cmd_common` for consistent
  behavior.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from statustree.cli.commands.check import check_command
from statustree.cli.commands.files import files_command
from statustree.cli.commands.outline import outline_command
from statustree.cli.commands.show import show_command
from statustree.cli.commands.version import version_command
from statustree.cli.console import ClickConsole
from statustree.cli.errors import StatusTreeConfigError
from statustree.cli.options import (
    ColorMode,
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from statustree.config.io import ConfigLoadError
from statustree.config.logging import get_logger, resolve_env_log_level, setup_logging
from statustree.config.model import MutableConfig

if TYPE_CHECKING:
    from statustree.cli.console import ConsoleLike
    from statustree.config.logging import StatusTreeLogger
    from statustree.config.model import Config

logger: StatusTreeLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # STATUSTREE_LOG_LEVEL wins over -v/-q
    level_cli: int = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env if level_env is not None else level_cli

    effective_color_mode = ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    setup_logging(level=ctx.obj["log_level"], color=enable_color)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


def init_config(
    ctx: click.Context,
    *,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Resolve the layered configuration and store the frozen snapshot in ``ctx.obj``.

    Raises:
        StatusTreeConfigError: If an explicit config file cannot be read or parsed.
    """
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            extra_config_files=[Path(p) for p in config_paths],
            no_config=no_config,
        )
    except ConfigLoadError as exc:
        raise StatusTreeConfigError(str(exc)) from exc

    config: Config = draft.freeze()
    logger.debug("Config sources: %s", ", ".join(config.config_files))
    ctx.obj["config"] = config


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,  # Always invoke the cli() function
    help="StatusTree CLI: inspect and build status reports.",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Entry point for the StatusTree CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    init_config(ctx, config_paths=config_paths, no_config=no_config)
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'statustree check FILE' to check a report.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(check_command)

cli.add_command(show_command)

cli.add_command(outline_command)

cli.add_command(files_command)

if __name__ == "__main__":
    cli()
