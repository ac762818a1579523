# topmark:header:start
#
#   project      : ScriptSniff
#   file         : main.py
#   file_relpath : src/scriptsniff/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the ScriptSniff CLI.

Group-level options (verbosity, color) are resolved once and stored in
``ctx.obj`` together with the console; subcommands read them from there.
Internal logging is configured from ``SCRIPTSNIFF_LOG_LEVEL`` only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from scriptsniff.cli.cli_types import ColorMode
from scriptsniff.cli.commands.detect import detect_command
from scriptsniff.cli.commands.frameworks import frameworks_command
from scriptsniff.cli.commands.version import version_command
from scriptsniff.cli.console import ClickConsole
from scriptsniff.cli.options import (
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from scriptsniff.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from scriptsniff.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color, console) on the context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color``.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_mode: ColorMode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(effective_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="ScriptSniff: detect CLI scripts built on a given framework family.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the ScriptSniff CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'scriptsniff detect PATH...' to check scripts.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(detect_command)

cli.add_command(frameworks_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
