# topmark:header:start
#
#   project      : ScriptSniff
#   file         : version.py
#   file_relpath : src/scriptsniff/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ScriptSniff `version` command.

Prints the ScriptSniff version installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from scriptsniff.cli.cli_types import OutputFormat
from scriptsniff.cli.cmd_common import get_console, get_effective_verbosity
from scriptsniff.cli.options import common_format_option
from scriptsniff.constants import SCRIPTSNIFF_VERSION

if TYPE_CHECKING:
    from scriptsniff.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of ScriptSniff.",
)
@common_format_option
@click.pass_context
def version_command(
    ctx: click.Context,
    *,
    output_format: OutputFormat | None = None,
) -> None:
    """Show the current version of ScriptSniff."""
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    if fmt.is_machine:
        console.print(json.dumps({"version": SCRIPTSNIFF_VERSION}))
    elif vlevel > 0:
        console.print(console.styled("ScriptSniff version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(SCRIPTSNIFF_VERSION, bold=True)}")
    else:
        console.print(console.styled(SCRIPTSNIFF_VERSION, bold=True))
