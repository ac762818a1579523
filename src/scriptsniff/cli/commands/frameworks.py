# topmark:header:start
#
#   project      : ScriptSniff
#   file         : frameworks.py
#   file_relpath : src/scriptsniff/cli/commands/frameworks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ScriptSniff `frameworks` command.

Lists the framework profiles known to the effective configuration (built-ins
plus ``[frameworks.<key>]`` tables), marking the one ``detect`` uses.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from scriptsniff.cli.cli_types import OutputFormat
from scriptsniff.cli.cmd_common import build_config, get_console, get_effective_verbosity
from scriptsniff.cli.options import common_config_options, common_format_option
from scriptsniff.frameworks import iter_frameworks

if TYPE_CHECKING:
    from pathlib import Path

    from scriptsniff.cli.console import ConsoleLike
    from scriptsniff.config.model import Config


@click.command(
    name="frameworks",
    help="List the framework profiles ScriptSniff can detect.",
)
@common_config_options
@common_format_option
@click.pass_context
def frameworks_command(
    ctx: click.Context,
    *,
    config_files: tuple[Path, ...],
    no_config: bool,
    output_format: OutputFormat | None,
) -> None:
    """List framework profiles."""
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    config: Config = build_config(config_files=config_files, no_config=no_config)

    records = [
        {**profile.to_dict(), "default": profile.key == config.framework.key}
        for profile in iter_frameworks(config.frameworks)
    ]

    if fmt == OutputFormat.JSON:
        console.print(json.dumps(records, indent=2))
        return
    if fmt == OutputFormat.NDJSON:
        for record in records:
            console.print(json.dumps(record))
        return

    for record in records:
        marker: str = "*" if record["default"] else " "
        console.print(
            f"{marker} {console.styled(record['key'], bold=True)}  "
            f"{record['name']} (interpreter: {record['interpreter']})"
        )
        if vlevel > 0 and record["description"]:
            console.print(f"      {record['description']}")
        console.print(f"      modules:   {', '.join(record['modules'])}")
        console.print(f"      directive: {record['directive']}")
