# topmark:header:start
#
#   project      : ScriptSniff
#   file         : detect.py
#   file_relpath : src/scriptsniff/cli/commands/detect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ScriptSniff `detect` command.

Runs the detector on each PATH, or on content read from STDIN with
``--stdin``, and prints one verdict per input.

Exit status:
    0  every input is a framework script
    1  at least one input is not
    64 neither PATHS nor ``--stdin`` were given, or both were
    78 configuration error
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

from scriptsniff.cli.cli_types import OutputFormat
from scriptsniff.cli.cmd_common import build_config, get_console, get_effective_verbosity
from scriptsniff.cli.errors import ScriptsniffUsageError
from scriptsniff.cli.exit_codes import ExitCode
from scriptsniff.cli.options import common_config_options, common_format_option
from scriptsniff.config.logging import get_logger
from scriptsniff.detection import detect

if TYPE_CHECKING:
    from scriptsniff.cli.console import ConsoleLike
    from scriptsniff.config.model import Config
    from scriptsniff.detection import DetectionRequest, DetectionResult

logger = get_logger(__name__)


def _build_requests(
    config: Config,
    paths: tuple[Path, ...],
    content: bytes | None,
) -> list[DetectionRequest]:
    """One request per PATH, or a single buffer request.

    With both PATHS and a buffer every request carries both inputs, and with
    neither the single request carries none: the detector reports those as
    request errors.
    """
    if not paths:
        return [config.request_for(content=content)]
    return [config.request_for(path=p, content=content) for p in paths]


def _render_text(
    console: ConsoleLike,
    req: DetectionRequest,
    res: DetectionResult,
    *,
    vlevel: int,
    framework: str,
) -> None:
    name: str = req.display_name
    if res.is_match:
        line = f"{name}: {console.styled('yes', fg='green', bold=True)}"
        if vlevel > 0:
            detail: str = res.reason or f"uses {framework}"
            line += f" ({detail})"
    else:
        line = f"{name}: {console.styled('no', fg='red', bold=True)} ({res.reason})"
        if vlevel > 1 and res.code is not None:
            line += console.styled(f" [{res.code.key}]", dim=True)
    console.print(line)


@click.command(
    name="detect",
    help=(
        "Detect whether each PATH (or STDIN with --stdin) is a CLI script built on "
        "the selected framework family."
    ),
)
@click.argument(
    "paths",
    nargs=-1,
    type=click.Path(path_type=Path),
)
@click.option(
    "--stdin",
    "stdin",
    is_flag=True,
    default=False,
    help="Inspect content read from STDIN instead of files.",
)
@click.option(
    "--include-noexec/--exclude-noexec",
    "include_noexec",
    default=None,
    help="Consider files without the executable bit. Default: include.",
)
@click.option(
    "--include-backup/--exclude-backup",
    "include_backup",
    default=None,
    help="Consider backup files (*~, *.bak). Default: exclude.",
)
@click.option(
    "--include-wrapper/--exclude-wrapper",
    "include_wrapper",
    default=None,
    help="Recognize scripts tagged '# TAG wrapped=<program>'. Default: exclude.",
)
@click.option(
    "--framework",
    "framework",
    type=str,
    default=None,
    help="Framework profile key (see 'scriptsniff frameworks').",
)
@common_config_options
@common_format_option
@click.pass_context
def detect_command(
    ctx: click.Context,
    *,
    paths: tuple[Path, ...],
    stdin: bool,
    include_noexec: bool | None,
    include_backup: bool | None,
    include_wrapper: bool | None,
    framework: str | None,
    config_files: tuple[Path, ...],
    no_config: bool,
    output_format: OutputFormat | None,
) -> None:
    """Detect framework scripts and print one verdict per input."""
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    config: Config = build_config(
        config_files=config_files,
        no_config=no_config,
        include_noexec=include_noexec,
        include_backup=include_backup,
        include_wrapper=include_wrapper,
        framework=framework,
    )

    content: bytes | None = sys.stdin.buffer.read() if stdin else None

    results: list[tuple[DetectionRequest, DetectionResult]] = []
    for req in _build_requests(config, paths, content):
        res: DetectionResult = detect(req)
        if res.is_request_error:
            raise ScriptsniffUsageError(f"{res.message} (give PATHS or --stdin).")
        results.append((req, res))

    if fmt.is_machine:
        records = [{"input": req.display_name, **res.to_dict()} for req, res in results]
        if fmt == OutputFormat.JSON:
            console.print(json.dumps(records, indent=2))
        else:
            for record in records:
                console.print(json.dumps(record))
    elif vlevel >= 0:
        for req, res in results:
            _render_text(console, req, res, vlevel=vlevel, framework=config.framework.name)

    all_match: bool = all(res.is_match for _, res in results)
    ctx.exit(ExitCode.SUCCESS if all_match else ExitCode.NO_MATCH)
