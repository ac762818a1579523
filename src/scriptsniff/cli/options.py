# topmark:header:start
#
#   project      : ScriptSniff
#   file         : options.py
#   file_relpath : src/scriptsniff/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reusable Click options and their resolution logic.

Commands stay thin: the group applies verbosity and color options once, and
commands that load configuration share `common_config_options`.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from pathlib import Path
from typing import ParamSpec, TypeVar

import click

from scriptsniff.cli.cli_types import ColorMode, EnumChoiceParam, OutputFormat
from scriptsniff.cli.errors import ScriptsniffUsageError

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v``/``-q`` counts.

    Args:
        verbose_count (int): Number of ``-v`` flags.
        quiet_count (int): Number of ``-q`` flags.

    Returns:
        int: ``-1`` when quiet, ``0`` by default, otherwise the ``-v`` count
            (capped at 2).

    Raises:
        ScriptsniffUsageError: If both flags are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ScriptsniffUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return min(verbose_count, 2)


def resolve_color_mode(mode: ColorMode | None, *, stream: object = None) -> bool:
    """Return whether ANSI colors should be emitted.

    ``auto`` honors ``NO_COLOR`` and ``FORCE_COLOR`` and otherwise enables
    color only when the output stream is a terminal.
    """
    mode = mode or ColorMode.AUTO
    if mode is ColorMode.ALWAYS:
        return True
    if mode is ColorMode.NEVER:
        return False
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    out = stream if stream is not None else sys.stdout
    isatty = getattr(out, "isatty", None)
    return bool(isatty and isatty())


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress verdict output; rely on the exit status.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Colorize output (auto, always, never). Default: auto.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable colored output (same as --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` (repeatable) and ``--no-config`` options."""
    f = click.option(
        "--config",
        "config_files",
        multiple=True,
        type=click.Path(dir_okay=False, path_type=Path),
        help="Merge this TOML config file (repeatable; later files win).",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        default=False,
        help="Ignore pyproject.toml and scriptsniff.toml in the working directory.",
    )(f)
    return f


def common_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--format`` output option."""
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)
