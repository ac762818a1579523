# topmark:header:start
#
#   project      : ScriptSniff
#   file         : cmd_common.py
#   file_relpath : src/scriptsniff/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small plumbing helpers shared by several commands: reading group state from
the Click context and turning config-layer errors into CLI errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

import click

from scriptsniff.cli.console import ClickConsole
from scriptsniff.cli.errors import ScriptsniffConfigError
from scriptsniff.config.errors import ConfigError
from scriptsniff.config.logging import get_logger
from scriptsniff.config.model import MutableConfig

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from scriptsniff.cli.console import ConsoleLike
    from scriptsniff.config.model import Config

logger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return program-output verbosity (-1 quiet, 0 terse, 1-2 verbose)."""
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    return int(obj.get("verbosity_level", 0))


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the context, creating a plain one if absent."""
    ctx.ensure_object(dict)
    console = ctx.obj.get("console")
    if console is None:
        console = ClickConsole(enable_color=False)
        ctx.obj["console"] = console
    return cast("ConsoleLike", console)


def build_config(
    *,
    config_files: Iterable[Path] = (),
    no_config: bool = False,
    include_noexec: bool | None = None,
    include_backup: bool | None = None,
    include_wrapper: bool | None = None,
    framework: str | None = None,
) -> Config:
    """Merge configuration layers, apply CLI overrides and freeze.

    Raises:
        ScriptsniffConfigError: If any layer is unreadable or invalid, or the
            selected framework is unknown.
    """
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            extra_config_files=config_files,
            no_config=no_config,
        )
        draft.apply_overrides(
            include_noexec=include_noexec,
            include_backup=include_backup,
            include_wrapper=include_wrapper,
            framework=framework,
        )
        config: Config = draft.freeze()
    except ConfigError as e:
        raise ScriptsniffConfigError(str(e)) from e

    logger.debug("Effective config: %s", config)
    return config
