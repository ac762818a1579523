# topmark:header:start
#
#   project      : ScriptSniff
#   file         : errors.py
#   file_relpath : src/scriptsniff/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the ScriptSniff CLI.

Raise these in commands to stop with a standardized message and exit code.
They prefer the project console if one is present in the Click context;
otherwise Click's default error display is used.
"""

from __future__ import annotations

from typing import IO, Any

import click

from scriptsniff.cli.exit_codes import ExitCode


class ScriptsniffError(click.ClickException):
    """Base class for all ScriptSniff CLI errors."""

    exit_code = ExitCode.UNEXPECTED_ERROR

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is not None:
            console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
            return
        super().show(file)


class ScriptsniffUsageError(ScriptsniffError):
    """Error for command-line invocation errors (invalid flags/args, bad input mode)."""

    exit_code = ExitCode.USAGE_ERROR


class ScriptsniffConfigError(ScriptsniffError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR
