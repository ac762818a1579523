# topmark:header:start
#
#   project      : ScriptSniff
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the ScriptSniff test suite.

Provides global fixtures for writing throwaway scripts and keeps the runtime
environment (log level, color) from leaking into test runs.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Protocol

import pytest

from scriptsniff.config import logging

if TYPE_CHECKING:
    from pathlib import Path


PERL_CMDLINE_SCRIPT: str = (
    "#!/usr/bin/perl\n"
    "\n"
    "use 5.010;\n"
    "use strict;\n"
    "use warnings;\n"
    "\n"
    "use Perinci::CmdLine::Any;\n"
    "\n"
    "Perinci::CmdLine::Any->new(url => '/main/hello')->run;\n"
)

TARGET_FRAMEWORK_SCRIPT: str = "#!/usr/bin/perl\nuse strict;\nuse Target::Framework;\nmain();\n"


class ScriptWriter(Protocol):
    """Callable signature of the `write_script` fixture."""

    def __call__(
        self,
        name: str,
        content: str | bytes,
        *,
        executable: bool = True,
        directory: Path | None = None,
    ) -> Path: ...


@pytest.fixture(autouse=True)
def clean_scriptsniff_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the developer's shell environment does not leak into tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture used to manipulate environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)


def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE during tests so failures show the full decision chain.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def write_script(tmp_path: Path) -> ScriptWriter:
    """Return a factory that writes a script into ``tmp_path`` (or ``directory``).

    Args:
        tmp_path (Path): The pytest-provided temporary directory.

    Returns:
        ScriptWriter: ``write_script(name, content, *, executable=True, directory=None)``.
    """

    def _write(
        name: str,
        content: str | bytes,
        *,
        executable: bool = True,
        directory: Path | None = None,
    ) -> Path:
        path: Path = (directory or tmp_path) / name
        data: bytes = content.encode("utf-8") if isinstance(content, str) else content
        path.write_bytes(data)
        os.chmod(path, 0o755 if executable else 0o644)
        return path

    return _write
