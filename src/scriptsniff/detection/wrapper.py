# topmark:header:start
#
#   project      : ScriptSniff
#   file         : wrapper.py
#   file_relpath : src/scriptsniff/detection/wrapper.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Wrapper-script detection (opt-in via ``include_wrapper``).

A wrapper is any script (shell, Perl or otherwise) that does not load the
framework itself but only runs a program that does. For example, if
``list-id-holidays`` is a framework script, this shell script is a wrapper:

    #!/bin/bash
    # TAG wrapped=list-id-holidays
    list-id-holidays --is-holiday=0 --is-joint-leave=0 "$@"

The ``# TAG wrapped=<program>`` line is required. The program is resolved on
the executable search path and checked with a nested `detect()` call that has
wrapper detection turned off, so a wrapper of a wrapper is never followed.
"""

from __future__ import annotations

import re
import shutil
from dataclasses import replace
from typing import TYPE_CHECKING

from scriptsniff.config.logging import get_logger
from scriptsniff.detection.checks import BaseCheck
from scriptsniff.detection.model import ReasonCode

if TYPE_CHECKING:
    from collections.abc import Iterable

    from scriptsniff.config.logging import ScriptsniffLogger
    from scriptsniff.detection.context import DetectionContext
    from scriptsniff.detection.model import DetectionRequest, DetectionResult

logger: ScriptsniffLogger = get_logger(__name__)

WRAPPED_TAG_RE: re.Pattern[str] = re.compile(r"^# TAG wrapped=([^=\s]+)\s*$")


def find_wrapped_program(lines: Iterable[str]) -> str | None:
    """Return the program named by the first ``# TAG wrapped=`` line, if any."""
    for line in lines:
        m = WRAPPED_TAG_RE.match(line)
        if m:
            return m.group(1)
    return None


def resolve_program(program: str, search_path: str | None = None) -> str | None:
    """Resolve ``program`` to an executable path, like ``which``.

    Args:
        program (str): Program name (or path) from the wrapper tag.
        search_path (str | None): ``os.pathsep``-separated directories; None
            means the process ``PATH``.

    Returns:
        str | None: The resolved path, or None if not found.
    """
    return shutil.which(program, path=search_path)


class WrapperCheck(BaseCheck):
    """Turn a deferred negative into a match when the file wraps a framework script."""

    def __init__(self) -> None:
        super().__init__(name="wrapper")

    def may_proceed(self, ctx: DetectionContext) -> bool:
        return ctx.request.include_wrapper and ctx.deferred is not None

    def run(self, ctx: DetectionContext) -> None:
        # Lazy import: the engine imports this module to build its check list.
        from scriptsniff.detection.engine import detect

        assert ctx.deferred is not None
        program: str | None = find_wrapped_program(ctx.lines)
        if program is None:
            ctx.reject(ctx.deferred)
            return

        target: str | None = resolve_program(program, ctx.request.search_path)
        if target is None:
            logger.info("wrapper: '%s' not found on the search path", program)
            ctx.reject(ReasonCode.WRAPPED_NOT_FOUND, program=program)
            return

        nested: DetectionRequest = replace(
            ctx.request,
            path=target,
            content=None,
            include_wrapper=False,
        )
        res: DetectionResult = detect(nested)
        logger.debug("wrapper: %s wraps %s -> %s", ctx.request.display_name, target, res)
        if not res.ok or not res.is_match:
            ctx.reject(
                ReasonCode.WRAPPED_NOT_MATCHING,
                program=program,
                framework=ctx.framework.name,
            )
            return
        ctx.accept(
            ReasonCode.WRAPPER.render(program=program),
            code=ReasonCode.WRAPPER,
            wrapped=target,
        )
