# topmark:header:start
#
#   project      : ScriptSniff
#   file         : engine.py
#   file_relpath : src/scriptsniff/detection/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Detection engine.

[`detect`][scriptsniff.detection.engine.detect] validates the request, then runs
the ordered checks over a fresh
[`DetectionContext`][scriptsniff.detection.context.DetectionContext] until one
of them records a verdict. Nothing is cached between calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from scriptsniff.config.logging import get_logger
from scriptsniff.detection.checks import (
    BackupNameCheck,
    ExecutableCheck,
    InterpreterCheck,
    IsFileCheck,
    ReadCheck,
    ShebangCheck,
    SignatureCheck,
    SuppressionCheck,
)
from scriptsniff.detection.context import DetectionContext
from scriptsniff.detection.model import DetectionRequest, DetectionResult, ReasonCode
from scriptsniff.detection.wrapper import WrapperCheck

if TYPE_CHECKING:
    from collections.abc import Sequence

    from scriptsniff.config.logging import ScriptsniffLogger
    from scriptsniff.detection.checks import BaseCheck

logger: ScriptsniffLogger = get_logger(__name__)

DEFAULT_CHECKS: tuple[BaseCheck, ...] = (
    BackupNameCheck(),
    IsFileCheck(),
    ExecutableCheck(),
    ReadCheck(),
    ShebangCheck(),
    InterpreterCheck(),
    SuppressionCheck(),
    SignatureCheck(),
    WrapperCheck(),
)


def run_checks(
    ctx: DetectionContext,
    checks: Sequence[BaseCheck] = DEFAULT_CHECKS,
) -> DetectionResult:
    """Run ``checks`` in order over ``ctx`` and return the recorded verdict.

    Args:
        ctx (DetectionContext): Context for a validated request.
        checks (Sequence[BaseCheck]): Checks to run; the first verdict halts the chain.

    Returns:
        DetectionResult: The verdict. If no check recorded one, the deferred
            negative (or "no signature") is returned.
    """
    for check in checks:
        check(ctx)
        if ctx.is_halted:
            break

    if ctx.result is None:
        ctx.reject(ctx.deferred or ReasonCode.NO_SIGNATURE)
    assert ctx.result is not None
    logger.trace("engine: %s ran %s", ctx.request.display_name, " → ".join(ctx.steps))
    return ctx.result


def detect(request: DetectionRequest) -> DetectionResult:
    """Decide whether the request's input is a script built on the target framework.

    Exactly one of ``request.path`` or ``request.content`` must be set; otherwise
    a request error (status 400) is returned and no check runs. Every other
    outcome is a computed verdict (status 200) whose ``is_match`` and ``reason``
    describe the decision. Filesystem problems become negative verdicts.

    Args:
        request (DetectionRequest): What to inspect and how.

    Returns:
        DetectionResult: The request error or the verdict.

    Example:
        ```python
        from scriptsniff import DetectionRequest, detect

        res = detect(DetectionRequest(content=b"#!/usr/bin/perl\\nuse Perinci::CmdLine::Any;\\n"))
        assert res.is_match
        ```
    """
    if not request.is_valid:
        message: str = (
            "Please specify either a path or a content buffer, not both"
            if request.path is not None
            else "Please specify a path or a content buffer"
        )
        logger.debug("engine: bad request: %s", message)
        return DetectionResult.bad_request(message)

    logger.debug(
        "engine: detecting %s script in %s",
        request.framework.name,
        request.display_name,
    )
    return run_checks(DetectionContext(request=request))
