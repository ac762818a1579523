# topmark:header:start
#
#   project      : ScriptSniff
#   file         : checks.py
#   file_relpath : src/scriptsniff/detection/checks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Individual detection checks.

The engine invokes checks as *callables*. `BaseCheck` implements the common
lifecycle:

    ctx = check(ctx)  # internally: may_proceed → run?

A check either passes silently, records a verdict on the context (which halts
the chain), or, when wrapper detection is enabled, defers a negative verdict so
that the wrapper check can still turn it into a match.

Order matters and is defined by `DEFAULT_CHECKS`:

    backup name → is file → executable → read → shebang → interpreter
        → suppression directive → signature scan → wrapper
"""

from __future__ import annotations

import stat
from dataclasses import dataclass
from typing import TYPE_CHECKING

from scriptsniff.config.logging import get_logger
from scriptsniff.constants import BACKUP_SUFFIXES, SHEBANG
from scriptsniff.detection.model import ReasonCode

if TYPE_CHECKING:
    from pathlib import Path

    from scriptsniff.config.logging import ScriptsniffLogger
    from scriptsniff.detection.context import DetectionContext

logger: ScriptsniffLogger = get_logger(__name__)


@dataclass
class BaseCheck:
    """Reusable foundation for detection checks.

    Subclass this and override ``run()`` and, where the check only applies to
    some requests, ``may_proceed()``. Do not override ``__call__``.

    Attributes:
        name (str): Stable check identifier for logs and tracing.
        path_only (bool): If True the check is skipped in buffer mode.
    """

    name: str
    path_only: bool = False

    def __call__(self, ctx: DetectionContext) -> DetectionContext:
        """Invoke the check lifecycle: gate → run (if allowed).

        Args:
            ctx (DetectionContext): The context of the current detection run.

        Returns:
            DetectionContext: The same context instance after mutation.
        """
        if ctx.is_halted:
            return ctx
        if self.path_only and ctx.request.buffer_mode:
            logger.trace("%s: skipped in buffer mode", self.name)
            return ctx
        if not self.may_proceed(ctx):
            logger.trace("%s: not applicable", self.name)
            return ctx

        ctx.steps.append(self.name)
        self.run(ctx)
        if ctx.result is not None:
            logger.debug(
                "%s: %s -> %s (%s)",
                self.name,
                ctx.request.display_name,
                "match" if ctx.result.is_match else "no match",
                ctx.result.reason or "-",
            )
        return ctx

    def may_proceed(self, ctx: DetectionContext) -> bool:
        """Return whether the check applies to this request. Default: ``True``."""
        return True

    def run(self, ctx: DetectionContext) -> None:
        """Perform the check, mutating ``ctx`` in place."""
        raise NotImplementedError


def is_backup_name(path: Path) -> bool:
    """Return True if ``path`` names an editor backup file (``*~``, ``*.bak``)."""
    return path.name.endswith(BACKUP_SUFFIXES)


class BackupNameCheck(BaseCheck):
    """Reject backup files by name unless ``include_backup`` is set."""

    def __init__(self) -> None:
        super().__init__(name="backup-name", path_only=True)

    def may_proceed(self, ctx: DetectionContext) -> bool:
        return not ctx.request.include_backup

    def run(self, ctx: DetectionContext) -> None:
        path: Path | None = ctx.request.file_path
        if path is not None and is_backup_name(path):
            ctx.reject(ReasonCode.BACKUP_FILE)


class IsFileCheck(BaseCheck):
    """The path must name a regular file (symlinks are followed)."""

    def __init__(self) -> None:
        super().__init__(name="is-file", path_only=True)

    def run(self, ctx: DetectionContext) -> None:
        path: Path | None = ctx.request.file_path
        assert path is not None
        try:
            st = path.stat()
        except (OSError, ValueError) as e:
            logger.debug("is-file: cannot stat %s: %s", path, e)
            ctx.reject(ReasonCode.NOT_A_FILE)
            return
        if not stat.S_ISREG(st.st_mode):
            ctx.reject(ReasonCode.NOT_A_FILE)
            return
        ctx.stat = st


class ExecutableCheck(BaseCheck):
    """The owner execute bit must be set unless ``include_noexec`` is set."""

    def __init__(self) -> None:
        super().__init__(name="executable", path_only=True)

    def may_proceed(self, ctx: DetectionContext) -> bool:
        return not ctx.request.include_noexec

    def run(self, ctx: DetectionContext) -> None:
        assert ctx.stat is not None
        if not ctx.stat.st_mode & stat.S_IXUSR:
            ctx.reject(ReasonCode.NOT_EXECUTABLE)


class ReadCheck(BaseCheck):
    """Load the content to inspect.

    In path mode only the first two bytes are read at first; the handle is
    rewound and the full file is read only when those bytes are a shebang. In
    buffer mode the request content is used as is.
    """

    def __init__(self) -> None:
        super().__init__(name="read")

    def run(self, ctx: DetectionContext) -> None:
        if ctx.request.content is not None:
            ctx.data = ctx.request.content
            return

        path: Path | None = ctx.request.file_path
        assert path is not None
        try:
            with path.open("rb") as fh:
                prefix: bytes = fh.read(len(SHEBANG))
                if prefix != SHEBANG:
                    ctx.data = prefix
                    return
                fh.seek(0)
                ctx.data = fh.read()
        except (OSError, ValueError) as e:
            logger.warning("read: cannot read %s: %s", path, e)
            ctx.data = None
            ctx.reject(ReasonCode.UNREADABLE)


class ShebangCheck(BaseCheck):
    """Content must start with ``#!``."""

    def __init__(self) -> None:
        super().__init__(name="shebang")

    def run(self, ctx: DetectionContext) -> None:
        if not (ctx.data or b"").startswith(SHEBANG):
            ctx.reject(ReasonCode.NO_SHEBANG)


class InterpreterCheck(BaseCheck):
    """The shebang line must name the framework's interpreter."""

    def __init__(self) -> None:
        super().__init__(name="interpreter")

    def run(self, ctx: DetectionContext) -> None:
        if ctx.framework.names_interpreter(ctx.shebang_line):
            return
        logger.trace(
            "interpreter: %r does not contain %r", ctx.shebang_line, ctx.framework.interpreter
        )
        if ctx.request.include_wrapper:
            ctx.defer(ReasonCode.INTERPRETER_MISMATCH)
        else:
            ctx.reject(ReasonCode.INTERPRETER_MISMATCH)


class SuppressionCheck(BaseCheck):
    """A ``# NO_<FRAMEWORK>_SCRIPT`` line anywhere opts the file out."""

    def __init__(self) -> None:
        super().__init__(name="suppression")

    def run(self, ctx: DetectionContext) -> None:
        for lineno, line in enumerate(ctx.lines, start=1):
            if ctx.framework.is_suppression(line):
                logger.trace("suppression: directive on line %d", lineno)
                ctx.reject(ReasonCode.SUPPRESSED)
                return


class SignatureCheck(BaseCheck):
    """Some line must ``use``/``require`` the framework or a known variant."""

    def __init__(self) -> None:
        super().__init__(name="signature")

    def may_proceed(self, ctx: DetectionContext) -> bool:
        # A script for another interpreter cannot load the framework itself.
        return ctx.deferred is None

    def run(self, ctx: DetectionContext) -> None:
        for lineno, line in enumerate(ctx.lines, start=1):
            if ctx.framework.matches_signature(line):
                logger.trace("signature: line %d: %s", lineno, line.strip())
                ctx.accept()
                return
        if ctx.request.include_wrapper:
            ctx.defer(ReasonCode.NO_SIGNATURE)
        else:
            ctx.reject(ReasonCode.NO_SIGNATURE)
