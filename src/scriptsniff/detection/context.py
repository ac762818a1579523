# topmark:header:start
#
#   project      : ScriptSniff
#   file         : context.py
#   file_relpath : src/scriptsniff/detection/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-call mutable state threaded through the detection checks.

One `DetectionContext` lives for exactly one `detect()` call. Checks read the
request, fill in what they learn (raw bytes, decoded lines, shebang line) and
record the verdict. The first verdict recorded halts the chain.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from scriptsniff.detection.model import DetectionResult, ReasonCode

if TYPE_CHECKING:
    from os import stat_result

    from scriptsniff.detection.model import DetectionRequest
    from scriptsniff.frameworks.profile import FrameworkProfile


@dataclass
class DetectionContext:
    """Mutable state for one detection run.

    Attributes:
        request (DetectionRequest): The (validated) request.
        stat (stat_result | None): ``stat()`` of the file in path mode.
        data (bytes | None): Content under inspection. In path mode this is only
            the two-byte prefix until the prefix is known to be a shebang.
        deferred (ReasonCode | None): Negative verdict held back while wrapper
            detection gets a chance to turn it around.
        result (DetectionResult | None): The verdict, once recorded.
        steps (list[str]): Names of the checks that ran, in order.
    """

    request: DetectionRequest
    stat: stat_result | None = None
    data: bytes | None = None
    deferred: ReasonCode | None = None
    result: DetectionResult | None = None
    steps: list[str] = field(default_factory=list)

    _lines: list[str] | None = field(default=None, init=False, repr=False)

    @property
    def framework(self) -> FrameworkProfile:
        """The framework profile the request targets."""
        return self.request.framework

    @property
    def is_halted(self) -> bool:
        """True once a verdict has been recorded."""
        return self.result is not None

    @property
    def lines(self) -> list[str]:
        """Content split into lines (decoded leniently, computed once).

        Lines are split on LF only; a trailing CR stays on the line and is
        absorbed by the ``\\s*$`` anchors of the line patterns.
        """
        if self._lines is None:
            raw: bytes = self.data or b""
            self._lines = raw.decode("utf-8", errors="replace").split("\n")
        return self._lines

    @property
    def shebang_line(self) -> str:
        """The first line without its leading ``#!``."""
        return self.lines[0][2:] if self.lines else ""

    def reject(self, code: ReasonCode, **params: str) -> None:
        """Record a negative verdict explained by ``code``."""
        self.result = DetectionResult.no_match(code, **params)

    def accept(
        self,
        reason: str = "",
        *,
        code: ReasonCode | None = None,
        wrapped: str | None = None,
    ) -> None:
        """Record a positive verdict."""
        self.result = DetectionResult.match(reason, code=code, wrapped=wrapped)

    def defer(self, code: ReasonCode) -> None:
        """Hold back a negative verdict until wrapper detection has run."""
        if self.deferred is None:
            self.deferred = code
