# topmark:header:start
#
#   project      : ScriptSniff
#   file         : model.py
#   file_relpath : src/scriptsniff/detection/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Request, result and reason types for script detection.

A [`DetectionRequest`][scriptsniff.detection.model.DetectionRequest] names the
input (a filesystem path *or* an in-memory buffer, never both) and the flags
that shape the decision chain. A
[`DetectionResult`][scriptsniff.detection.model.DetectionResult] carries an
HTTP-style envelope status plus the verdict:

- ``status == 400``: the request itself was malformed (neither or both inputs).
  No check ran.
- ``status == 200``: a verdict was computed. ``is_match`` tells whether the
  input is a framework script; ``reason`` explains a negative verdict.

Negative verdicts are ordinary, enumerable outcomes keyed by
[`ReasonCode`][scriptsniff.detection.model.ReasonCode]; they are never raised.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from scriptsniff.constants import STATUS_BAD_REQUEST, STATUS_OK
from scriptsniff.core.enum_mixins import KeyedStrEnum
from scriptsniff.frameworks.profile import FrameworkProfile
from scriptsniff.frameworks.registry import PERINCI_CMDLINE


class ReasonCode(KeyedStrEnum):
    """Machine keys and human labels for every verdict the detector can explain.

    Labels may contain ``{program}`` and ``{framework}`` placeholders, filled in
    by [`ReasonCode.render`][scriptsniff.detection.model.ReasonCode.render].
    """

    INVALID_REQUEST = ("invalid_request", "exactly one of path or content must be given")
    BACKUP_FILE = ("backup_file", "backup filename is excluded", ("backup",))
    NOT_A_FILE = ("not_a_file", "not a file", ("not_found",))
    NOT_EXECUTABLE = ("not_executable", "not executable", ("noexec",))
    UNREADABLE = ("unreadable", "cannot be read")
    NO_SHEBANG = ("no_shebang", "does not start with a shebang sequence")
    INTERPRETER_MISMATCH = (
        "interpreter_mismatch",
        "shebang line does not name the expected interpreter",
    )
    SUPPRESSED = ("suppressed", "explicitly marked as excluded via directive", ("directive",))
    NO_SIGNATURE = ("no_signature", "no statement invoking the expected framework found")
    WRAPPER = ("wrapper", "wrapper script for '{program}'")
    WRAPPED_NOT_FOUND = (
        "wrapped_not_found",
        "tagged as wrapper but wrapped program '{program}' not found in PATH",
    )
    WRAPPED_NOT_MATCHING = (
        "wrapped_not_matching",
        "tagged as wrapper but wrapped program '{program}' is not a {framework} script",
    )

    def render(self, **params: str) -> str:
        """Return the label with placeholders filled from ``params``."""
        return self.label.format(**params) if params else self.label


@dataclass(frozen=True)
class DetectionRequest:
    """Input for a single detection call.

    Exactly one of ``path`` or ``content`` must be set; the detector reports a
    request error otherwise.

    Attributes:
        path (Path | str | None): File to inspect (path mode).
        content (bytes | None): Raw bytes to inspect (buffer mode).
        include_noexec (bool): Also consider files lacking the owner execute bit.
        include_backup (bool): Also consider backup files (``*~``, ``*.bak``).
        include_wrapper (bool): Recognize wrapper scripts tagged with
            ``# TAG wrapped=<program>``.
        framework (FrameworkProfile): The framework family to look for.
        search_path (str | None): Search path for resolving wrapped programs;
            ``None`` uses the process ``PATH``.
    """

    path: Path | str | None = None
    content: bytes | None = None
    include_noexec: bool = True
    include_backup: bool = False
    include_wrapper: bool = False
    framework: FrameworkProfile = PERINCI_CMDLINE
    search_path: str | None = None

    @property
    def is_valid(self) -> bool:
        """True when exactly one input mode is set."""
        return (self.path is None) != (self.content is None)

    @property
    def buffer_mode(self) -> bool:
        """True when the request inspects an in-memory buffer."""
        return self.content is not None

    @property
    def file_path(self) -> Path | None:
        """The request path as a `Path`, or None in buffer mode."""
        return None if self.path is None else Path(self.path)

    @property
    def display_name(self) -> str:
        """Label used in logs and CLI output."""
        return "<buffer>" if self.path is None else str(self.path)


@dataclass(frozen=True)
class DetectionResult:
    """Outcome of a detection call.

    Attributes:
        status (int): ``200`` for a computed verdict, ``400`` for a malformed request.
        message (str): ``"OK"`` or a description of the request error.
        is_match (bool): Whether the input is a framework script.
        reason (str): Human-readable explanation. Empty only for a direct match.
        code (ReasonCode | None): Machine key of ``reason``; None for a direct match.
        wrapped (str | None): Resolved path of the wrapped program, if any.
    """

    status: int
    message: str
    is_match: bool = False
    reason: str = ""
    code: ReasonCode | None = None
    wrapped: str | None = field(default=None)

    @property
    def ok(self) -> bool:
        """True when a verdict was computed."""
        return self.status == STATUS_OK

    @property
    def is_request_error(self) -> bool:
        """True when the request was malformed."""
        return self.status == STATUS_BAD_REQUEST

    @classmethod
    def match(
        cls,
        reason: str = "",
        *,
        code: ReasonCode | None = None,
        wrapped: str | None = None,
    ) -> DetectionResult:
        """Build a positive verdict."""
        return cls(STATUS_OK, "OK", True, reason, code, wrapped)

    @classmethod
    def no_match(cls, code: ReasonCode, **params: str) -> DetectionResult:
        """Build a negative verdict explained by ``code``."""
        return cls(STATUS_OK, "OK", False, code.render(**params), code)

    @classmethod
    def bad_request(cls, message: str) -> DetectionResult:
        """Build a request-error result."""
        return cls(
            STATUS_BAD_REQUEST,
            message,
            False,
            ReasonCode.INVALID_REQUEST.label,
            ReasonCode.INVALID_REQUEST,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly view of the result."""
        return {
            "status": self.status,
            "message": self.message,
            "is_match": self.is_match,
            "reason": self.reason,
            "code": self.code.key if self.code is not None else None,
            "wrapped": self.wrapped,
        }
