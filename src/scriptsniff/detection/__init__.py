# topmark:header:start
#
#   project      : ScriptSniff
#   file         : __init__.py
#   file_relpath : src/scriptsniff/detection/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework-script detection: request/result model, checks and engine."""

from __future__ import annotations

from scriptsniff.detection.engine import DEFAULT_CHECKS, detect, run_checks
from scriptsniff.detection.model import DetectionRequest, DetectionResult, ReasonCode

__all__ = [
    "DEFAULT_CHECKS",
    "DetectionRequest",
    "DetectionResult",
    "ReasonCode",
    "detect",
    "run_checks",
]
