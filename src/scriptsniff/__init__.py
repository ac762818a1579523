# topmark:header:start
#
#   project      : ScriptSniff
#   file         : __init__.py
#   file_relpath : src/scriptsniff/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ScriptSniff package.

ScriptSniff inspects a file or an in-memory buffer and decides whether it is a
command-line script built on a given CLI framework family (by default Perl's
``Perinci::CmdLine``). It exposes a single detection call and a small Click CLI.
"""

from __future__ import annotations

from scriptsniff.detection import DetectionRequest, DetectionResult, ReasonCode, detect
from scriptsniff.frameworks import FrameworkProfile, get_framework

__all__ = [
    "DetectionRequest",
    "DetectionResult",
    "FrameworkProfile",
    "ReasonCode",
    "detect",
    "get_framework",
]
