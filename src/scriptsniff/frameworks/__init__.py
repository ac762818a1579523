# topmark:header:start
#
#   project      : ScriptSniff
#   file         : __init__.py
#   file_relpath : src/scriptsniff/frameworks/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework profiles and their registry."""

from __future__ import annotations

from scriptsniff.frameworks.profile import FrameworkProfile, directive_for
from scriptsniff.frameworks.registry import (
    PERINCI_CMDLINE,
    UnknownFrameworkError,
    builtin_frameworks,
    get_framework,
    iter_frameworks,
    merged_frameworks,
)

__all__ = [
    "PERINCI_CMDLINE",
    "FrameworkProfile",
    "UnknownFrameworkError",
    "builtin_frameworks",
    "directive_for",
    "get_framework",
    "iter_frameworks",
    "merged_frameworks",
]
