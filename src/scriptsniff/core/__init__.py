# topmark:header:start
#
#   project      : ScriptSniff
#   file         : __init__.py
#   file_relpath : src/scriptsniff/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core helpers shared across ScriptSniff packages."""

from __future__ import annotations
