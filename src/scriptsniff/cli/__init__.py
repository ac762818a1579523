# topmark:header:start
#
#   project      : ScriptSniff
#   file         : __init__.py
#   file_relpath : src/scriptsniff/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ScriptSniff command-line interface (Click)."""

from __future__ import annotations
