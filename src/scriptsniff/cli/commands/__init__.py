# topmark:header:start
#
#   project      : ScriptSniff
#   file         : __init__.py
#   file_relpath : src/scriptsniff/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ScriptSniff CLI subcommands."""

from __future__ import annotations
