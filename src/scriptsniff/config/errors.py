# topmark:header:start
#
#   project      : ScriptSniff
#   file         : errors.py
#   file_relpath : src/scriptsniff/config/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration errors.

These are raised by the config layer and translated into CLI errors (exit
code ``CONFIG_ERROR``) by the command that loads configuration.
"""

from __future__ import annotations


class ConfigError(Exception):
    """Configuration is missing, unreadable, malformed or inconsistent."""
