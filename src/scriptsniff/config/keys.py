# topmark:header:start
#
#   project      : ScriptSniff
#   file         : keys.py
#   file_relpath : src/scriptsniff/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key names for ScriptSniff configuration.

These keys are the external configuration API, as it appears in
``scriptsniff.toml`` and in ``[tool.scriptsniff]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML table and key names used by ScriptSniff configuration.

    Example document:

        include_noexec = true
        include_backup = false
        include_wrapper = false
        framework = "perinci-cmdline"

        [frameworks.target-framework]
        name = "Target::Framework"
        interpreter = "perl"
        variants = ["", "::Lite"]
    """

    # Detection flags
    KEY_INCLUDE_NOEXEC: Final[str] = "include_noexec"
    KEY_INCLUDE_BACKUP: Final[str] = "include_backup"
    KEY_INCLUDE_WRAPPER: Final[str] = "include_wrapper"

    # Target framework
    KEY_FRAMEWORK: Final[str] = "framework"

    # [frameworks.<key>]
    SECTION_FRAMEWORKS: Final[str] = "frameworks"

    KEY_FW_NAME: Final[str] = "name"
    KEY_FW_INTERPRETER: Final[str] = "interpreter"
    KEY_FW_VARIANTS: Final[str] = "variants"
    KEY_FW_KEYWORDS: Final[str] = "keywords"
    KEY_FW_DESCRIPTION: Final[str] = "description"

    BOOL_KEYS: Final[tuple[str, ...]] = (
        KEY_INCLUDE_NOEXEC,
        KEY_INCLUDE_BACKUP,
        KEY_INCLUDE_WRAPPER,
    )
