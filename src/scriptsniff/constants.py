# topmark:header:start
#
#   project      : ScriptSniff
#   file         : constants.py
#   file_relpath : src/scriptsniff/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ScriptSniff Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    SCRIPTSNIFF_VERSION: str = get_version("scriptsniff")
except PackageNotFoundError:  # running from a source checkout
    SCRIPTSNIFF_VERSION = "0.0.0"

# Config files discovered in the working directory:
PYPROJECT_TOML_NAME: str = "pyproject.toml"
SCRIPTSNIFF_TOML_NAME: str = "scriptsniff.toml"
PYPROJECT_TOOL_SECTION: str = "tool.scriptsniff"

DEFAULT_FRAMEWORK_KEY: str = "perinci-cmdline"

# HTTP-style envelope statuses carried by every DetectionResult:
STATUS_OK: int = 200
STATUS_BAD_REQUEST: int = 400

SHEBANG: bytes = b"#!"

BACKUP_SUFFIXES: tuple[str, ...] = ("~", ".bak")
