# topmark:header:start
#
#   project      : ScriptSniff
#   file         : loaders.py
#   file_relpath : src/scriptsniff/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

Reads ScriptSniff configuration from on-disk TOML files (``scriptsniff.toml``
and ``pyproject.toml``). Parsing is done with `tomlkit` and returned as plain
`dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from scriptsniff.config.errors import ConfigError
from scriptsniff.config.keys import Toml
from scriptsniff.config.logging import get_logger
from scriptsniff.constants import PYPROJECT_TOML_NAME, PYPROJECT_TOOL_SECTION

if TYPE_CHECKING:
    from pathlib import Path

    from scriptsniff.config.logging import ScriptsniffLogger

TomlTable = dict[str, Any]

logger: ScriptsniffLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return ScriptSniff's runtime defaults as a Python dict.

    Returns:
        TomlTable: A new dict so callers can mutate it safely.
    """
    return {
        Toml.KEY_INCLUDE_NOEXEC: True,
        Toml.KEY_INCLUDE_BACKUP: False,
        Toml.KEY_INCLUDE_WRAPPER: False,
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_config_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the ScriptSniff table of a parsed TOML document.

    For ``pyproject.toml`` this is ``[tool.scriptsniff]``; a pyproject without
    that table holds no ScriptSniff configuration and yields None. Any other
    file is a ScriptSniff config file in its entirety.

    Args:
        path (Path): The file the document was read from.
        data (TomlTable): The parsed document.

    Returns:
        TomlTable | None: The relevant table, or None if absent.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get("tool", {})
    section: Any = tool.get("scriptsniff") if isinstance(tool, dict) else None
    if section is None:
        logger.debug("No [%s] table in %s", PYPROJECT_TOOL_SECTION, path)
        return None
    if not isinstance(section, dict):
        raise ConfigError(f"[{PYPROJECT_TOOL_SECTION}] in {path} must be a table")
    return cast("TomlTable", section)
