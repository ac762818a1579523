# topmark:header:start
#
#   project      : ScriptSniff
#   file         : registry.py
#   file_relpath : src/scriptsniff/frameworks/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registry of known framework profiles.

The built-in profiles are defined once at import time and never mutated.
Configuration may declare extra profiles; those are layered on top through
[`merged_frameworks`][scriptsniff.frameworks.registry.merged_frameworks], which
returns a fresh mapping so that no global state leaks between runs.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from scriptsniff.config.logging import get_logger
from scriptsniff.constants import DEFAULT_FRAMEWORK_KEY
from scriptsniff.frameworks.profile import FrameworkProfile

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from scriptsniff.config.logging import ScriptsniffLogger

logger: ScriptsniffLogger = get_logger(__name__)


class UnknownFrameworkError(KeyError):
    """Raised when a framework key is not registered."""

    def __init__(self, key: str, known: Iterable[str]) -> None:
        self.key = key
        self.known = tuple(sorted(known))
        super().__init__(key)

    def __str__(self) -> str:
        return f"Unknown framework '{self.key}' (known: {', '.join(self.known)})"


PERINCI_CMDLINE = FrameworkProfile(
    key=DEFAULT_FRAMEWORK_KEY,
    name="Perinci::CmdLine",
    interpreter="perl",
    variants=("", "::Any", "::Lite"),
    description="Perl CLI scripts built on the Perinci::CmdLine module family",
)

_BUILTINS: Mapping[str, FrameworkProfile] = MappingProxyType(
    {
        PERINCI_CMDLINE.key: PERINCI_CMDLINE,
    }
)


def builtin_frameworks() -> Mapping[str, FrameworkProfile]:
    """Return the read-only mapping of built-in profiles."""
    return _BUILTINS


def merged_frameworks(
    extra: Iterable[FrameworkProfile] = (),
) -> dict[str, FrameworkProfile]:
    """Return built-in profiles overlaid with ``extra`` profiles.

    Later entries win on key collisions, so configuration can redefine a
    built-in profile.

    Args:
        extra (Iterable[FrameworkProfile]): Profiles declared by configuration.

    Returns:
        dict[str, FrameworkProfile]: A new mapping keyed by profile key.
    """
    merged: dict[str, FrameworkProfile] = dict(_BUILTINS)
    for profile in extra:
        if profile.key in merged:
            logger.debug("registry: profile '%s' overrides an earlier definition", profile.key)
        merged[profile.key] = profile
    return merged


def get_framework(
    key: str = DEFAULT_FRAMEWORK_KEY,
    frameworks: Mapping[str, FrameworkProfile] | None = None,
) -> FrameworkProfile:
    """Look up a framework profile by key.

    Args:
        key (str): Registry key (case-insensitive; '_' and '-' are equivalent).
        frameworks (Mapping[str, FrameworkProfile] | None): Mapping to search.
            Defaults to the built-in profiles.

    Returns:
        FrameworkProfile: The matching profile.

    Raises:
        UnknownFrameworkError: If no profile is registered under ``key``.
    """
    table: Mapping[str, FrameworkProfile] = _BUILTINS if frameworks is None else frameworks
    if key in table:
        return table[key]
    wanted: str = key.strip().lower().replace("_", "-")
    for candidate_key, profile in table.items():
        if candidate_key.lower().replace("_", "-") == wanted:
            return profile
    raise UnknownFrameworkError(key, table.keys())


def iter_frameworks(
    frameworks: Mapping[str, FrameworkProfile] | None = None,
) -> Iterator[FrameworkProfile]:
    """Iterate over profiles sorted by key."""
    table: Mapping[str, FrameworkProfile] = _BUILTINS if frameworks is None else frameworks
    for key in sorted(table):
        yield table[key]
