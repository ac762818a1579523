# topmark:header:start
#
#   project      : ScriptSniff
#   file         : profile.py
#   file_relpath : src/scriptsniff/frameworks/profile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework profiles: what a script built on a CLI framework looks like.

A [`FrameworkProfile`][scriptsniff.frameworks.profile.FrameworkProfile] bundles
the line-oriented patterns the detector needs for one framework family:

- the interpreter substring expected on the shebang line (e.g. ``perl``);
- the namespaced module name and the fixed set of recognized variant suffixes
  (e.g. ``Perinci::CmdLine`` plus ``::Any`` and ``::Lite``);
- the suppression directive derived from the name
  (``# NO_PERINCI_CMDLINE_SCRIPT``).

Patterns are compiled once per profile and are anchored at line start; leading
whitespace is tolerated. No grammar parsing is done.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

DEFAULT_KEYWORDS: tuple[str, ...] = ("use", "require")


def directive_for(name: str) -> str:
    """Return the suppression directive token for a framework name.

    Args:
        name (str): Namespaced module name, e.g. ``"Perinci::CmdLine"``.

    Returns:
        str: The directive token, e.g. ``"NO_PERINCI_CMDLINE_SCRIPT"``.
    """
    stem: str = re.sub(r"[^A-Za-z0-9]+", "_", name).strip("_").upper()
    return f"NO_{stem}_SCRIPT"


@dataclass(frozen=True)
class FrameworkProfile:
    """Immutable description of one CLI framework family.

    Attributes:
        key (str): Stable registry key (e.g. ``"perinci-cmdline"``).
        name (str): Namespaced base module name (e.g. ``"Perinci::CmdLine"``).
        interpreter (str): Substring the shebang line must contain (e.g. ``"perl"``).
        variants (tuple[str, ...]): Recognized suffixes appended to ``name``. The
            empty string stands for the bare base name.
        keywords (tuple[str, ...]): Statements that load a module (``use``, ``require``).
        description (str): Human-readable description for listings.
    """

    key: str
    name: str
    interpreter: str
    variants: tuple[str, ...] = ("",)
    keywords: tuple[str, ...] = DEFAULT_KEYWORDS
    description: str = ""

    signature_re: re.Pattern[str] = field(init=False, repr=False, compare=False)
    directive_re: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError(f"Framework profile {self.key!r} needs a non-empty name")
        if not self.interpreter:
            raise ValueError(f"Framework profile {self.key!r} needs a non-empty interpreter")
        if not self.keywords:
            raise ValueError(f"Framework profile {self.key!r} needs at least one keyword")
        # Normalize list-like inputs (e.g. from TOML) into tuples
        object.__setattr__(self, "variants", tuple(self.variants) or ("",))
        object.__setattr__(self, "keywords", tuple(self.keywords))

        keywords: str = "|".join(re.escape(k) for k in self.keywords)
        variants: str = "|".join(re.escape(v) for v in self.variants)
        # The trailing lookahead keeps the variant set closed: "Foo::Bar::Other"
        # is not a match for "Foo::Bar" unless "::Other" is a listed variant.
        object.__setattr__(
            self,
            "signature_re",
            re.compile(rf"^\s*(?:{keywords})\s+{re.escape(self.name)}(?:{variants})(?![\w:])"),
        )
        object.__setattr__(
            self,
            "directive_re",
            re.compile(rf"^\s*#\s*{re.escape(self.directive)}\s*$"),
        )

    @property
    def directive(self) -> str:
        """Suppression directive token for this framework."""
        return directive_for(self.name)

    @property
    def module_names(self) -> tuple[str, ...]:
        """All fully-qualified module names recognized by the signature scan."""
        return tuple(f"{self.name}{v}" for v in self.variants)

    def names_interpreter(self, shebang_line: str) -> bool:
        """Return True if the shebang line (without ``#!``) names the interpreter."""
        return self.interpreter in shebang_line

    def is_suppression(self, line: str) -> bool:
        """Return True if ``line`` is this framework's suppression directive."""
        return self.directive_re.match(line) is not None

    def matches_signature(self, line: str) -> bool:
        """Return True if ``line`` loads the framework or one of its variants."""
        return self.signature_re.match(line) is not None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly view of the profile."""
        return {
            "key": self.key,
            "name": self.name,
            "interpreter": self.interpreter,
            "variants": list(self.variants),
            "modules": list(self.module_names),
            "keywords": list(self.keywords),
            "directive": f"# {self.directive}",
            "description": self.description,
        }
