# topmark:header:start
#
#   project      : ScriptSniff
#   file         : model.py
#   file_relpath : src/scriptsniff/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model: a mutable builder and its frozen snapshot.

`MutableConfig` collects settings from defaults, discovered config files,
explicit ``--config`` files and CLI overrides (last one wins), then produces
an immutable `Config` via `MutableConfig.freeze`. `Config` builds the
[`DetectionRequest`][scriptsniff.detection.model.DetectionRequest] objects
handed to the detector.

Merge order (lowest → highest precedence):
    1) Built-in defaults
    2) ``pyproject.toml`` (``[tool.scriptsniff]``) in the working directory
    3) ``scriptsniff.toml`` in the working directory
    4) Extra config files passed explicitly (in the order provided)
    5) CLI overrides
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from scriptsniff.config.errors import ConfigError
from scriptsniff.config.keys import Toml
from scriptsniff.config.loaders import (
    extract_config_table,
    load_defaults_dict,
    load_toml_dict,
)
from scriptsniff.config.logging import get_logger
from scriptsniff.constants import (
    DEFAULT_FRAMEWORK_KEY,
    PYPROJECT_TOML_NAME,
    SCRIPTSNIFF_TOML_NAME,
)
from scriptsniff.detection.model import DetectionRequest
from scriptsniff.frameworks.profile import FrameworkProfile
from scriptsniff.frameworks.registry import (
    UnknownFrameworkError,
    builtin_frameworks,
    get_framework,
    merged_frameworks,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from scriptsniff.config.loaders import TomlTable
    from scriptsniff.config.logging import ScriptsniffLogger

logger: ScriptsniffLogger = get_logger(__name__)


@dataclass(frozen=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        include_noexec (bool): Consider files without the owner execute bit.
        include_backup (bool): Consider backup files (``*~``, ``*.bak``).
        include_wrapper (bool): Recognize tagged wrapper scripts.
        framework (FrameworkProfile): The profile to detect.
        frameworks (Mapping[str, FrameworkProfile]): All known profiles
            (built-ins overlaid with configured ones).
        config_files (tuple[Path, ...]): Config files that contributed, in merge order.
    """

    include_noexec: bool
    include_backup: bool
    include_wrapper: bool
    framework: FrameworkProfile
    frameworks: Mapping[str, FrameworkProfile]
    config_files: tuple[Path, ...] = ()

    def request_for(
        self,
        *,
        path: Path | str | None = None,
        content: bytes | None = None,
        search_path: str | None = None,
    ) -> DetectionRequest:
        """Build a detection request carrying this configuration's flags.

        Validation of the path/content pair is left to the detector, which
        reports a request error when neither or both are given.
        """
        return DetectionRequest(
            path=path,
            content=content,
            include_noexec=self.include_noexec,
            include_backup=self.include_backup,
            include_wrapper=self.include_wrapper,
            framework=self.framework,
            search_path=search_path,
        )

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this configuration."""
        return MutableConfig(
            include_noexec=self.include_noexec,
            include_backup=self.include_backup,
            include_wrapper=self.include_wrapper,
            framework=self.framework.key,
            frameworks={
                k: v for k, v in self.frameworks.items() if builtin_frameworks().get(k) != v
            },
            config_files=list(self.config_files),
        )


def _expect_bool(table: TomlTable, key: str, source: str) -> bool | None:
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise ConfigError(f"'{key}' in {source} must be a boolean, got {value!r}")
    return value


def _expect_str(table: TomlTable, key: str, source: str) -> str | None:
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"'{key}' in {source} must be a non-empty string, got {value!r}")
    return value.strip()


def _expect_str_list(table: TomlTable, key: str, source: str) -> list[str] | None:
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' in {source} must be a list of strings, got {value!r}")
    return [str(v) for v in value]


def framework_from_toml(key: str, table: TomlTable, source: str) -> FrameworkProfile:
    """Build a `FrameworkProfile` from a ``[frameworks.<key>]`` table.

    Args:
        key (str): The table key, used as the registry key.
        table (TomlTable): The table contents.
        source (str): Where the table came from (for error messages).

    Returns:
        FrameworkProfile: The declared profile.

    Raises:
        ConfigError: If required keys are missing or have the wrong type.
    """
    where: str = f"[{Toml.SECTION_FRAMEWORKS}.{key}] of {source}"
    name: str | None = _expect_str(table, Toml.KEY_FW_NAME, where)
    interpreter: str | None = _expect_str(table, Toml.KEY_FW_INTERPRETER, where)
    if name is None or interpreter is None:
        raise ConfigError(
            f"{where} requires '{Toml.KEY_FW_NAME}' and '{Toml.KEY_FW_INTERPRETER}'"
        )
    variants: list[str] | None = _expect_str_list(table, Toml.KEY_FW_VARIANTS, where)
    keywords: list[str] | None = _expect_str_list(table, Toml.KEY_FW_KEYWORDS, where)
    description: Any = table.get(Toml.KEY_FW_DESCRIPTION, "")

    kwargs: dict[str, Any] = {
        "key": key,
        "name": name,
        "interpreter": interpreter,
        "description": str(description),
    }
    if variants is not None:
        kwargs["variants"] = tuple(variants)
    if keywords is not None:
        kwargs["keywords"] = tuple(keywords)
    try:
        return FrameworkProfile(**kwargs)
    except ValueError as e:
        raise ConfigError(f"{where}: {e}") from e


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Tri-state fields (``None``) mean "inherit"; `freeze` falls back to the
    runtime defaults for anything still unset.

    Attributes:
        include_noexec (bool | None): See `Config.include_noexec`.
        include_backup (bool | None): See `Config.include_backup`.
        include_wrapper (bool | None): See `Config.include_wrapper`.
        framework (str | None): Key of the profile to detect.
        frameworks (dict[str, FrameworkProfile]): Profiles declared by config files.
        config_files (list[Path]): Config files that contributed, in merge order.
    """

    include_noexec: bool | None = None
    include_backup: bool | None = None
    include_wrapper: bool | None = None
    framework: str | None = None
    frameworks: dict[str, FrameworkProfile] = field(default_factory=lambda: {})
    config_files: list[Path] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`.

        Raises:
            ConfigError: If the selected framework key is unknown.
        """
        defaults: TomlTable = load_defaults_dict()
        known: dict[str, FrameworkProfile] = merged_frameworks(self.frameworks.values())
        try:
            profile: FrameworkProfile = get_framework(
                self.framework or DEFAULT_FRAMEWORK_KEY, known
            )
        except UnknownFrameworkError as e:
            raise ConfigError(str(e)) from e

        def _pick(value: bool | None, key: str) -> bool:
            return bool(defaults[key]) if value is None else value

        return Config(
            include_noexec=_pick(self.include_noexec, Toml.KEY_INCLUDE_NOEXEC),
            include_backup=_pick(self.include_backup, Toml.KEY_INCLUDE_BACKUP),
            include_wrapper=_pick(self.include_wrapper, Toml.KEY_INCLUDE_WRAPPER),
            framework=profile,
            frameworks=MappingProxyType(known),
            config_files=tuple(self.config_files),
        )

    # ------------------------------ Loading ------------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft populated with the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict(), source="<defaults>")

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, source: str) -> MutableConfig:
        """Parse a ScriptSniff TOML table into a draft.

        Unknown keys are logged and ignored.

        Args:
            data (TomlTable): The ScriptSniff table (top level of ``scriptsniff.toml``
                or ``[tool.scriptsniff]``).
            source (str): Where the table came from (for error messages).

        Returns:
            MutableConfig: The parsed draft.

        Raises:
            ConfigError: If a value has the wrong type.
        """
        draft = cls(
            include_noexec=_expect_bool(data, Toml.KEY_INCLUDE_NOEXEC, source),
            include_backup=_expect_bool(data, Toml.KEY_INCLUDE_BACKUP, source),
            include_wrapper=_expect_bool(data, Toml.KEY_INCLUDE_WRAPPER, source),
            framework=_expect_str(data, Toml.KEY_FRAMEWORK, source),
        )

        fw_tables: Any = data.get(Toml.SECTION_FRAMEWORKS, {})
        if not isinstance(fw_tables, dict):
            raise ConfigError(f"[{Toml.SECTION_FRAMEWORKS}] in {source} must be a table")
        for key, table in fw_tables.items():
            if not isinstance(table, dict):
                raise ConfigError(
                    f"[{Toml.SECTION_FRAMEWORKS}.{key}] in {source} must be a table"
                )
            draft.frameworks[str(key)] = framework_from_toml(str(key), table, source)

        known_keys: set[str] = {*Toml.BOOL_KEYS, Toml.KEY_FRAMEWORK, Toml.SECTION_FRAMEWORKS}
        for unknown in sorted(set(data) - known_keys):
            logger.warning("Ignoring unknown config key '%s' in %s", unknown, source)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``scriptsniff.toml`` and ``pyproject.toml`` (the
        ``[tool.scriptsniff]`` table).

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The draft, or None for a pyproject without a
                ``[tool.scriptsniff]`` table.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        table: TomlTable | None = extract_config_table(path, load_toml_dict(path))
        if table is None:
            return None
        draft: MutableConfig = cls.from_toml_dict(table, source=str(path))
        draft.config_files = [path]
        return draft

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files present in ``start``, lowest precedence first.

        ``pyproject.toml`` is listed before ``scriptsniff.toml`` so that the
        dedicated file wins when both exist.
        """
        found: list[Path] = []
        for name in (PYPROJECT_TOML_NAME, SCRIPTSNIFF_TOML_NAME):
            candidate: Path = start / name
            if candidate.is_file():
                found.append(candidate)
        logger.debug("Discovered config files in %s: %s", start, found)
        return found

    @classmethod
    def load_merged(
        cls,
        *,
        cwd: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft.

        Args:
            cwd (Path | None): Directory searched for config files; defaults to CWD.
            extra_config_files (Iterable[Path] | None): Files merged after discovery,
                in the given order.
            no_config (bool): If True, skip discovery (explicit files still apply).

        Returns:
            MutableConfig: The merged draft, ready for CLI overrides and `freeze`.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            for cfg_path in cls.discover_local_config_files(cwd or Path.cwd()):
                mc: MutableConfig | None = cls.from_toml_file(cfg_path)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            mc = cls.from_toml_file(Path(extra))
            if mc is not None:
                draft = draft.merge_with(mc)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where set values from ``other`` override this draft."""
        return MutableConfig(
            include_noexec=_override(self.include_noexec, other.include_noexec),
            include_backup=_override(self.include_backup, other.include_backup),
            include_wrapper=_override(self.include_wrapper, other.include_wrapper),
            framework=other.framework if other.framework is not None else self.framework,
            frameworks={**self.frameworks, **other.frameworks},
            config_files=[*self.config_files, *other.config_files],
        )

    def apply_overrides(
        self,
        *,
        include_noexec: bool | None = None,
        include_backup: bool | None = None,
        include_wrapper: bool | None = None,
        framework: str | None = None,
    ) -> MutableConfig:
        """Apply CLI overrides in place; ``None`` leaves a value untouched.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        self.include_noexec = _override(self.include_noexec, include_noexec)
        self.include_backup = _override(self.include_backup, include_backup)
        self.include_wrapper = _override(self.include_wrapper, include_wrapper)
        if framework is not None:
            self.framework = framework
        return self


def _override(base: bool | None, value: bool | None) -> bool | None:
    return base if value is None else value
