# topmark:header:start
#
#   project      : ScriptSniff
#   file         : test_profile.py
#   file_relpath : tests/frameworks/test_profile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework profiles: derived patterns, directive and validation."""

from __future__ import annotations

import pytest

from scriptsniff.frameworks import PERINCI_CMDLINE, FrameworkProfile, directive_for


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Perinci::CmdLine", "NO_PERINCI_CMDLINE_SCRIPT"),
        ("Target::Framework", "NO_TARGET_FRAMEWORK_SCRIPT"),
        ("App::Cmd", "NO_APP_CMD_SCRIPT"),
        ("click", "NO_CLICK_SCRIPT"),
        ("::Odd--Name::", "NO_ODD_NAME_SCRIPT"),
    ],
)
def test_directive_for(name: str, expected: str) -> None:
    """The directive is the upper-cased name with separators folded to `_`."""
    assert directive_for(name) == expected


def test_perinci_cmdline_profile() -> None:
    """The built-in profile recognizes the base module and two variants."""
    assert PERINCI_CMDLINE.key == "perinci-cmdline"
    assert PERINCI_CMDLINE.interpreter == "perl"
    assert PERINCI_CMDLINE.module_names == (
        "Perinci::CmdLine",
        "Perinci::CmdLine::Any",
        "Perinci::CmdLine::Lite",
    )
    assert PERINCI_CMDLINE.directive == "NO_PERINCI_CMDLINE_SCRIPT"


def test_names_interpreter() -> None:
    """The interpreter test is a plain substring match on the shebang line."""
    assert PERINCI_CMDLINE.names_interpreter("/usr/bin/perl")
    assert PERINCI_CMDLINE.names_interpreter("/usr/bin/env perl -w")
    assert not PERINCI_CMDLINE.names_interpreter("/bin/bash")
    assert not PERINCI_CMDLINE.names_interpreter("")


def test_custom_variants_and_keywords() -> None:
    """Profiles can define their own variants and loading keywords."""
    profile = FrameworkProfile(
        key="py-click",
        name="click",
        interpreter="python",
        variants=["", "_extra"],  # type: ignore[arg-type]
        keywords=["import", "from"],  # type: ignore[arg-type]
    )

    assert profile.variants == ("", "_extra")
    assert profile.keywords == ("import", "from")
    assert profile.matches_signature("import click")
    assert profile.matches_signature("from click_extra import group")
    assert not profile.matches_signature("import clickhouse")
    assert not profile.matches_signature("use click;")


def test_empty_variants_default_to_bare_name() -> None:
    """An empty variant list still matches the base module name."""
    profile = FrameworkProfile(key="t", name="Target::Framework", interpreter="perl", variants=())

    assert profile.variants == ("",)
    assert profile.matches_signature("use Target::Framework;")


def test_regex_metacharacters_in_name_are_literal() -> None:
    """Module names are matched literally."""
    profile = FrameworkProfile(key="t", name="A.B", interpreter="perl")

    assert profile.matches_signature("use A.B;")
    assert not profile.matches_signature("use AxB;")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"name": "", "interpreter": "perl"},
        {"name": "X", "interpreter": ""},
        {"name": "X", "interpreter": "perl", "keywords": ()},
    ],
)
def test_invalid_profiles_are_rejected(kwargs: dict[str, object]) -> None:
    """Profiles need a name, an interpreter and at least one keyword."""
    with pytest.raises(ValueError, match="needs"):
        FrameworkProfile(key="bad", **kwargs)  # type: ignore[arg-type]


def test_profiles_are_immutable() -> None:
    """Profiles are frozen."""
    with pytest.raises(AttributeError):
        PERINCI_CMDLINE.interpreter = "python"  # type: ignore[misc]


def test_to_dict() -> None:
    """`to_dict()` lists the derived module names and directive."""
    data = PERINCI_CMDLINE.to_dict()

    assert data["key"] == "perinci-cmdline"
    assert data["name"] == "Perinci::CmdLine"
    assert data["variants"] == ["", "::Any", "::Lite"]
    assert data["modules"] == [
        "Perinci::CmdLine",
        "Perinci::CmdLine::Any",
        "Perinci::CmdLine::Lite",
    ]
    assert data["keywords"] == ["use", "require"]
    assert data["directive"] == "# NO_PERINCI_CMDLINE_SCRIPT"
