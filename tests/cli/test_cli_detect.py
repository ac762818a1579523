# topmark:header:start
#
#   project      : ScriptSniff
#   file         : test_cli_detect.py
#   file_relpath : tests/cli/test_cli_detect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `detect` verdicts, exit codes, flags, config and machine output."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

from tests.cli.conftest import (
    assert_CONFIG_ERROR,
    assert_NO_MATCH,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    run_cli_in,
)
from tests.conftest import PERL_CMDLINE_SCRIPT, TARGET_FRAMEWORK_SCRIPT

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

    from tests.conftest import ScriptWriter

pytestmark = pytest.mark.cli


def test_detect_match_exits_success(tmp_path: Path, write_script: ScriptWriter) -> None:
    """A framework script prints `yes` and exits 0."""
    write_script("hello", PERL_CMDLINE_SCRIPT)

    result: Result = run_cli_in(tmp_path, ["--no-color", "detect", "hello"])

    assert_SUCCESS(result)
    assert result.output.strip() == "hello: yes"


def test_detect_no_match_exits_one(tmp_path: Path, write_script: ScriptWriter) -> None:
    """A non-matching script prints `no (reason)` and exits 1."""
    write_script("plain.sh", "#!/bin/sh\necho hi\n")

    result: Result = run_cli_in(tmp_path, ["--no-color", "detect", "plain.sh"])

    assert_NO_MATCH(result)
    assert result.output.strip() == (
        "plain.sh: no (shebang line does not name the expected interpreter)"
    )


def test_detect_multiple_paths(tmp_path: Path, write_script: ScriptWriter) -> None:
    """One line per input; any negative makes the exit status 1."""
    write_script("hello", PERL_CMDLINE_SCRIPT)
    write_script("hello~", PERL_CMDLINE_SCRIPT)

    result: Result = run_cli_in(tmp_path, ["--no-color", "detect", "hello", "hello~", "missing"])

    assert_NO_MATCH(result)
    assert result.output.splitlines() == [
        "hello: yes",
        "hello~: no (backup filename is excluded)",
        "missing: no (not a file)",
    ]


def test_detect_verbose_details(tmp_path: Path, write_script: ScriptWriter) -> None:
    """`-v` names the framework on a match; `-vv` adds the reason key on a miss."""
    write_script("hello", PERL_CMDLINE_SCRIPT)
    write_script("plain.pl", "#!/usr/bin/perl\nprint 1;\n")

    result: Result = run_cli_in(tmp_path, ["--no-color", "-v", "detect", "hello"])
    assert_SUCCESS(result)
    assert result.output.strip() == "hello: yes (uses Perinci::CmdLine)"

    result = run_cli_in(tmp_path, ["--no-color", "-vv", "detect", "plain.pl"])
    assert_NO_MATCH(result)
    assert result.output.strip() == (
        "plain.pl: no (no statement invoking the expected framework found) [no_signature]"
    )


def test_detect_quiet(tmp_path: Path, write_script: ScriptWriter) -> None:
    """`-q` prints nothing; the exit status carries the verdict."""
    write_script("plain.sh", "#!/bin/sh\n")

    result: Result = run_cli_in(tmp_path, ["-q", "detect", "plain.sh"])

    assert_NO_MATCH(result)
    assert result.output == ""


def test_verbose_and_quiet_are_exclusive(tmp_path: Path) -> None:
    """Combining `-v` and `-q` is a usage error."""
    result: Result = run_cli_in(tmp_path, ["-v", "-q", "detect", "x"])

    assert_USAGE_ERROR(result)
    assert "mutually exclusive" in result.output


def test_detect_stdin(tmp_path: Path) -> None:
    """`--stdin` inspects the piped content."""
    result: Result = run_cli_in(
        tmp_path,
        ["--no-color", "detect", "--stdin"],
        input_data=PERL_CMDLINE_SCRIPT.encode("utf-8"),
    )

    assert_SUCCESS(result)
    assert result.output.strip() == "<buffer>: yes"


def test_detect_stdin_passes_raw_bytes(tmp_path: Path) -> None:
    """Bytes that are not valid UTF-8 reach the engine unchanged."""
    data: bytes = b"#!/usr/bin/perl\n# \xff\xfe\nuse Perinci::CmdLine::Any;\n"
    result: Result = run_cli_in(tmp_path, ["--no-color", "detect", "--stdin"], input_data=data)

    assert_SUCCESS(result)
    assert result.output.strip() == "<buffer>: yes"


def test_detect_empty_stdin(tmp_path: Path) -> None:
    """Empty piped content has no shebang."""
    result: Result = run_cli_in(tmp_path, ["--no-color", "detect", "--stdin"], input_data=b"")

    assert_NO_MATCH(result)
    assert result.output.strip() == "<buffer>: no (does not start with a shebang sequence)"


def test_detect_without_input_is_usage_error(tmp_path: Path) -> None:
    """Neither PATHS nor `--stdin` is a request error (exit 64)."""
    result: Result = run_cli_in(tmp_path, ["--no-color", "detect"])

    assert_USAGE_ERROR(result)
    assert "Please specify a path or a content buffer" in result.output


def test_detect_paths_and_stdin_is_usage_error(
    tmp_path: Path,
    write_script: ScriptWriter,
) -> None:
    """PATHS together with `--stdin` is a request error (exit 64)."""
    write_script("hello", PERL_CMDLINE_SCRIPT)

    result: Result = run_cli_in(
        tmp_path,
        ["--no-color", "detect", "--stdin", "hello"],
        input_data=b"#!/usr/bin/perl\n",
    )

    assert_USAGE_ERROR(result)
    assert "not both" in result.output


def test_exclude_noexec_flag(tmp_path: Path, write_script: ScriptWriter) -> None:
    """`--exclude-noexec` requires the execute bit."""
    write_script("hello", PERL_CMDLINE_SCRIPT, executable=False)

    assert_SUCCESS(run_cli_in(tmp_path, ["detect", "hello"]))

    result: Result = run_cli_in(tmp_path, ["--no-color", "detect", "--exclude-noexec", "hello"])
    assert_NO_MATCH(result)
    assert "not executable" in result.output


def test_include_backup_flag(tmp_path: Path, write_script: ScriptWriter) -> None:
    """`--include-backup` lets backup files through."""
    write_script("hello.bak", PERL_CMDLINE_SCRIPT)

    assert_NO_MATCH(run_cli_in(tmp_path, ["detect", "hello.bak"]))
    assert_SUCCESS(run_cli_in(tmp_path, ["detect", "--include-backup", "hello.bak"]))


def test_include_wrapper_flag(
    tmp_path: Path,
    write_script: ScriptWriter,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """`--include-wrapper` resolves the wrapped program on PATH."""
    bin_dir: Path = tmp_path / "bin"
    bin_dir.mkdir()
    write_script("list-id-holidays", PERL_CMDLINE_SCRIPT, directory=bin_dir)
    write_script("holidays", "#!/bin/sh\n# TAG wrapped=list-id-holidays\nlist-id-holidays\n")
    monkeypatch.setenv("PATH", str(bin_dir))

    assert_NO_MATCH(run_cli_in(tmp_path, ["detect", "holidays"]))

    result: Result = run_cli_in(
        tmp_path, ["--no-color", "-v", "detect", "--include-wrapper", "holidays"]
    )
    assert_SUCCESS(result)
    assert result.output.strip() == "holidays: yes (wrapper script for 'list-id-holidays')"


# ------------------------------ configuration ------------------------------


def test_config_file_in_cwd_is_discovered(tmp_path: Path, write_script: ScriptWriter) -> None:
    """scriptsniff.toml in the working directory sets the defaults."""
    write_script("hello.bak", PERL_CMDLINE_SCRIPT)
    (tmp_path / "scriptsniff.toml").write_text("include_backup = true\n", encoding="utf-8")

    assert_SUCCESS(run_cli_in(tmp_path, ["detect", "hello.bak"]))
    assert_NO_MATCH(run_cli_in(tmp_path, ["detect", "--no-config", "hello.bak"]))
    assert_NO_MATCH(run_cli_in(tmp_path, ["detect", "--exclude-backup", "hello.bak"]))


def test_custom_framework_from_config(tmp_path: Path, write_script: ScriptWriter) -> None:
    """A framework declared in config can be selected with `--framework`."""
    write_script("target", TARGET_FRAMEWORK_SCRIPT)
    cfg: Path = tmp_path / "frameworks.toml"
    cfg.write_text(
        '[frameworks.target-framework]\nname = "Target::Framework"\ninterpreter = "perl"\n',
        encoding="utf-8",
    )

    assert_NO_MATCH(run_cli_in(tmp_path, ["detect", "--config", str(cfg), "target"]))

    argv: list[str] = ["--no-color", "-v", "detect", "--config", str(cfg)]
    result: Result = run_cli_in(tmp_path, [*argv, "--framework", "target-framework", "target"])
    assert_SUCCESS(result)
    assert result.output.strip() == "target: yes (uses Target::Framework)"


def test_unknown_framework_is_config_error(tmp_path: Path) -> None:
    """Selecting an unknown framework exits 78."""
    result: Result = run_cli_in(tmp_path, ["detect", "--framework", "nope", "x"])

    assert_CONFIG_ERROR(result)
    assert "Unknown framework 'nope'" in result.output


def test_invalid_config_is_config_error(tmp_path: Path) -> None:
    """A malformed discovered config file exits 78."""
    (tmp_path / "scriptsniff.toml").write_text('include_backup = "yes"\n', encoding="utf-8")

    result: Result = run_cli_in(tmp_path, ["detect", "x"])

    assert_CONFIG_ERROR(result)
    assert "must be a boolean" in result.output


# ------------------------------ machine output ------------------------------


def test_detect_json(tmp_path: Path, write_script: ScriptWriter) -> None:
    """`--format json` prints one JSON array of records."""
    write_script("hello", PERL_CMDLINE_SCRIPT)
    write_script("plain.sh", "#!/bin/sh\n")

    result: Result = run_cli_in(
        tmp_path, ["detect", "--format", "json", "hello", "plain.sh"]
    )

    assert_NO_MATCH(result)
    payload: list[dict[str, Any]] = json.loads(result.stdout)
    assert payload == [
        {
            "input": "hello",
            "status": 200,
            "message": "OK",
            "is_match": True,
            "reason": "",
            "code": None,
            "wrapped": None,
        },
        {
            "input": "plain.sh",
            "status": 200,
            "message": "OK",
            "is_match": False,
            "reason": "shebang line does not name the expected interpreter",
            "code": "interpreter_mismatch",
            "wrapped": None,
        },
    ]


def test_detect_ndjson(tmp_path: Path, write_script: ScriptWriter) -> None:
    """`--format ndjson` prints one JSON object per line."""
    write_script("hello", PERL_CMDLINE_SCRIPT)

    result: Result = run_cli_in(
        tmp_path, ["detect", "--format", "ndjson", "hello", "missing"]
    )

    assert_NO_MATCH(result)
    records: list[dict[str, Any]] = [json.loads(line) for line in result.stdout.splitlines()]
    assert [r["input"] for r in records] == ["hello", "missing"]
    assert [r["is_match"] for r in records] == [True, False]
    assert records[1]["code"] == "not_a_file"


def test_machine_output_ignores_quiet(tmp_path: Path, write_script: ScriptWriter) -> None:
    """Machine formats are printed even with `-q`."""
    write_script("hello", PERL_CMDLINE_SCRIPT)

    result: Result = run_cli_in(tmp_path, ["-q", "detect", "--format", "json", "hello"])

    assert_SUCCESS(result)
    assert json.loads(result.stdout)[0]["is_match"] is True


def test_invalid_format_is_usage_error(tmp_path: Path) -> None:
    """Unknown `--format` values are rejected by Click."""
    result: Result = run_cli_in(tmp_path, ["detect", "--format", "yaml", "x"])

    assert result.exit_code == 2
    assert "Invalid value 'yaml'" in result.output
