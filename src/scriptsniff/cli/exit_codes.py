# topmark:header:start
#
#   project      : ScriptSniff
#   file         : exit_codes.py
#   file_relpath : src/scriptsniff/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the ScriptSniff CLI.

ScriptSniff aligns with the BSD `sysexits` convention where practical, so that
shell pipelines can tell a negative verdict apart from a usage or config error.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the ScriptSniff CLI.

    Attributes:
        SUCCESS: Every input is a framework script.
        NO_MATCH: At least one input is not a framework script.
        USAGE_ERROR: Command-line invocation error (invalid flags/args, or an
            ambiguous/missing input mode). Mirrors BSD ``EX_USAGE (64)``.
        CONFIG_ERROR: Configuration error (missing/invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).

    Usage:
        ```python
        import subprocess
        from scriptsniff.cli.exit_codes import ExitCode

        result = subprocess.run(["scriptsniff", "detect", "bin/my-script"])
        if result.returncode == ExitCode.SUCCESS:
            print("framework script")
        elif result.returncode == ExitCode.NO_MATCH:
            print("something else")
        ```
    """

    SUCCESS = 0
    NO_MATCH = 1

    USAGE_ERROR = 64  # EX_USAGE
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
