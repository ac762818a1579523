# topmark:header:start
#
#   project      : ScriptSniff
#   file         : __main__.py
#   file_relpath : src/scriptsniff/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running ScriptSniff via ``python -m scriptsniff``.

Delegates to :func:`scriptsniff.cli.main.cli`, the same entry point as the
``scriptsniff`` console script.

Examples:
    Check a script::

        python -m scriptsniff detect ~/bin/list-id-holidays
"""

from __future__ import annotations

from scriptsniff.cli.main import cli

if __name__ == "__main__":
    cli()
