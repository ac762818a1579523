# topmark:header:start
#
#   project      : ScriptSniff
#   file         : __init__.py
#   file_relpath : src/scriptsniff/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for ScriptSniff.

Submodules:
    - ``scriptsniff.config.logging``: TRACE-aware logging setup.
    - ``scriptsniff.config.model``: `MutableConfig` / `Config`.
    - ``scriptsniff.config.loaders``: TOML loading via tomlkit.

This package does not re-export the model: the detector imports
``scriptsniff.config.logging`` and the model imports the detector.
"""
