# topmark:header:start
#
#   project      : DepCatalog
#   file         : __init__.py
#   file_relpath : src/depcatalog/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Settings handling for DepCatalog.

Modules:
    - `depcatalog.config.model`: immutable `Settings` and the `MutableSettings` builder.
    - `depcatalog.config.io`: TOML reading, rendering and typed getters.
    - `depcatalog.config.logging`: logger class, TRACE level and logging setup.
    - `depcatalog.config.keys`: canonical TOML and argument keys.

This package module stays import-light: `depcatalog.config.logging` is imported
by nearly every module, including the diagnostics the settings model depends on.
"""

from __future__ import annotations
