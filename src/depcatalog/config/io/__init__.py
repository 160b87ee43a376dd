# topmark:header:start
#
#   project      : DepCatalog
#   file         : __init__.py
#   file_relpath : src/depcatalog/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for DepCatalog.

This package centralizes helpers for reading and writing TOML used by the
settings layer and the catalog loader.

TOML parsing/formatting:
    DepCatalog uses `tomlkit` for both parsing and rendering.

    - `parse_toml_file()` / `load_toml_dict()` parse on-disk TOML and return plain dicts.
    - `to_toml()` renders (after stripping TOML-incompatible values like `None`).
"""

from __future__ import annotations

from .getters import (
    get_bool_value_or_none_checked,
    get_string_value_or_none_checked,
    get_table_value,
)
from .loaders import load_defaults_dict, load_toml_dict, parse_toml_file, parse_toml_text
from .render import to_toml
from .types import TomlTable

__all__ = [
    "TomlTable",
    "get_bool_value_or_none_checked",
    "get_string_value_or_none_checked",
    "get_table_value",
    "load_defaults_dict",
    "load_toml_dict",
    "parse_toml_file",
    "parse_toml_text",
    "to_toml",
]
