# topmark:header:start
#
#   project      : DepCatalog
#   file         : keys.py
#   file_relpath : src/depcatalog/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names.

Two external schemas live here:
    - `Toml`: DepCatalog settings (``depcatalog.toml`` and ``[tool.depcatalog]``
      in ``pyproject.toml``).
    - `CatalogToml`: the catalog definition file (``libs.versions.toml`` layout).

Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by DepCatalog settings."""

    # Root / discovery
    KEY_ROOT: Final[str] = "root"

    # pyproject.toml nesting: [tool.depcatalog]
    SECTION_TOOL: Final[str] = "tool"
    SECTION_TOOL_DEPCATALOG: Final[str] = "depcatalog"

    # [extensions]
    SECTION_EXTENSIONS: Final[str] = "extensions"

    KEY_LIBRARIES: Final[str] = "libraries"
    KEY_PROJECTS: Final[str] = "projects"

    # [check]
    SECTION_CHECK: Final[str] = "check"

    KEY_STRICT: Final[str] = "strict"


class CatalogToml:
    """TOML section names and keys of a catalog definition file."""

    SECTION_VERSIONS: Final[str] = "versions"
    SECTION_LIBRARIES: Final[str] = "libraries"
    SECTION_BUNDLES: Final[str] = "bundles"

    # Library tables
    KEY_MODULE: Final[str] = "module"
    KEY_GROUP: Final[str] = "group"
    KEY_NAME: Final[str] = "name"
    KEY_VERSION: Final[str] = "version"
    KEY_REF: Final[str] = "ref"

    # Rich version tables
    KEY_REQUIRE: Final[str] = "require"
    KEY_PREFER: Final[str] = "prefer"
    KEY_STRICTLY: Final[str] = "strictly"
    KEY_REJECT: Final[str] = "reject"
    KEY_REJECT_ALL: Final[str] = "rejectAll"
    KEY_BRANCH: Final[str] = "branch"


class ArgKey:
    """Keys of the argument mapping accepted by `MutableSettings.apply_args`."""

    LIBRARIES_EXTENSION_NAME: Final[str] = "libraries_extension_name"
    PROJECTS_EXTENSION_NAME: Final[str] = "projects_extension_name"
    STRICT: Final[str] = "strict"
    CONFIG_FILES: Final[str] = "config_files"
