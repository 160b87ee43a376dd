# topmark:header:start
#
#   project      : DepCatalog
#   file         : keys.py
#   file_relpath : src/depcatalog/cli/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical CLI command names, option spellings and context keys.

Centralizing these values avoids string duplication between Click definitions
and the code reading the parsed values.
"""

from __future__ import annotations

from typing import Final


class CliCmd:
    """Command names exposed by the DepCatalog CLI."""

    CHECK: Final[str] = "check"
    DUMP: Final[str] = "dump"
    VERSION: Final[str] = "version"


class CliOpt:
    """User-facing long option spellings (including the leading ``--``)."""

    # Settings discovery
    CONFIG_PATHS: Final[str] = "--config"
    NO_CONFIG: Final[str] = "--no-config"

    # Checking
    STRICT: Final[str] = "--strict"
    NO_STRICT: Final[str] = "--no-strict"

    # Output
    OUTPUT_FORMAT: Final[str] = "--format"

    # Logging / UX
    VERBOSE: Final[str] = "--verbose"
    QUIET: Final[str] = "--quiet"
    COLOR_MODE: Final[str] = "--color"
    NO_COLOR_MODE: Final[str] = "--no-color"


class CtxKey:
    """Keys of the shared ``ctx.obj`` mapping and Click destination names."""

    CONFIG_PATHS: Final[str] = "config_paths"
    NO_CONFIG: Final[str] = "no_config"
    STRICT: Final[str] = "strict"
    OUTPUT_FORMAT: Final[str] = "output_format"

    VERBOSITY_LEVEL: Final[str] = "verbosity_level"
    LOG_LEVEL: Final[str] = "log_level"
    COLOR_MODE: Final[str] = "color_mode"
    NO_COLOR_MODE: Final[str] = "no_color"
    COLOR_ENABLED: Final[str] = "color_enabled"
    CONSOLE: Final[str] = "console"
