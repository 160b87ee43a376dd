# topmark:header:start
#
#   project      : DepCatalog
#   file         : options.py
#   file_relpath : src/depcatalog/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, settings discovery,
output format) and their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from enum import Enum
from typing import ParamSpec, TypeVar

import click

from depcatalog.cli.cli_types import EnumChoiceParam
from depcatalog.cli.errors import DepCatalogUsageError
from depcatalog.cli.keys import CliOpt, CtxKey

P = ParamSpec("P")
R = TypeVar("R")


class OutputFormat(str, Enum):
    """Output format for `check` and `version`.

    Members:
      DEFAULT: Human-friendly text output; may include ANSI color if enabled.
      JSON: A single JSON object (machine-readable, never colored).
    """

    DEFAULT = "default"
    JSON = "json"


class DumpFormat(str, Enum):
    """Output format for `dump`.

    Members:
      DEFAULT: One line per alias and bundle.
      JSON: The snapshot as a JSON object.
      TOML: The snapshot in catalog file layout (loadable again).
    """

    DEFAULT = "default"
    JSON = "json"
    TOML = "toml"


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v``/``-q`` counts.

    Args:
        verbose_count: Number of times ``-v`` was passed.
        quiet_count: Number of times ``-q`` was passed.

    Returns:
        ``0`` by default, the ``-v`` count when verbose, minus the ``-q`` count
        when quiet.

    Raises:
        DepCatalogUsageError: If both flags are used together.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise DepCatalogUsageError(
            f"The '{CliOpt.VERBOSE}' and '{CliOpt.QUIET}' options are mutually exclusive."
        )
    if verbose_count > 0:
        return verbose_count
    return -quiet_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options to a command."""
    f = click.option(
        "-v",
        CliOpt.VERBOSE,
        "verbose",
        count=True,
        help="Increase output detail. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        CliOpt.QUIET,
        "quiet",
        count=True,
        help="Reduce output.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode: Explicit color mode from CLI options (auto, always, never).
        output_format: Output format string, e.g. ``"json"``.
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        Disables color for machine formats (JSON, TOML).
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stdout is a TTY.
    """
    if output_format and output_format.lower() in {"json", "toml"}:
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options to a command."""
    f = click.option(
        CliOpt.COLOR_MODE,
        CtxKey.COLOR_MODE,
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        CliOpt.NO_COLOR_MODE,
        CtxKey.NO_COLOR_MODE,
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--no-config`` and ``--config`` options to a command.

    ``--config`` files must exist; unreadable or invalid files are reported by
    the command with exit code 78.
    """
    f = click.option(
        CliOpt.NO_CONFIG,
        CtxKey.NO_CONFIG,
        is_flag=True,
        help="Ignore discovered settings files (explicit --config files still apply).",
    )(f)
    f = click.option(
        CliOpt.CONFIG_PATHS,
        CtxKey.CONFIG_PATHS,
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False),
        help="Additional settings file(s) to load and merge.",
    )(f)
    return f


def output_format_option(
    enum_cls: type[OutputFormat] | type[DumpFormat],
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Return a ``--format`` option decorator accepting the members of ``enum_cls``."""
    return click.option(
        CliOpt.OUTPUT_FORMAT,
        CtxKey.OUTPUT_FORMAT,
        type=EnumChoiceParam(enum_cls),
        default=None,
        help=f"Output format ({', '.join(v.value for v in enum_cls)}).",
    )
