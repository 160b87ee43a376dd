# topmark:header:start
#
#   project      : DepCatalog
#   file         : main.py
#   file_relpath : src/depcatalog/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DepCatalog Click CLI.

Key ideas:
- Group-level options are initialized once, placed into ``ctx.obj``.
- Subcommands read the console and verbosity from ``ctx.obj``.
- Internal logging is configured from ``DEPCATALOG_LOG_LEVEL``; ``-v``/``-q``
  only control program output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from depcatalog.cli.commands.check import check_command
from depcatalog.cli.commands.dump import dump_command
from depcatalog.cli.commands.version import version_command
from depcatalog.cli.console import ClickConsole
from depcatalog.cli.keys import CtxKey
from depcatalog.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from depcatalog.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from depcatalog.cli.console_api import ConsoleLike
    from depcatalog.config.logging import CatalogLogger

logger: CatalogLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj[CtxKey.VERBOSITY_LEVEL] = resolve_verbosity(verbose, quiet)

    level_env: int | None = resolve_env_log_level()
    ctx.obj[CtxKey.LOG_LEVEL] = level_env
    setup_logging(level=level_env)

    effective_color_mode: ColorMode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj[CtxKey.COLOR_ENABLED] = enable_color
    ctx.color = enable_color

    ctx.obj[CtxKey.CONSOLE] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="DepCatalog CLI",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the DepCatalog CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj[CtxKey.CONSOLE]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'depcatalog check CATALOG' to validate a catalog file.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(check_command)

cli.add_command(dump_command)

if __name__ == "__main__":
    cli()
