# topmark:header:start
#
#   project      : DepCatalog
#   file         : version.py
#   file_relpath : src/depcatalog/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DepCatalog `version` command.

Prints the current DepCatalog version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from depcatalog.cli.cmd_common import get_effective_verbosity
from depcatalog.cli.keys import CliCmd, CtxKey
from depcatalog.cli.options import OutputFormat, output_format_option
from depcatalog.constants import DEPCATALOG_VERSION

if TYPE_CHECKING:
    from depcatalog.cli.console_api import ConsoleLike


@click.command(
    name=CliCmd.VERSION,
    help="Show the current version of DepCatalog.",
)
@output_format_option(OutputFormat)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of DepCatalog.

    Args:
        output_format (OutputFormat | None): Optional output format (plain text or JSON).
    """
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj[CtxKey.CONSOLE]

    vlevel: int = get_effective_verbosity(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": DEPCATALOG_VERSION}))
    elif vlevel > 0:
        console.print(console.styled("DepCatalog version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(DEPCATALOG_VERSION, bold=True)}")
    else:
        console.print(console.styled(DEPCATALOG_VERSION, bold=True))
