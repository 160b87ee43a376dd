# topmark:header:start
#
#   project      : DepCatalog
#   file         : dump.py
#   file_relpath : src/depcatalog/cli/commands/dump.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DepCatalog `dump` command.

Builds a catalog file and prints the resulting snapshot. The TOML format uses
the catalog file layout, so its output can be checked or dumped again.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from depcatalog.api import load_catalog
from depcatalog.catalog.errors import CatalogError
from depcatalog.cli.cmd_common import (
    data_failure,
    get_effective_verbosity,
    load_cli_settings,
    read_failure,
    require_catalog_file,
)
from depcatalog.cli.keys import CliCmd, CtxKey
from depcatalog.cli.options import DumpFormat, common_config_options, output_format_option
from depcatalog.config.io import to_toml
from depcatalog.diagnostic.model import DiagnosticLog

if TYPE_CHECKING:
    from pathlib import Path

    from depcatalog.catalog.model import CatalogModel
    from depcatalog.cli.console_api import ConsoleLike
    from depcatalog.config.model import Settings


def _render_default(console: ConsoleLike, catalog: CatalogModel, settings: Settings) -> None:
    console.print(
        console.styled(f"Libraries ({settings.libraries_extension_name}):", bold=True)
    )
    for alias, dep in catalog.dependencies.items():
        console.print(f"  {alias} = {dep}")
    console.print(console.styled("Bundles:", bold=True))
    for name, members in catalog.bundles.items():
        console.print(f"  {name} = [{', '.join(members)}]")


@click.command(
    name=CliCmd.DUMP,
    help="Build a catalog file and print the resulting snapshot.",
)
@click.argument("catalog", type=click.Path(dir_okay=True, file_okay=True))
@common_config_options
@output_format_option(DumpFormat)
def dump_command(
    *,
    catalog: str,
    config_paths: tuple[str, ...],
    no_config: bool,
    output_format: DumpFormat | None,
) -> None:
    """Print the snapshot built from ``catalog``.

    Duplicate-overwrite warnings are written to stderr.

    Args:
        catalog (str): Path to the catalog TOML file.
        config_paths (tuple[str, ...]): Additional settings files to merge.
        no_config (bool): If True, skip settings discovery.
        output_format (DumpFormat | None): ``default``, ``json`` or ``toml``.

    Raises:
        click.ClickException: With exit code 65 for invalid catalogs, 66 for a
            missing file.
    """
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj[CtxKey.CONSOLE]
    fmt: DumpFormat = output_format or DumpFormat.DEFAULT

    path: Path = require_catalog_file(catalog)
    settings: Settings = load_cli_settings(
        ctx, catalog=path, config_paths=config_paths, no_config=no_config
    )

    log = DiagnosticLog()
    try:
        model: CatalogModel = load_catalog(path, settings=settings, sink=log)
    except OSError as exc:
        raise read_failure(path, exc) from exc
    except CatalogError as exc:
        raise data_failure(exc) from exc

    if get_effective_verbosity(ctx) >= 0:
        for d in log:
            console.warn(f"{d.level.value}: {d.message}")

    if fmt == DumpFormat.JSON:
        console.print(json.dumps(model.to_dict(), indent=2))
    elif fmt == DumpFormat.TOML:
        console.print(to_toml(model.to_toml_dict()), nl=False)
    else:
        _render_default(console, model, settings)
