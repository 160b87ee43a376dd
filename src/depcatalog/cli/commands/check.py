# topmark:header:start
#
#   project      : DepCatalog
#   file         : check.py
#   file_relpath : src/depcatalog/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DepCatalog `check` command.

Builds a catalog file against the effective settings and reports diagnostics.

Exit codes:
  * 0: the catalog is valid (warnings allowed unless strict).
  * 1: strict mode and at least one warning (e.g. a duplicate alias).
  * 65: invalid name, unknown bundle member or malformed catalog file.
  * 66: the catalog file does not exist.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from depcatalog.api import CatalogCheckResult, check_catalog
from depcatalog.cli.cmd_common import (
    get_effective_verbosity,
    load_cli_settings,
    read_failure,
    require_catalog_file,
)
from depcatalog.cli.exit_codes import ExitCode
from depcatalog.cli.keys import CliCmd, CliOpt, CtxKey
from depcatalog.cli.options import OutputFormat, common_config_options, output_format_option
from depcatalog.config.io import to_toml
from depcatalog.config.logging import get_logger
from depcatalog.diagnostic.model import compute_diagnostic_stats, diagnostics_counts_to_dict

if TYPE_CHECKING:
    from pathlib import Path

    from depcatalog.cli.console_api import ConsoleLike
    from depcatalog.config.logging import CatalogLogger
    from depcatalog.config.model import Settings
    from depcatalog.diagnostic.model import Diagnostic, DiagnosticStats

logger: CatalogLogger = get_logger(__name__)


def _exit_code(result: CatalogCheckResult) -> ExitCode:
    if result.catalog is None:
        return ExitCode.DATA_ERROR
    if not result.ok:
        return ExitCode.FAILURE
    return ExitCode.SUCCESS


def _machine_payload(path: Path, result: CatalogCheckResult) -> dict[str, Any]:
    catalog = result.catalog
    return {
        "catalog": str(path),
        "ok": result.ok,
        "strict": result.strict,
        "error": result.error,
        "libraries": len(catalog) if catalog is not None else None,
        "bundles": len(catalog.bundles) if catalog is not None else None,
        "diagnostics": [d.to_dict() for d in result.diagnostics],
        "diagnostic_counts": diagnostics_counts_to_dict(result.diagnostics),
    }


def _render_diagnostic(d: Diagnostic, *, color: bool) -> str:
    text: str = f"- {d.level.value}: {d.message}"
    return d.level.color(text) if color else text


@click.command(
    name=CliCmd.CHECK,
    help="Build a catalog file and report naming, bundle and duplicate problems.",
)
@click.argument("catalog", type=click.Path(dir_okay=True, file_okay=True))
@common_config_options
@click.option(
    f"{CliOpt.STRICT}/{CliOpt.NO_STRICT}",
    CtxKey.STRICT,
    default=False,
    show_default=True,
    help="Fail if any warnings are present (overrides [check] strict).",
)
@output_format_option(OutputFormat)
def check_command(
    *,
    catalog: str,
    config_paths: tuple[str, ...],
    no_config: bool,
    strict: bool,
    output_format: OutputFormat | None,
) -> None:
    """Build ``catalog`` and report the outcome.

    Args:
        catalog (str): Path to the catalog TOML file.
        config_paths (tuple[str, ...]): Additional settings files to merge.
        no_config (bool): If True, skip settings discovery.
        strict (bool): Command-line strictness (only applied when given explicitly).
        output_format (OutputFormat | None): ``default`` or ``json``.
    """
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj[CtxKey.CONSOLE]
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    color: bool = bool(ctx.obj.get(CtxKey.COLOR_ENABLED)) and fmt == OutputFormat.DEFAULT

    path: Path = require_catalog_file(catalog)
    settings: Settings = load_cli_settings(
        ctx, catalog=path, config_paths=config_paths, no_config=no_config
    )
    logger.debug("check %s (strict=%s)", path, settings.strict)

    try:
        result: CatalogCheckResult = check_catalog(path, settings=settings)
    except OSError as exc:
        raise read_failure(path, exc) from exc

    if fmt == OutputFormat.JSON:
        console.print(json.dumps(_machine_payload(path, result), indent=2))
        ctx.exit(_exit_code(result))

    vlevel: int = get_effective_verbosity(ctx)
    if vlevel > 0:
        console.print(console.styled(f"Catalog: {path}", bold=True))
    if result.catalog is not None:
        console.print(
            f"{len(result.catalog)} alias(es), {len(result.catalog.bundles)} bundle(s)"
        )

    stats: DiagnosticStats = compute_diagnostic_stats(result.diagnostics)
    if stats.total:
        console.print(
            f"Diagnostics: {stats.n_error} error(s), {stats.n_warning} warning(s), "
            f"{stats.n_info} information(s)"
        )
        for d in result.diagnostics:
            console.print(_render_diagnostic(d, color=color))

    if vlevel > 0:
        console.print(f"Settings files processed: {len(settings.config_files)}")
        for i, c in enumerate(settings.config_files, start=1):
            console.print(f"Loaded settings {i}: {c}")
    if vlevel > 1:
        console.print(console.styled("Effective settings (TOML):", bold=True, underline=True))
        console.print(to_toml(settings.to_toml_dict()))

    if vlevel >= 0 or not result.ok:
        console.print("✅ OK" if result.ok else "❌ FAILED")
    ctx.exit(_exit_code(result))
