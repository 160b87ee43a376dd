# topmark:header:start
#
#   project      : DepCatalog
#   file         : cmd_common.py
#   file_relpath : src/depcatalog/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by the DepCatalog CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
from click.core import ParameterSource
from tomlkit.exceptions import ParseError as TomlkitParseError

from depcatalog.cli.errors import (
    DepCatalogConfigError,
    DepCatalogDataError,
    DepCatalogFileNotFoundError,
    DepCatalogIOError,
)
from depcatalog.cli.keys import CtxKey
from depcatalog.config.io import parse_toml_file
from depcatalog.config.keys import ArgKey
from depcatalog.config.logging import get_logger
from depcatalog.config.model import MutableSettings

if TYPE_CHECKING:
    from collections.abc import Iterable

    from depcatalog.config.logging import CatalogLogger
    from depcatalog.config.model import Settings

logger: CatalogLogger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored on the context (0 when unset)."""
    obj: Any = ctx.obj or {}
    return int(obj.get(CtxKey.VERBOSITY_LEVEL, 0))


def require_catalog_file(catalog: str) -> Path:
    """Return ``catalog`` as a Path, or raise if it is not an existing file.

    Raises:
        DepCatalogFileNotFoundError: If the file does not exist.
        DepCatalogIOError: If the path exists but is not a regular file.
    """
    path = Path(catalog)
    if not path.exists():
        raise DepCatalogFileNotFoundError(f"Catalog file not found: {catalog}")
    if not path.is_file():
        raise DepCatalogIOError(f"Catalog path is not a file: {catalog}")
    return path


def load_cli_settings(
    ctx: click.Context,
    *,
    catalog: Path,
    config_paths: Iterable[str],
    no_config: bool,
) -> Settings:
    """Merge settings for a command run.

    Explicit ``--config`` files must parse; discovered files are tolerated like
    the API does. ``--strict/--no-strict`` only override settings when given on
    the command line.

    Args:
        ctx (click.Context): The current command context.
        catalog (Path): The catalog file (discovery anchor).
        config_paths (Iterable[str]): Explicit settings files.
        no_config (bool): Skip discovery.

    Returns:
        Settings: The frozen settings.

    Raises:
        DepCatalogConfigError: If an explicit settings file cannot be read or parsed.
    """
    extra: list[Path] = [Path(p) for p in config_paths]
    for cfg in extra:
        try:
            parse_toml_file(cfg)
        except OSError as exc:
            raise DepCatalogConfigError(f"Cannot read settings file {cfg}: {exc}") from exc
        except (TomlkitParseError, UnicodeDecodeError) as exc:
            raise DepCatalogConfigError(f"Invalid settings file {cfg}: {exc}") from exc

    draft: MutableSettings = MutableSettings.load_merged(
        anchor=catalog,
        extra_config_files=extra,
        no_config=no_config,
    )
    if ctx.get_parameter_source(CtxKey.STRICT) is ParameterSource.COMMANDLINE:
        draft.apply_args({ArgKey.STRICT: ctx.params.get(CtxKey.STRICT)})
    settings: Settings = draft.freeze()
    logger.debug("Effective settings: %s", settings)
    return settings


def read_failure(catalog: Path, exc: OSError) -> click.ClickException:
    """Map an `OSError` raised while reading ``catalog`` to a CLI error."""
    if isinstance(exc, FileNotFoundError):
        return DepCatalogFileNotFoundError(f"Catalog file not found: {catalog}")
    return DepCatalogIOError(f"Cannot read catalog {catalog}: {exc}")


def data_failure(exc: Exception) -> click.ClickException:
    """Map a catalog error to a CLI error."""
    return DepCatalogDataError(str(exc))
