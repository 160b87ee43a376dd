# topmark:header:start
#
#   project      : DepCatalog
#   file         : __init__.py
#   file_relpath : src/depcatalog/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public DepCatalog API (stable surface).

This module exposes a **small, typed API** for integrations that want to build
or validate catalogs without going through the CLI.

Versioning policy
-----------------
- The **signatures and dataclass shapes** in this module follow semver.
- Adding optional parameters with defaults is allowed in minor releases.
- Removing/renaming anything here is a breaking change (major release).

Notes:
-----
- When ``settings`` is omitted, settings are discovered upward from the catalog
  file exactly like the CLI does (``pyproject.toml`` then ``depcatalog.toml``).
- `load_catalog` raises on invalid catalogs; `check_catalog` reports instead.

```python
from pathlib import Path
from depcatalog import api

catalog = api.load_catalog(Path("gradle/libs.versions.toml"))
print(catalog.resolve_bundle("groovy"))
```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from depcatalog.catalog.builder import CatalogModelBuilder
from depcatalog.catalog.errors import CatalogError
from depcatalog.catalog.loader import load_catalog_file
from depcatalog.config.logging import get_logger
from depcatalog.config.model import MutableSettings, Settings
from depcatalog.constants import DEPCATALOG_VERSION
from depcatalog.diagnostic.model import Diagnostic, DiagnosticLog

if TYPE_CHECKING:
    from pathlib import Path

    from depcatalog.catalog.model import CatalogModel
    from depcatalog.config.logging import CatalogLogger
    from depcatalog.diagnostic.sink import DiagnosticSink

logger: CatalogLogger = get_logger(__name__)

__all__ = [
    "CatalogCheckResult",
    "check_catalog",
    "get_version",
    "load_catalog",
    "load_settings",
]


@dataclass(frozen=True, slots=True)
class CatalogCheckResult:
    """Outcome of `check_catalog`.

    Attributes:
        ok (bool): True if the catalog built and, under strict settings, produced
            no warnings.
        catalog (CatalogModel | None): The snapshot, or None if building failed.
        diagnostics (tuple[Diagnostic, ...]): Settings and builder diagnostics,
            in the order they were recorded.
        error (str | None): Message of the error that stopped the build, if any.
        strict (bool): Whether warnings counted as failures.
    """

    ok: bool
    catalog: CatalogModel | None
    diagnostics: tuple[Diagnostic, ...]
    error: str | None = None
    strict: bool = False


def get_version() -> str:
    """Return the installed DepCatalog version."""
    return DEPCATALOG_VERSION


def load_settings(
    path: Path,
    *,
    extra_config_files: list[Path] | None = None,
    no_config: bool = False,
) -> Settings:
    """Discover and merge settings for the catalog at ``path``.

    Args:
        path (Path): The catalog file; discovery starts in its directory.
        extra_config_files (list[Path] | None): Settings files merged after discovery.
        no_config (bool): Skip discovery.

    Returns:
        Settings: The frozen settings.
    """
    return MutableSettings.load_merged(
        anchor=path,
        extra_config_files=extra_config_files,
        no_config=no_config,
    ).freeze()


def load_catalog(
    path: Path,
    *,
    settings: Settings | None = None,
    sink: DiagnosticSink | None = None,
) -> CatalogModel:
    """Load and build the catalog defined in ``path``.

    Args:
        path (Path): A TOML catalog file.
        settings (Settings | None): Settings to apply; discovered when omitted.
        sink (DiagnosticSink | None): Receives duplicate-overwrite warnings
            (defaults to logging them).

    Returns:
        CatalogModel: The frozen catalog.

    Raises:
        OSError: If the file cannot be read.
        CatalogError: If the file is malformed or the catalog is invalid.
    """
    if settings is None:
        settings = load_settings(path)
    builder = CatalogModelBuilder(sink)
    settings.apply_to(builder)
    load_catalog_file(path, builder)
    return builder.build()


def check_catalog(path: Path, *, settings: Settings | None = None) -> CatalogCheckResult:
    """Build the catalog in ``path`` and report problems instead of raising.

    Only catalog errors are reported; I/O errors propagate.

    Args:
        path (Path): A TOML catalog file.
        settings (Settings | None): Settings to apply; discovered when omitted.

    Returns:
        CatalogCheckResult: The outcome.

    Raises:
        OSError: If the file cannot be read.
    """
    if settings is None:
        settings = load_settings(path)

    log: DiagnosticLog = DiagnosticLog.from_iterable(settings.diagnostics)
    try:
        catalog: CatalogModel = load_catalog(path, settings=settings, sink=log)
    except CatalogError as exc:
        logger.debug("Catalog check failed for %s: %s", path, exc)
        log.add_error(str(exc))
        return CatalogCheckResult(
            ok=False,
            catalog=None,
            diagnostics=tuple(log),
            error=str(exc),
            strict=settings.strict,
        )

    ok: bool = not (settings.strict and log.has_warning())
    logger.debug("Catalog check for %s: ok=%s, %d diagnostic(s)", path, ok, len(log))
    return CatalogCheckResult(
        ok=ok,
        catalog=catalog,
        diagnostics=tuple(log),
        strict=settings.strict,
    )
