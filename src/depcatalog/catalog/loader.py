# topmark:header:start
#
#   project      : DepCatalog
#   file         : loader.py
#   file_relpath : src/depcatalog/catalog/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Replay a TOML catalog definition as builder calls.

Layout::

    [versions]
    groovy = "3.0.5"
    checkstyle = { strictly = "8.37" }

    [libraries]
    groovy-core = { module = "org.codehaus.groovy:groovy", version.ref = "groovy" }
    junit = "junit:junit:4.13"
    commons = { group = "org.apache.commons", name = "commons-lang3", version = "3.9" }

    [bundles]
    groovy = ["groovy-core"]

Library entries accept the ``"group:name[:version]"`` shorthand or a table with
either ``module`` or ``group`` + ``name``. A ``version`` is a plain string, a rich
table (``require``, ``prefer``, ``strictly``, ``reject``, ``rejectAll``,
``branch``) or ``version.ref`` naming an entry of ``[versions]``.

Format problems raise `CatalogFormatError`. Name and bundle validation is left to
the builder, so its errors propagate unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from tomlkit.exceptions import ParseError as TomlkitParseError

from depcatalog.catalog.errors import CatalogFormatError
from depcatalog.config.io import get_table_value, parse_toml_file
from depcatalog.config.keys import CatalogToml
from depcatalog.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from depcatalog.catalog.builder import CatalogModelBuilder
    from depcatalog.catalog.version import MutableVersionConstraint, VersionConfigurator
    from depcatalog.config.io import TomlTable
    from depcatalog.config.logging import CatalogLogger

logger: CatalogLogger = get_logger(__name__)

_RICH_VERSION_KEYS: frozenset[str] = frozenset(
    {
        CatalogToml.KEY_REQUIRE,
        CatalogToml.KEY_PREFER,
        CatalogToml.KEY_STRICTLY,
        CatalogToml.KEY_REJECT,
        CatalogToml.KEY_REJECT_ALL,
        CatalogToml.KEY_BRANCH,
    }
)


def _fail(message: str, path: Path | None) -> CatalogFormatError:
    return CatalogFormatError(message, path=path)


def _expect_str(value: Any, where: str, path: Path | None) -> str:
    if not isinstance(value, str):
        raise _fail(f"{where}: expected a string, got {type(value).__name__}", path)
    return value


def _rich_version(table: TomlTable, where: str, path: Path | None) -> VersionConfigurator:
    """Return a configurator applying a rich version table."""
    unknown: set[str] = set(table) - _RICH_VERSION_KEYS
    if unknown:
        raise _fail(f"{where}: unknown version key(s): {', '.join(sorted(unknown))}", path)

    strictly: str | None = None
    require: str | None = None
    prefer: str | None = None
    branch: str | None = None
    if CatalogToml.KEY_STRICTLY in table:
        strictly = _expect_str(table[CatalogToml.KEY_STRICTLY], f"{where}.strictly", path)
    if CatalogToml.KEY_REQUIRE in table:
        require = _expect_str(table[CatalogToml.KEY_REQUIRE], f"{where}.require", path)
    if CatalogToml.KEY_PREFER in table:
        prefer = _expect_str(table[CatalogToml.KEY_PREFER], f"{where}.prefer", path)
    if CatalogToml.KEY_BRANCH in table:
        branch = _expect_str(table[CatalogToml.KEY_BRANCH], f"{where}.branch", path)

    rejected: list[str] = []
    if CatalogToml.KEY_REJECT in table:
        raw: Any = table[CatalogToml.KEY_REJECT]
        if not isinstance(raw, list):
            raise _fail(f"{where}.reject: expected an array of strings", path)
        items: list[Any] = cast("list[Any]", raw)
        rejected = [_expect_str(v, f"{where}.reject", path) for v in items]
    reject_all: bool = table.get(CatalogToml.KEY_REJECT_ALL) is True
    if reject_all and (strictly or require or prefer or rejected):
        raise _fail(f"{where}: rejectAll cannot be combined with other versions", path)

    def configure(constraint: MutableVersionConstraint) -> None:
        if reject_all:
            constraint.reject_all()
            return
        if strictly is not None:
            constraint.strictly(strictly)
        elif require is not None:
            constraint.require(require)
        if prefer is not None:
            constraint.prefer(prefer)
        if rejected:
            constraint.reject(*rejected)
        if branch is not None:
            constraint.branch = branch

    return configure


def _version_configurator(
    value: Any,
    versions: TomlTable,
    where: str,
    path: Path | None,
) -> VersionConfigurator | None:
    """Return a configurator for a library ``version`` value (None when absent)."""
    if value is None:
        return None
    if isinstance(value, str):
        required: str = value
        return lambda c: c.require(required)
    if not isinstance(value, dict):
        raise _fail(f"{where}: expected a string or a table", path)

    table: TomlTable = cast("TomlTable", value)
    if CatalogToml.KEY_REF in table:
        if len(table) != 1:
            raise _fail(f"{where}: 'ref' cannot be combined with other keys", path)
        ref: str = _expect_str(table[CatalogToml.KEY_REF], f"{where}.ref", path)
        if ref not in versions:
            raise _fail(f"{where}: unknown version reference '{ref}'", path)
        return _version_configurator(
            versions[ref], {}, f"[{CatalogToml.SECTION_VERSIONS}].{ref}", path
        )
    return _rich_version(table, where, path)


def _split_module(module: str, where: str, path: Path | None) -> tuple[str, str, str | None]:
    parts: list[str] = module.split(":")
    if len(parts) not in (2, 3) or not all(parts):
        raise _fail(
            f"{where}: invalid module notation '{module}' (expected 'group:name[:version]')",
            path,
        )
    return parts[0], parts[1], parts[2] if len(parts) == 3 else None


def _load_library(
    builder: CatalogModelBuilder,
    alias: str,
    entry: Any,
    versions: TomlTable,
    path: Path | None,
) -> None:
    where: str = f"[{CatalogToml.SECTION_LIBRARIES}].{alias}"

    if isinstance(entry, str):
        group, name, version = _split_module(entry, where, path)
        builder.alias(alias, group, name, _version_configurator(version, versions, where, path))
        return

    if not isinstance(entry, dict):
        raise _fail(f"{where}: expected a string or a table", path)

    table: TomlTable = cast("TomlTable", entry)
    if CatalogToml.KEY_MODULE in table:
        if CatalogToml.KEY_GROUP in table or CatalogToml.KEY_NAME in table:
            raise _fail(f"{where}: use either 'module' or 'group' and 'name'", path)
        module: str = _expect_str(table[CatalogToml.KEY_MODULE], f"{where}.module", path)
        group, name, inline_version = _split_module(module, where, path)
        if inline_version is not None:
            raise _fail(f"{where}: 'module' must not carry a version", path)
    elif CatalogToml.KEY_GROUP in table and CatalogToml.KEY_NAME in table:
        group = _expect_str(table[CatalogToml.KEY_GROUP], f"{where}.group", path)
        name = _expect_str(table[CatalogToml.KEY_NAME], f"{where}.name", path)
    else:
        raise _fail(f"{where}: missing 'module' or 'group' and 'name'", path)

    configurator: VersionConfigurator | None = _version_configurator(
        table.get(CatalogToml.KEY_VERSION), versions, f"{where}.version", path
    )
    builder.alias(alias, group, name, configurator)


def load_catalog_dict(
    data: TomlTable,
    builder: CatalogModelBuilder,
    *,
    path: Path | None = None,
) -> CatalogModelBuilder:
    """Replay a parsed catalog table into ``builder``.

    Args:
        data (TomlTable): Parsed catalog document.
        builder (CatalogModelBuilder): The builder receiving `alias`/`bundle` calls.
        path (Path | None): Source file, used in error messages.

    Returns:
        CatalogModelBuilder: ``builder``, for chaining.

    Raises:
        CatalogFormatError: If the document is malformed.
    """
    versions: TomlTable = get_table_value(data, CatalogToml.SECTION_VERSIONS)
    libraries: TomlTable = get_table_value(data, CatalogToml.SECTION_LIBRARIES)
    bundles: TomlTable = get_table_value(data, CatalogToml.SECTION_BUNDLES)
    logger.debug(
        "Catalog %s: %d version(s), %d librar(y/ies), %d bundle(s)",
        path or "<memory>",
        len(versions),
        len(libraries),
        len(bundles),
    )

    for alias, entry in libraries.items():
        _load_library(builder, alias, entry, versions, path)

    for name, members in bundles.items():
        where: str = f"[{CatalogToml.SECTION_BUNDLES}].{name}"
        if not isinstance(members, list):
            raise _fail(f"{where}: expected an array of aliases", path)
        items: list[Any] = cast("list[Any]", members)
        builder.bundle(name, [_expect_str(m, where, path) for m in items])

    return builder


def load_catalog_file(path: Path, builder: CatalogModelBuilder) -> CatalogModelBuilder:
    """Parse the TOML catalog at ``path`` and replay it into ``builder``.

    Args:
        path (Path): Catalog file.
        builder (CatalogModelBuilder): The builder receiving `alias`/`bundle` calls.

    Returns:
        CatalogModelBuilder: ``builder``, for chaining.

    Raises:
        CatalogFormatError: If the file is not valid UTF-8 TOML or is malformed.
    """
    try:
        data: TomlTable = parse_toml_file(path)
    except UnicodeDecodeError as exc:
        raise _fail(f"invalid UTF-8: {exc}", path) from exc
    except TomlkitParseError as exc:
        raise _fail(f"invalid TOML: {exc}", path) from exc
    return load_catalog_dict(data, builder, path=path)
