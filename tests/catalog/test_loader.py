# topmark:header:start
#
#   project      : DepCatalog
#   file         : test_loader.py
#   file_relpath : tests/catalog/test_loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for replaying TOML catalog files into a builder."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from depcatalog.catalog.errors import (
    CatalogFormatError,
    InvalidCatalogNameError,
    UnknownBundleAliasError,
)
from depcatalog.catalog.loader import load_catalog_dict, load_catalog_file
from depcatalog.catalog.version import VersionConstraint
from depcatalog.config.io import parse_toml_text
from tests.conftest import SAMPLE_CATALOG, parametrize, write_catalog

if TYPE_CHECKING:
    from pathlib import Path

    from depcatalog.catalog.builder import CatalogModelBuilder
    from depcatalog.catalog.model import CatalogModel
    from depcatalog.diagnostic.model import DiagnosticLog


def _dep_version(catalog: CatalogModel, alias: str) -> VersionConstraint:
    dep = catalog.get_dependency(alias)
    assert dep is not None
    return dep.version


def test_sample_catalog(builder: CatalogModelBuilder, tmp_path: Path) -> None:
    """The sample catalog covers every library and version notation."""
    path: Path = write_catalog(tmp_path, SAMPLE_CATALOG)
    catalog: CatalogModel = load_catalog_file(path, builder).build()

    assert catalog.aliases == (
        "groovy-core",
        "groovy-json",
        "junit",
        "commons-lang3",
        "checkstyle",
        "guava",
    )
    junit = catalog.get_dependency("junit")
    assert junit is not None
    assert (junit.group, junit.name) == ("junit", "junit")

    assert _dep_version(catalog, "junit") == VersionConstraint(required="4.13")
    assert _dep_version(catalog, "groovy-core") == VersionConstraint(required="3.0.5")
    assert _dep_version(catalog, "checkstyle") == VersionConstraint(
        required="8.37", strictly="8.37"
    )
    assert _dep_version(catalog, "commons-lang3") == VersionConstraint(
        required="3.9", rejected=("3.8",)
    )
    assert _dep_version(catalog, "guava").is_empty
    assert catalog.get_bundle("groovy") == ("groovy-core", "groovy-json")


def test_version_ref_is_shared(builder: CatalogModelBuilder) -> None:
    """Aliases referencing the same version entry share one interned constraint."""
    data = parse_toml_text(SAMPLE_CATALOG)
    catalog = load_catalog_dict(data, builder).build()
    assert _dep_version(catalog, "groovy-core") is _dep_version(catalog, "groovy-json")


def test_shorthand_without_version(builder: CatalogModelBuilder) -> None:
    """``group:name`` without a version yields an empty constraint."""
    catalog = load_catalog_dict({"libraries": {"guava": "com.google.guava:guava"}}, builder).build()
    assert _dep_version(catalog, "guava").is_empty


def test_rich_version_table(builder: CatalogModelBuilder) -> None:
    """All rich version keys are applied."""
    data: dict[str, Any] = {
        "libraries": {
            "lib": {
                "module": "g:n",
                "version": {"require": "1.0", "prefer": "1.1", "reject": ["0.9"], "branch": "main"},
            },
            "none": {"module": "g:none", "version": {"rejectAll": True}},
        }
    }
    catalog = load_catalog_dict(data, builder).build()
    assert _dep_version(catalog, "lib") == VersionConstraint(
        required="1.0", preferred="1.1", rejected=("0.9",), branch="main"
    )
    assert _dep_version(catalog, "none").display_name == "{reject all versions}"


def test_empty_document(builder: CatalogModelBuilder) -> None:
    """An empty document is an empty catalog."""
    assert len(load_catalog_dict({}, builder).build()) == 0


def test_reloading_over_same_builder_warns(
    builder: CatalogModelBuilder, diagnostics: DiagnosticLog
) -> None:
    """Replaying a second document over the same builder reports overwrites."""
    load_catalog_dict({"libraries": {"lib": "g:a:1"}}, builder)
    load_catalog_dict({"libraries": {"lib": "g:b:2"}}, builder)
    dep = builder.build().get_dependency("lib")
    assert dep is not None
    assert dep.name == "b"
    assert len(diagnostics) == 1


@parametrize(
    ("libraries", "fragment"),
    [
        ({"lib": "just-a-name"}, "invalid module notation"),
        ({"lib": "g:n:v:extra"}, "invalid module notation"),
        ({"lib": "g::v"}, "invalid module notation"),
        ({"lib": 42}, "expected a string or a table"),
        ({"lib": {"version": "1"}}, "missing 'module'"),
        ({"lib": {"group": "g"}}, "missing 'module'"),
        ({"lib": {"module": "g:n", "group": "g"}}, "use either 'module'"),
        ({"lib": {"module": "g:n:1"}}, "must not carry a version"),
        ({"lib": {"module": "g:n", "version": 1}}, "expected a string or a table"),
        ({"lib": {"module": "g:n", "version": {"ref": "nope"}}}, "unknown version reference"),
        ({"lib": {"module": "g:n", "version": {"ref": "v", "prefer": "1"}}}, "'ref' cannot"),
        ({"lib": {"module": "g:n", "version": {"pinned": "1"}}}, "unknown version key"),
        ({"lib": {"module": "g:n", "version": {"reject": "1"}}}, "expected an array"),
        (
            {"lib": {"module": "g:n", "version": {"rejectAll": True, "require": "1"}}},
            "rejectAll cannot be combined",
        ),
    ],
)
def test_malformed_libraries(
    builder: CatalogModelBuilder, libraries: dict[str, Any], fragment: str
) -> None:
    """Malformed library entries raise `CatalogFormatError` naming the entry."""
    data: dict[str, Any] = {"versions": {"v": "1"}, "libraries": libraries}
    with pytest.raises(CatalogFormatError) as exc_info:
        load_catalog_dict(data, builder)
    assert "[libraries].lib" in str(exc_info.value)
    assert fragment in str(exc_info.value)


def test_malformed_bundle(builder: CatalogModelBuilder) -> None:
    """Bundles must be arrays of strings."""
    with pytest.raises(CatalogFormatError, match=r"\[bundles\]\.pack"):
        load_catalog_dict({"bundles": {"pack": "a"}}, builder)
    with pytest.raises(CatalogFormatError, match="expected a string"):
        load_catalog_dict({"bundles": {"pack": [1]}}, builder)


def test_builder_errors_propagate(builder: CatalogModelBuilder) -> None:
    """Name and bundle errors come from the builder unchanged."""
    with pytest.raises(InvalidCatalogNameError):
        load_catalog_dict({"libraries": {"Bad": "g:n"}}, builder)

    load_catalog_dict({"bundles": {"pack": ["ghost"]}}, builder)
    with pytest.raises(UnknownBundleAliasError):
        builder.build()


def test_invalid_toml_file(builder: CatalogModelBuilder, tmp_path: Path) -> None:
    """A syntax error is reported as a format error carrying the path."""
    path: Path = write_catalog(tmp_path, "[libraries\nlib = ")
    with pytest.raises(CatalogFormatError) as exc_info:
        load_catalog_file(path, builder)
    assert exc_info.value.path == path
    assert str(exc_info.value).startswith(f"{path}: invalid TOML")


def test_undecodable_file_is_a_format_error(builder: CatalogModelBuilder, tmp_path: Path) -> None:
    """A catalog that is not UTF-8 is reported as a format error carrying the path."""
    path: Path = tmp_path / "libs.versions.toml"
    path.write_bytes(b'[libraries]\njunit = "junit:junit:\xff"\n')
    with pytest.raises(CatalogFormatError) as exc_info:
        load_catalog_file(path, builder)
    assert exc_info.value.path == path
    assert str(exc_info.value).startswith(f"{path}: invalid UTF-8")


def test_missing_file_raises_os_error(builder: CatalogModelBuilder, tmp_path: Path) -> None:
    """I/O errors are not format errors."""
    with pytest.raises(FileNotFoundError):
        load_catalog_file(tmp_path / "missing.toml", builder)
