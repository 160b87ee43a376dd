# topmark:header:start
#
#   project      : DepCatalog
#   file         : test_cli_dump.py
#   file_relpath : tests/cli/test_cli_dump.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `depcatalog dump`."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from depcatalog.catalog.builder import CatalogModelBuilder
from depcatalog.catalog.loader import load_catalog_dict
from depcatalog.config.io import parse_toml_text
from tests.cli.conftest import assert_DATA_ERROR, assert_FILE_NOT_FOUND, assert_SUCCESS, run_cli_in
from tests.conftest import SAMPLE_CATALOG, mark_cli, write_catalog

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

CATALOG: str = "libs.versions.toml"


@mark_cli
def test_dump_default(isolation: Path) -> None:
    """The default format lists aliases and bundles."""
    write_catalog(isolation, SAMPLE_CATALOG)
    result: Result = run_cli_in(isolation, ["dump", CATALOG])

    assert_SUCCESS(result)
    assert "Libraries (libs):" in result.output
    assert "  groovy-core = org.codehaus.groovy:groovy:3.0.5" in result.output
    assert "  checkstyle = com.puppycrawl.tools:checkstyle:{strictly 8.37}" in result.output
    assert "  guava = com.google.guava:guava\n" in result.output
    assert "  groovy = [groovy-core, groovy-json]" in result.output


@mark_cli
def test_dump_uses_extension_name_from_settings(isolation: Path) -> None:
    """The libraries heading shows the configured extension name."""
    (isolation / "depcatalog.toml").write_text(
        'root = true\n[extensions]\nlibraries = "deps"\n', encoding="utf-8"
    )
    write_catalog(isolation, SAMPLE_CATALOG)
    result: Result = run_cli_in(isolation, ["dump", CATALOG])
    assert_SUCCESS(result)
    assert "Libraries (deps):" in result.output


@mark_cli
def test_dump_json(isolation: Path) -> None:
    """JSON output mirrors `CatalogModel.to_dict`."""
    write_catalog(isolation, SAMPLE_CATALOG)
    result: Result = run_cli_in(isolation, ["dump", CATALOG, "--format", "json"])

    assert_SUCCESS(result)
    payload: dict[str, Any] = json.loads(result.output)
    assert payload["bundles"] == {"groovy": ["groovy-core", "groovy-json"]}
    assert payload["libraries"]["commons-lang3"] == {
        "group": "org.apache.commons",
        "name": "commons-lang3",
        "version": {"require": "3.9", "reject": ["3.8"]},
    }
    assert payload["libraries"]["guava"] == {"group": "com.google.guava", "name": "guava"}


@mark_cli
def test_dump_toml_reloads_to_same_catalog(isolation: Path) -> None:
    """TOML output is a catalog file describing the same snapshot."""
    write_catalog(isolation, SAMPLE_CATALOG)
    result: Result = run_cli_in(isolation, ["dump", CATALOG, "--format", "toml"])
    assert_SUCCESS(result)

    original = load_catalog_dict(parse_toml_text(SAMPLE_CATALOG), CatalogModelBuilder()).build()
    reloaded = load_catalog_dict(parse_toml_text(result.output), CatalogModelBuilder()).build()
    assert reloaded == original


@mark_cli
def test_dump_errors(isolation: Path) -> None:
    """Invalid catalogs exit 65; missing ones exit 66."""
    write_catalog(isolation, '[bundles]\npack = ["ghost"]\n')
    invalid: Result = run_cli_in(isolation, ["dump", CATALOG])
    assert_DATA_ERROR(invalid)
    assert "declares a dependency on 'ghost'" in invalid.output

    assert_FILE_NOT_FOUND(run_cli_in(isolation, ["dump", "missing.toml"]))
