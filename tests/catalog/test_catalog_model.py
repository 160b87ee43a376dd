# topmark:header:start
#
#   project      : DepCatalog
#   file         : test_catalog_model.py
#   file_relpath : tests/catalog/test_catalog_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the immutable `CatalogModel` snapshot."""

from __future__ import annotations

import dataclasses

import pytest

from depcatalog.catalog.model import CatalogModel, DependencyModel
from depcatalog.catalog.version import VersionConstraint


def _model() -> CatalogModel:
    deps: dict[str, DependencyModel] = {
        "groovy": DependencyModel("org.codehaus.groovy", "groovy", VersionConstraint("3.0.5")),
        "guava": DependencyModel("com.google.guava", "guava", VersionConstraint()),
    }
    return CatalogModel(deps, {"all": ("groovy", "guava")})


def test_lookups() -> None:
    """Aliases and bundles are queryable in declaration order."""
    catalog = _model()
    assert catalog.aliases == ("groovy", "guava")
    assert catalog.bundle_names == ("all",)
    assert "groovy" in catalog
    assert "missing" not in catalog
    assert list(catalog) == ["groovy", "guava"]
    assert len(catalog) == 2
    assert catalog.get_dependency("missing") is None
    assert catalog.get_bundle("missing") is None


def test_resolve_bundle() -> None:
    """Bundles resolve to dependency models in member order."""
    catalog = _model()
    assert [d.name for d in catalog.resolve_bundle("all")] == ["groovy", "guava"]
    with pytest.raises(KeyError):
        catalog.resolve_bundle("missing")


def test_snapshot_copies_inputs() -> None:
    """Mutating the mappings passed in does not affect the snapshot."""
    deps: dict[str, DependencyModel] = {
        "a": DependencyModel("g", "a", VersionConstraint()),
    }
    members: list[str] = ["a"]
    bundles: dict[str, list[str]] = {"pack": members}
    catalog = CatalogModel(deps, bundles)  # type: ignore[arg-type]

    deps["b"] = DependencyModel("g", "b", VersionConstraint())
    members.append("b")
    assert catalog.aliases == ("a",)
    assert catalog.get_bundle("pack") == ("a",)


def test_snapshot_is_read_only() -> None:
    """Neither the fields nor the exposed mappings can be modified."""
    catalog = _model()
    with pytest.raises(dataclasses.FrozenInstanceError):
        catalog.dependencies = {}  # type: ignore[misc]
    with pytest.raises(TypeError):
        catalog.dependencies["x"] = DependencyModel("g", "x", VersionConstraint())  # type: ignore[index]
    with pytest.raises(TypeError):
        catalog.bundles["x"] = ()  # type: ignore[index]


def test_equality() -> None:
    """Snapshots with the same content compare equal."""
    assert _model() == _model()


def test_dependency_str_and_module() -> None:
    """Coordinates render as ``group:name[:version]``."""
    groovy = DependencyModel("org.codehaus.groovy", "groovy", VersionConstraint("3.0.5"))
    guava = DependencyModel("com.google.guava", "guava", VersionConstraint())
    assert groovy.module == "org.codehaus.groovy:groovy"
    assert str(groovy) == "org.codehaus.groovy:groovy:3.0.5"
    assert str(guava) == "com.google.guava:guava"


def test_to_dict() -> None:
    """JSON export lists libraries and bundles."""
    assert _model().to_dict() == {
        "libraries": {
            "groovy": {
                "group": "org.codehaus.groovy",
                "name": "groovy",
                "version": {"require": "3.0.5"},
            },
            "guava": {"group": "com.google.guava", "name": "guava"},
        },
        "bundles": {"all": ["groovy", "guava"]},
    }


def test_to_toml_dict_uses_catalog_layout() -> None:
    """TOML export uses ``module`` notation and bare plain versions."""
    deps: dict[str, DependencyModel] = {
        "groovy": DependencyModel("org.codehaus.groovy", "groovy", VersionConstraint("3.0.5")),
        "checkstyle": DependencyModel(
            "com.puppycrawl.tools", "checkstyle", VersionConstraint("8.37", strictly="8.37")
        ),
        "guava": DependencyModel("com.google.guava", "guava", VersionConstraint()),
    }
    data = CatalogModel(deps, {}).to_toml_dict()
    assert data["libraries"] == {
        "groovy": {"module": "org.codehaus.groovy:groovy", "version": "3.0.5"},
        "checkstyle": {"module": "com.puppycrawl.tools:checkstyle", "version": {"strictly": "8.37"}},
        "guava": {"module": "com.google.guava:guava"},
    }
    assert data["bundles"] == {}
