# topmark:header:start
#
#   project      : DepCatalog
#   file         : __init__.py
#   file_relpath : src/depcatalog/catalog/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dependency catalog core.

Public objects:
    - `CatalogModelBuilder`: mutable builder validating and interning declarations.
    - `CatalogModel`, `DependencyModel`: the immutable snapshot types.
    - `VersionConstraint`, `MutableVersionConstraint`: version constraints.
    - `load_catalog_dict`, `load_catalog_file`: TOML catalog replay.
"""

from __future__ import annotations

from depcatalog.catalog.builder import CatalogModelBuilder, validate_name
from depcatalog.catalog.errors import (
    CatalogError,
    CatalogFormatError,
    InvalidCatalogNameError,
    UnknownBundleAliasError,
)
from depcatalog.catalog.loader import load_catalog_dict, load_catalog_file
from depcatalog.catalog.model import CatalogModel, DependencyModel
from depcatalog.catalog.properties import ConventionProperty
from depcatalog.catalog.version import (
    MutableVersionConstraint,
    VersionConfigurator,
    VersionConstraint,
    build_version_constraint,
)

__all__ = [
    "CatalogError",
    "CatalogFormatError",
    "CatalogModel",
    "CatalogModelBuilder",
    "ConventionProperty",
    "DependencyModel",
    "InvalidCatalogNameError",
    "MutableVersionConstraint",
    "UnknownBundleAliasError",
    "VersionConfigurator",
    "VersionConstraint",
    "build_version_constraint",
    "load_catalog_dict",
    "load_catalog_file",
    "validate_name",
]
