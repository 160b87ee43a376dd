# topmark:header:start
#
#   project      : DepCatalog
#   file         : model.py
#   file_relpath : src/depcatalog/catalog/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable catalog model.

This module defines:
    - `DependencyModel`: one declared dependency coordinate with its version constraint.
    - `CatalogModel`: the frozen snapshot produced by
      `depcatalog.catalog.builder.CatalogModelBuilder.build`.

Immutability:
    - `CatalogModel` stores read-only mapping views (``MappingProxyType``) over
      private dict copies, and bundle members as tuples. The builder never hands
      out its live maps, so a snapshot is safe to share between reader threads.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator

    from depcatalog.catalog.version import VersionConstraint


@dataclass(frozen=True, slots=True)
class DependencyModel:
    """Immutable dependency coordinate.

    Attributes:
        group (str): Group (organisation) of the artifact.
        name (str): Artifact name.
        version (VersionConstraint): Accepted versions.
    """

    group: str
    name: str
    version: VersionConstraint

    @property
    def module(self) -> str:
        """Return the ``group:name`` module notation."""
        return f"{self.group}:{self.name}"

    def to_dict(self) -> dict[str, Any]:
        """Return a TOML/JSON-friendly representation."""
        out: dict[str, Any] = {"group": self.group, "name": self.name}
        version: dict[str, Any] = self.version.to_dict()
        if version:
            out["version"] = version
        return out

    def __str__(self) -> str:
        if self.version.is_empty:
            return self.module
        return f"{self.module}:{self.version.display_name}"


@dataclass(frozen=True, slots=True, init=False)
class CatalogModel:
    """Immutable snapshot of a dependency catalog.

    Attributes:
        dependencies (Mapping[str, DependencyModel]): Alias → dependency, in
            declaration order.
        bundles (Mapping[str, tuple[str, ...]]): Bundle name → member aliases, in
            declaration order. Members may repeat.
    """

    dependencies: Mapping[str, DependencyModel]
    bundles: Mapping[str, tuple[str, ...]]

    def __init__(
        self,
        dependencies: Mapping[str, DependencyModel],
        bundles: Mapping[str, tuple[str, ...]],
    ) -> None:
        # Copy first: callers may keep mutating what they passed in.
        object.__setattr__(self, "dependencies", MappingProxyType(dict(dependencies)))
        object.__setattr__(
            self,
            "bundles",
            MappingProxyType({k: tuple(v) for k, v in bundles.items()}),
        )

    @property
    def aliases(self) -> tuple[str, ...]:
        """Declared aliases, in declaration order."""
        return tuple(self.dependencies)

    @property
    def bundle_names(self) -> tuple[str, ...]:
        """Declared bundle names, in declaration order."""
        return tuple(self.bundles)

    def get_dependency(self, alias: str) -> DependencyModel | None:
        """Return the dependency declared under ``alias``, or None."""
        return self.dependencies.get(alias)

    def get_bundle(self, name: str) -> tuple[str, ...] | None:
        """Return the aliases of bundle ``name``, or None."""
        return self.bundles.get(name)

    def resolve_bundle(self, name: str) -> tuple[DependencyModel, ...]:
        """Return the dependency models of bundle ``name`` in member order.

        Args:
            name (str): Bundle name.

        Returns:
            tuple[DependencyModel, ...]: One model per member alias.

        Raises:
            KeyError: If no bundle with this name exists.
        """
        members: tuple[str, ...] = self.bundles[name]
        return tuple(self.dependencies[alias] for alias in members)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation of the snapshot."""
        return {
            "libraries": {alias: dep.to_dict() for alias, dep in self.dependencies.items()},
            "bundles": {name: list(members) for name, members in self.bundles.items()},
        }

    def to_toml_dict(self) -> dict[str, Any]:
        """Return a TOML-serializable dict in catalog file layout.

        Libraries are written with ``module`` notation so the output can be
        loaded back by `depcatalog.catalog.loader`.
        """
        libraries: dict[str, Any] = {}
        for alias, dep in self.dependencies.items():
            entry: dict[str, Any] = {"module": dep.module}
            version: dict[str, Any] = dep.version.to_dict()
            if list(version) == ["require"]:
                entry["version"] = version["require"]
            elif version:
                entry["version"] = version
            libraries[alias] = entry
        return {
            "libraries": libraries,
            "bundles": {name: list(members) for name, members in self.bundles.items()},
        }

    def __contains__(self, alias: object) -> bool:
        return alias in self.dependencies

    def __iter__(self) -> Iterator[str]:
        return iter(self.dependencies)

    def __len__(self) -> int:
        return len(self.dependencies)
