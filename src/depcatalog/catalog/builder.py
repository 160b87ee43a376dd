# topmark:header:start
#
#   project      : DepCatalog
#   file         : builder.py
#   file_relpath : src/depcatalog/catalog/builder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Mutable catalog builder.

`CatalogModelBuilder` accumulates aliases and bundles, then produces an
immutable `CatalogModel` via `build`.

Lifecycle:
    - *Accumulating*: `alias` and `bundle` may be called freely; each call
      validates its name and either fully applies or raises without mutating
      anything.
    - *Snapshotted*: reached by a successful `build`. The builder itself is not
      frozen and may keep accumulating; returned snapshots never change.

Conflicts:
    Re-declaring an alias or bundle replaces the previous value (last write
    wins) and reports a warning to the injected `DiagnosticSink`.

Threading:
    Single writer only. Pools and maps are unsynchronized.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from depcatalog.catalog.errors import InvalidCatalogNameError, UnknownBundleAliasError
from depcatalog.catalog.interning import Interner
from depcatalog.catalog.model import CatalogModel, DependencyModel
from depcatalog.catalog.properties import ConventionProperty
from depcatalog.catalog.version import VersionConstraint, build_version_constraint
from depcatalog.config.logging import get_logger
from depcatalog.constants import (
    DEFAULT_LIBRARIES_EXTENSION_NAME,
    DEFAULT_PROJECTS_EXTENSION_NAME,
    NAME_REGEX,
)
from depcatalog.diagnostic.sink import LoggingDiagnosticSink

if TYPE_CHECKING:
    from collections.abc import Iterable

    from depcatalog.catalog.version import VersionConfigurator
    from depcatalog.config.logging import CatalogLogger
    from depcatalog.diagnostic.sink import DiagnosticSink

logger: CatalogLogger = get_logger(__name__)

NAME_PATTERN: re.Pattern[str] = re.compile(NAME_REGEX)


def validate_name(kind: str, value: str) -> None:
    """Raise `InvalidCatalogNameError` unless ``value`` fully matches the name pattern.

    Args:
        kind (str): ``"alias"`` or ``"bundle"``, used in the error message.
        value (str): The name to check.

    Raises:
        InvalidCatalogNameError: If the name is not acceptable.
    """
    if NAME_PATTERN.fullmatch(value) is None:
        raise InvalidCatalogNameError(kind, value, NAME_REGEX)


class CatalogModelBuilder:
    """Accumulate dependency aliases and bundles into a catalog.

    Args:
        sink (DiagnosticSink | None): Receives duplicate-overwrite warnings.
            Defaults to a `LoggingDiagnosticSink`.
    """

    def __init__(self, sink: DiagnosticSink | None = None) -> None:
        # An empty DiagnosticLog is falsy: test for None explicitly.
        self.sink: DiagnosticSink = sink if sink is not None else LoggingDiagnosticSink(logger)
        self._strings: Interner[str] = Interner()
        self._versions: Interner[VersionConstraint] = Interner()
        self._dependencies: dict[str, DependencyModel] = {}
        self._bundles: dict[str, tuple[str, ...]] = {}
        self._libraries_extension_name: ConventionProperty[str] = ConventionProperty(
            DEFAULT_LIBRARIES_EXTENSION_NAME
        )
        self._projects_extension_name: ConventionProperty[str] = ConventionProperty(
            DEFAULT_PROJECTS_EXTENSION_NAME
        )

    @property
    def libraries_extension_name(self) -> ConventionProperty[str]:
        """Name under which consumers expose the libraries (default ``"libs"``)."""
        return self._libraries_extension_name

    @property
    def projects_extension_name(self) -> ConventionProperty[str]:
        """Name under which consumers expose projects (default ``"projects"``)."""
        return self._projects_extension_name

    def alias(
        self,
        alias: str,
        group: str,
        name: str,
        version_configurator: VersionConfigurator | None = None,
    ) -> None:
        """Declare (or re-declare) a dependency under ``alias``.

        Args:
            alias (str): Alias name; must match the name pattern.
            group (str): Artifact group.
            name (str): Artifact name.
            version_configurator (VersionConfigurator | None): Called once, synchronously,
                with a fresh `MutableVersionConstraint` to populate.
        """
        validate_name("alias", alias)
        version: VersionConstraint = self._versions.intern(
            build_version_constraint(version_configurator)
        )
        model = DependencyModel(self._intern(group), self._intern(name), version)
        key: str = self._intern(alias)
        previous: DependencyModel | None = self._dependencies.get(key)
        self._dependencies[key] = model
        logger.trace("Declared alias '%s' -> %s", key, model)
        if previous is not None:
            self.sink.warn(
                f"Duplicate entry for alias '{alias}': {previous} is replaced with {model}"
            )

    def bundle(self, name: str, aliases: Iterable[str]) -> None:
        """Declare (or re-declare) a bundle of aliases.

        Member aliases are not checked here; `build` verifies them.

        Args:
            name (str): Bundle name; must match the name pattern.
            aliases (Iterable[str]): Member aliases, in order. Duplicates are kept.
                A bare ``str`` is rejected rather than split into characters.

        Raises:
            TypeError: If ``aliases`` is a single string.
        """
        validate_name("bundle", name)
        if isinstance(aliases, str):
            raise TypeError(f"Bundle '{name}' expects an iterable of aliases, not a string")
        value: tuple[str, ...] = tuple(self._intern(a) for a in aliases)
        key: str = self._intern(name)
        previous: tuple[str, ...] | None = self._bundles.get(key)
        self._bundles[key] = value
        logger.trace("Declared bundle '%s' -> %s", key, list(value))
        if previous is not None:
            self.sink.warn(
                f"Duplicate entry for bundle '{name}': {list(previous)} is replaced with "
                f"{list(value)}"
            )

    def build(self) -> CatalogModel:
        """Validate bundle references and return an immutable snapshot.

        Returns:
            CatalogModel: A snapshot independent of any later builder mutation.

        Raises:
            UnknownBundleAliasError: On the first bundle member that is not a
                declared alias.
        """
        for bundle_name, aliases in self._bundles.items():
            for alias in aliases:
                if alias not in self._dependencies:
                    raise UnknownBundleAliasError(bundle_name, alias)
        logger.debug(
            "Building catalog: %d alias(es), %d bundle(s)",
            len(self._dependencies),
            len(self._bundles),
        )
        return CatalogModel(self._dependencies, self._bundles)

    def _intern(self, value: str) -> str:
        return self._strings.intern(value)
