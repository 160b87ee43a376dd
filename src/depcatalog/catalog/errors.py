# topmark:header:start
#
#   project      : DepCatalog
#   file         : errors.py
#   file_relpath : src/depcatalog/catalog/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised while building a dependency catalog.

All errors signal caller misuse and are raised immediately; none is retried.
Duplicate alias or bundle entries are *not* errors (they are reported to the
builder's diagnostic sink instead).
"""

from __future__ import annotations

from pathlib import Path


class CatalogError(ValueError):
    """Base class for invalid catalog data."""


class InvalidCatalogNameError(CatalogError):
    """An alias or bundle name does not match the required pattern.

    Attributes:
        kind (str): ``"alias"`` or ``"bundle"``.
        name (str): The rejected name.
        pattern (str): The regular expression names must match.
    """

    def __init__(self, kind: str, name: str, pattern: str) -> None:
        self.kind = kind
        self.name = name
        self.pattern = pattern
        super().__init__(
            f"Invalid {kind} name '{name}': it must match the following regular expression: "
            f"{pattern}"
        )


class UnknownBundleAliasError(CatalogError):
    """A bundle references an alias that was never declared.

    Attributes:
        bundle (str): The offending bundle name.
        alias (str): The missing alias.
    """

    def __init__(self, bundle: str, alias: str) -> None:
        self.bundle = bundle
        self.alias = alias
        super().__init__(
            f"A bundle with name '{bundle}' declares a dependency on '{alias}' "
            "which doesn't exist"
        )


class CatalogFormatError(CatalogError):
    """A catalog definition file is malformed.

    Attributes:
        path (Path | None): The catalog file, when known.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        self.path = path
        super().__init__(f"{path}: {message}" if path is not None else message)
