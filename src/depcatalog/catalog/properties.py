# topmark:header:start
#
#   project      : DepCatalog
#   file         : properties.py
#   file_relpath : src/depcatalog/catalog/properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configurable values with a convention (default) fallback.

`ConventionProperty` is a tiny get/set holder: until a value is explicitly set,
`get()` returns the convention. The catalog builder uses it for its extension
names; consumers treat it as a plain configuration value.
"""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class ConventionProperty(Generic[T]):
    """A value with a convention used when nothing was set explicitly.

    Args:
        convention (T): Value returned by `get()` while the property is unset.
    """

    def __init__(self, convention: T) -> None:
        self._convention: T = convention
        self._value: T | None = None
        self._present: bool = False

    @property
    def convention(self) -> T:
        """The fallback value."""
        return self._convention

    def get(self) -> T:
        """Return the explicit value if set, else the convention."""
        if self._present:
            return self._value  # type: ignore[return-value]
        return self._convention

    def set(self, value: T) -> None:
        """Set an explicit value."""
        self._value = value
        self._present = True

    def unset(self) -> None:
        """Discard the explicit value so `get()` falls back to the convention."""
        self._value = None
        self._present = False

    def is_present(self) -> bool:
        """Return True if a value was explicitly set."""
        return self._present

    def __repr__(self) -> str:
        state: str = "set" if self._present else "convention"
        return f"{type(self).__name__}({self.get()!r}, {state})"
