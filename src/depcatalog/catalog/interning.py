# topmark:header:start
#
#   project      : DepCatalog
#   file         : interning.py
#   file_relpath : src/depcatalog/catalog/interning.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Content-addressed interning pools.

An `Interner` maps structurally equal values to one shared instance, so that a
large catalog repeating the same groups and versions holds each of them once.
Pools keep strong references for the lifetime of their owner.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)


class Interner(Generic[T]):
    """Strong interning pool for hashable values."""

    def __init__(self) -> None:
        self._pool: dict[T, T] = {}

    def intern(self, value: T) -> T:
        """Return the canonical instance equal to ``value``.

        The first value seen for a given key becomes the canonical instance.

        Args:
            value (T): The value to intern.

        Returns:
            T: The pooled instance (``value`` itself when first seen).
        """
        return self._pool.setdefault(value, value)

    def __contains__(self, value: object) -> bool:
        return value in self._pool

    def __len__(self) -> int:
        return len(self._pool)
