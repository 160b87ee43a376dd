# topmark:header:start
#
#   project      : DepCatalog
#   file         : version.py
#   file_relpath : src/depcatalog/catalog/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Version constraint model.

This module defines:
    - `VersionConstraint`: an immutable, hashable description of acceptable
      versions, suitable for interning.
    - `MutableVersionConstraint`: a mutable builder handed to version
      configurator callbacks; it is frozen into a `VersionConstraint`.

Semantics of the builder operations:
    - ``require(v)``: set the required version; clears strict and rejected versions.
    - ``strictly(v)``: set both strict and required versions; clears rejected versions.
    - ``prefer(v)``: set the preferred version only.
    - ``reject(*vs)``: replace the list of rejected versions.
    - ``reject_all()``: clear every version and reject everything (``"+"``).

Versions are opaque strings; nothing here parses or resolves them.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

REJECT_ALL: str = "+"


@dataclass(frozen=True, slots=True)
class VersionConstraint:
    """Immutable version constraint.

    Attributes:
        required (str): Required version (``""`` when unset).
        preferred (str): Preferred version (``""`` when unset).
        strictly (str): Strict version (``""`` when unset).
        rejected (tuple[str, ...]): Rejected versions, in declaration order.
        branch (str | None): Optional branch name.
    """

    required: str = ""
    preferred: str = ""
    strictly: str = ""
    rejected: tuple[str, ...] = ()
    branch: str | None = None

    @property
    def is_empty(self) -> bool:
        """Return True if the constraint declares nothing at all."""
        return not (
            self.required or self.preferred or self.strictly or self.rejected or self.branch
        )

    @property
    def display_name(self) -> str:
        """Return a compact human-readable rendering.

        A plain required version renders as the version itself; anything
        richer renders as a brace-delimited list of clauses.
        """
        if self.strictly and not (self.preferred or self.rejected or self.branch):
            return f"{{strictly {self.strictly}}}"
        if self.required and not (self.preferred or self.rejected or self.branch):
            return self.required

        parts: list[str] = []
        if self.strictly:
            parts.append(f"strictly {self.strictly}")
        elif self.required:
            parts.append(f"require {self.required}")
        if self.preferred:
            parts.append(f"prefer {self.preferred}")
        if self.rejected:
            if self.rejected == (REJECT_ALL,):
                parts.append("reject all versions")
            else:
                parts.append(f"reject {' & '.join(self.rejected)}")
        if self.branch:
            parts.append(f"branch {self.branch}")
        return "{" + "; ".join(parts) + "}"

    def thaw(self) -> MutableVersionConstraint:
        """Return a mutable builder initialized from this constraint."""
        return MutableVersionConstraint(
            required=self.required,
            preferred=self.preferred,
            strict=self.strictly,
            rejected=list(self.rejected),
            branch=self.branch,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return only the populated clauses, for TOML/JSON export."""
        out: dict[str, Any] = {}
        if self.strictly:
            out["strictly"] = self.strictly
        elif self.required:
            out["require"] = self.required
        if self.preferred:
            out["prefer"] = self.preferred
        if self.rejected == (REJECT_ALL,):
            out["rejectAll"] = True
        elif self.rejected:
            out["reject"] = list(self.rejected)
        if self.branch:
            out["branch"] = self.branch
        return out

    def __str__(self) -> str:
        return self.display_name


@dataclass
class MutableVersionConstraint:
    """Mutable builder for `VersionConstraint`.

    A fresh builder is seeded with an empty required version. Configurator
    callbacks populate it in place; `freeze()` produces the immutable value.
    """

    required: str = ""
    preferred: str = ""
    strict: str = ""
    rejected: list[str] = field(default_factory=lambda: [])
    branch: str | None = None

    def _update_versions(self, *, preferred: str, required: str, strict: str) -> None:
        self.preferred = preferred or ""
        self.required = required or ""
        self.strict = strict or ""
        self.rejected.clear()

    def require(self, version: str) -> None:
        """Set the required version, clearing strict and rejected versions."""
        self._update_versions(preferred=self.preferred, required=version, strict="")

    def strictly(self, version: str) -> None:
        """Set the strict version (which also becomes the required version)."""
        self._update_versions(preferred=self.preferred, required=version, strict=version)

    def prefer(self, version: str) -> None:
        """Set the preferred version."""
        self.preferred = version or ""

    def reject(self, *versions: str) -> None:
        """Replace the rejected versions."""
        self.rejected[:] = list(versions)

    def reject_all(self) -> None:
        """Reject every version."""
        self._update_versions(preferred="", required="", strict="")
        self.rejected.append(REJECT_ALL)

    def freeze(self) -> VersionConstraint:
        """Freeze this builder into an immutable `VersionConstraint`."""
        return VersionConstraint(
            required=self.required,
            preferred=self.preferred,
            strictly=self.strict,
            rejected=tuple(self.rejected),
            branch=self.branch or None,
        )


# Callback populating a fresh `MutableVersionConstraint` in place.
VersionConfigurator = Callable[[MutableVersionConstraint], None]


def build_version_constraint(configurator: VersionConfigurator | None) -> VersionConstraint:
    """Run ``configurator`` against a fresh builder and freeze the result.

    Args:
        configurator (VersionConfigurator | None): Callback
            populating the builder. ``None`` yields an empty constraint.

    Returns:
        VersionConstraint: The frozen constraint.
    """
    builder = MutableVersionConstraint("")
    if configurator is not None:
        configurator(builder)
    return builder.freeze()
