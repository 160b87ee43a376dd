# topmark:header:start
#
#   project      : DepCatalog
#   file         : test_version_constraint.py
#   file_relpath : tests/catalog/test_version_constraint.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `VersionConstraint` and its mutable builder."""

from __future__ import annotations

import dataclasses

import pytest

from depcatalog.catalog.version import (
    REJECT_ALL,
    MutableVersionConstraint,
    VersionConstraint,
    build_version_constraint,
)
from tests.conftest import parametrize


def test_require_clears_strict_and_rejected() -> None:
    """``require`` keeps the preference but resets strict and rejected versions."""
    v = MutableVersionConstraint()
    v.strictly("1.0")
    v.prefer("1.1")
    v.reject("0.9")
    v.require("2.0")
    frozen = v.freeze()
    assert frozen.required == "2.0"
    assert frozen.strictly == ""
    assert frozen.preferred == "1.1"
    assert frozen.rejected == ()


def test_strictly_sets_required_too() -> None:
    """``strictly`` sets both the strict and the required version."""
    frozen = build_version_constraint(lambda v: v.strictly("8.37"))
    assert frozen.strictly == "8.37"
    assert frozen.required == "8.37"


def test_reject_replaces_list() -> None:
    """``reject`` replaces previously rejected versions."""
    v = MutableVersionConstraint()
    v.reject("1", "2")
    v.reject("3")
    assert v.freeze().rejected == ("3",)


def test_reject_all() -> None:
    """``reject_all`` clears versions and rejects everything."""
    v = MutableVersionConstraint()
    v.require("1.0")
    v.prefer("1.1")
    v.reject_all()
    frozen = v.freeze()
    assert frozen.required == ""
    assert frozen.preferred == ""
    assert frozen.rejected == (REJECT_ALL,)
    assert frozen.display_name == "{reject all versions}"
    assert frozen.to_dict() == {"rejectAll": True}


def test_none_configurator_yields_empty() -> None:
    """No configurator means no constraint."""
    assert build_version_constraint(None) == VersionConstraint()
    assert build_version_constraint(None).is_empty


def test_equal_constraints_hash_equal() -> None:
    """Equal constraints are interchangeable as dict keys."""
    a = build_version_constraint(lambda v: v.require("1.0"))
    b = build_version_constraint(lambda v: v.require("1.0"))
    assert a == b
    assert hash(a) == hash(b)
    assert a is not b


def test_constraint_is_frozen() -> None:
    """Snapshots cannot be mutated."""
    c = VersionConstraint(required="1.0")
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.required = "2.0"  # type: ignore[misc]


def test_thaw_roundtrip() -> None:
    """``thaw`` then ``freeze`` returns an equal constraint."""
    c = VersionConstraint(required="1.0", preferred="1.1", rejected=("0.9",), branch="main")
    assert c.thaw().freeze() == c


@parametrize(
    ("constraint", "expected"),
    [
        (VersionConstraint(required="1.0"), "1.0"),
        (VersionConstraint(required="8.37", strictly="8.37"), "{strictly 8.37}"),
        (VersionConstraint(required="3.9", rejected=("3.8",)), "{require 3.9; reject 3.8}"),
        (
            VersionConstraint(required="1.0", preferred="1.2", rejected=("0.1", "0.2")),
            "{require 1.0; prefer 1.2; reject 0.1 & 0.2}",
        ),
        (VersionConstraint(preferred="2.0"), "{prefer 2.0}"),
        (VersionConstraint(branch="main"), "{branch main}"),
    ],
)
def test_display_name(constraint: VersionConstraint, expected: str) -> None:
    """Plain versions render bare; richer constraints render as clauses."""
    assert constraint.display_name == expected
    assert str(constraint) == expected


def test_to_dict_only_populated_clauses() -> None:
    """Export keeps only what was declared, preferring ``strictly`` over ``require``."""
    assert VersionConstraint().to_dict() == {}
    assert VersionConstraint(required="1", strictly="1", preferred="2").to_dict() == {
        "strictly": "1",
        "prefer": "2",
    }
    assert VersionConstraint(required="1", rejected=("0",), branch="dev").to_dict() == {
        "require": "1",
        "reject": ["0"],
        "branch": "dev",
    }
