# topmark:header:start
#
#   project      : DepCatalog
#   file         : test_toml_io.py
#   file_relpath : tests/config/test_toml_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the TOML I/O helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from tomlkit.exceptions import ParseError as TomlkitParseError

from depcatalog.config.io import (
    get_bool_value_or_none_checked,
    get_string_value_or_none_checked,
    get_table_value,
    load_toml_dict,
    parse_toml_file,
    parse_toml_text,
    to_toml,
)
from depcatalog.diagnostic.model import DiagnosticLog

if TYPE_CHECKING:
    from pathlib import Path


def test_parse_returns_plain_containers() -> None:
    """Parsed documents are plain dicts, lists and scalars."""
    data = parse_toml_text('[bundles]\npack = ["a", "b"]\n')
    assert data == {"bundles": {"pack": ["a", "b"]}}
    assert type(data["bundles"]) is dict
    assert type(data["bundles"]["pack"]) is list


def test_parse_errors_propagate(tmp_path: Path) -> None:
    """The strict parsers raise; the tolerant loader returns an empty dict."""
    bad: Path = tmp_path / "bad.toml"
    bad.write_text("key = \n", encoding="utf-8")
    with pytest.raises(TomlkitParseError):
        parse_toml_file(bad)
    assert load_toml_dict(bad) == {}
    assert load_toml_dict(tmp_path / "missing.toml") == {}


def test_tolerant_loader_skips_undecodable_files(tmp_path: Path) -> None:
    """A settings file that is not UTF-8 loads as an empty table."""
    latin: Path = tmp_path / "latin.toml"
    latin.write_bytes(b"a = '\xff'\n")
    with pytest.raises(UnicodeDecodeError):
        parse_toml_file(latin)
    assert load_toml_dict(latin) == {}


def test_to_toml_strips_none() -> None:
    """`None` values are dropped since TOML cannot express them."""
    text: str = to_toml({"check": {"strict": True, "unset": None}, "items": ["a", None]})
    assert parse_toml_text(text) == {"check": {"strict": True}, "items": ["a"]}


def test_getters() -> None:
    """Checked getters return values of the right type and warn otherwise."""
    log = DiagnosticLog()
    table = {"name": "x", "flag": True, "wrong": 1, "sub": {"k": "v"}, "notab": 3}

    assert get_table_value(table, "sub") == {"k": "v"}
    assert get_table_value(table, "notab") == {}
    assert get_table_value(table, "absent") == {}

    assert get_string_value_or_none_checked(table, "name", where="[t]", diagnostics=log) == "x"
    assert get_string_value_or_none_checked(table, "absent", where="[t]", diagnostics=log) is None
    assert get_string_value_or_none_checked(table, "wrong", where="[t]", diagnostics=log) is None
    assert get_bool_value_or_none_checked(table, "flag", where="[t]", diagnostics=log) is True
    assert get_bool_value_or_none_checked(table, "name", where="[t]", diagnostics=log) is None

    assert [d.message for d in log] == [
        "Expected string for [t].wrong, got int",
        "Expected boolean for [t].name, got str",
    ]
