# topmark:header:start
#
#   project      : DepCatalog
#   file         : getters.py
#   file_relpath : src/depcatalog/config/io/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value getters for TOML tables.

*Checked* getters validate the expected shape, record a **warning** in a
`DiagnosticLog` (and log it), and fall back to ``None`` so that user mistakes
are surfaced without crashing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from depcatalog.config.logging import get_logger

if TYPE_CHECKING:
    from depcatalog.config.logging import CatalogLogger
    from depcatalog.diagnostic.model import DiagnosticLog

    from .types import TomlTable

logger: CatalogLogger = get_logger(__name__)


def _warn(diagnostics: DiagnosticLog | None, message: str) -> None:
    logger.warning(message)
    if diagnostics is not None:
        diagnostics.add_warning(message)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table ``key`` of ``table``, or an empty dict.

    Args:
        table (TomlTable): Table to query.
        key (str): Sub-table name.

    Returns:
        TomlTable: The sub-table (an empty dict when missing or not a table).
    """
    value: Any = table.get(key)
    if isinstance(value, dict):
        return cast("TomlTable", value)
    if value is not None:
        logger.debug("Expected table for key %r, got %r", key, value)
    return {}


def get_string_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog | None = None,
) -> str | None:
    """Extract an optional string; warn on wrong types.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        where (str): Human-readable location (e.g. ``"[extensions]"``) for messages.
        diagnostics (DiagnosticLog | None): Log receiving warnings.

    Returns:
        str | None: The value, or None when absent or not a string.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    _warn(diagnostics, f"Expected string for {where}.{key}, got {type(value).__name__}")
    return None


def get_bool_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog | None = None,
) -> bool | None:
    """Extract an optional boolean; warn on wrong types.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        where (str): Human-readable location for messages.
        diagnostics (DiagnosticLog | None): Log receiving warnings.

    Returns:
        bool | None: The value, or None when absent or not a boolean.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    _warn(diagnostics, f"Expected boolean for {where}.{key}, got {type(value).__name__}")
    return None
