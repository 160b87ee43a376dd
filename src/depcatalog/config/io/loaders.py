# topmark:header:start
#
#   project      : DepCatalog
#   file         : loaders.py
#   file_relpath : src/depcatalog/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML documents.

Parsing is done with `tomlkit` and returned as plain `dict` structures.

Two flavors exist:
- `parse_toml_file` raises on I/O or syntax errors. Catalog files use it: a
  catalog that cannot be read is a hard error.
- `load_toml_dict` logs and returns an empty dict. Settings discovery uses it:
  an unreadable settings file must not abort a run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from depcatalog.config.keys import Toml
from depcatalog.config.logging import get_logger
from depcatalog.constants import (
    DEFAULT_LIBRARIES_EXTENSION_NAME,
    DEFAULT_PROJECTS_EXTENSION_NAME,
)

if TYPE_CHECKING:
    from pathlib import Path

    from depcatalog.config.logging import CatalogLogger

    from .types import TomlTable

logger: CatalogLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return DepCatalog's runtime settings defaults as a TOML-shaped dict.

    Returns:
        A new dict, safe for callers to mutate.
    """
    return {
        Toml.SECTION_EXTENSIONS: {
            Toml.KEY_LIBRARIES: DEFAULT_LIBRARIES_EXTENSION_NAME,
            Toml.KEY_PROJECTS: DEFAULT_PROJECTS_EXTENSION_NAME,
        },
        Toml.SECTION_CHECK: {
            Toml.KEY_STRICT: False,
        },
    }


def parse_toml_text(text: str) -> TomlTable:
    """Parse a TOML document into plain Python containers.

    Args:
        text: TOML document text.

    Returns:
        The parsed top-level table.

    Raises:
        TomlkitParseError: If the text is not valid TOML.
    """
    doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def parse_toml_file(path: Path) -> TomlTable:
    """Read and parse a UTF-8 TOML file, propagating errors.

    Args:
        path: Path to the TOML document.

    Returns:
        The parsed top-level table.
    """
    logger.debug("Parsing TOML file: %s", path)
    return parse_toml_text(path.read_text(encoding="utf-8"))


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file, returning an empty dict on failure.

    Args:
        path: Path to a TOML document (e.g., ``depcatalog.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
    """
    try:
        return parse_toml_file(path)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}
    except (TypeError, ValueError) as e:
        logger.error("Unknown error while reading TOML from %s: %s", path, e)
        return {}
