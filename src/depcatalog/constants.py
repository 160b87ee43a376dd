# topmark:header:start
#
#   project      : DepCatalog
#   file         : constants.py
#   file_relpath : src/depcatalog/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DepCatalog Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

DEPCATALOG_VERSION: str = get_version("depcatalog")

# Alias and bundle names: a lowercase letter followed by one or more
# letters, digits, underscores, periods or hyphens.
NAME_REGEX: str = r"[a-z]([a-zA-Z0-9_.\-])+"

DEFAULT_LIBRARIES_EXTENSION_NAME: str = "libs"
DEFAULT_PROJECTS_EXTENSION_NAME: str = "projects"

# Project configuration files, in same-directory merge order.
PYPROJECT_TOML_NAME: str = "pyproject.toml"
DEPCATALOG_TOML_NAME: str = "depcatalog.toml"

# Environment variable consulted by `setup_logging()`.
LOG_LEVEL_ENV_VAR: str = "DEPCATALOG_LOG_LEVEL"

VALUE_NOT_SET: str = "<not set>"
