# topmark:header:start
#
#   project      : DepCatalog
#   file         : __main__.py
#   file_relpath : src/depcatalog/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running DepCatalog via ``python -m depcatalog``.

It delegates directly to :func:`depcatalog.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how DepCatalog is launched.

Examples:
    Validate a catalog file using the module interface::

        python -m depcatalog check gradle/libs.versions.toml
"""

from __future__ import annotations

from depcatalog.cli.main import cli

if __name__ == "__main__":
    cli()
