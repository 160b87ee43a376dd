# topmark:header:start
#
#   project      : DepCatalog
#   file         : __init__.py
#   file_relpath : src/depcatalog/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for DepCatalog.

The entry point is `depcatalog.cli.main.cli`.
"""
