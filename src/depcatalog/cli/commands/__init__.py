# topmark:header:start
#
#   project      : DepCatalog
#   file         : __init__.py
#   file_relpath : src/depcatalog/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DepCatalog CLI subcommands."""
