# topmark:header:start
#
#   project      : DepCatalog
#   file         : __init__.py
#   file_relpath : src/depcatalog/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DepCatalog package.

DepCatalog builds declarative dependency catalogs: named dependency aliases and
named bundles of aliases. A mutable builder validates names and interns repeated
data, then freezes everything into an immutable, shareable snapshot. The package
exposes both a CLI and a small typed API for automation.
"""

from __future__ import annotations
