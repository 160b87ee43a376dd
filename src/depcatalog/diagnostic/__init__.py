# topmark:header:start
#
#   project      : DepCatalog
#   file         : __init__.py
#   file_relpath : src/depcatalog/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic primitives and sinks.

Design:
    - Diagnostics are represented by immutable `Diagnostic` instances.
    - While building a catalog, warnings flow through a `DiagnosticSink`;
      a mutable `DiagnosticLog` collects them when a report is needed.
"""

from __future__ import annotations

from depcatalog.diagnostic.model import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticLog,
    DiagnosticStats,
    compute_diagnostic_stats,
    diagnostics_counts_to_dict,
)
from depcatalog.diagnostic.sink import DiagnosticSink, LoggingDiagnosticSink

__all__ = [
    "Diagnostic",
    "DiagnosticLevel",
    "DiagnosticLog",
    "DiagnosticSink",
    "DiagnosticStats",
    "LoggingDiagnosticSink",
    "compute_diagnostic_stats",
    "diagnostics_counts_to_dict",
]
