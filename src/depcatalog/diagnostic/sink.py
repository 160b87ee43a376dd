# topmark:header:start
#
#   project      : DepCatalog
#   file         : sink.py
#   file_relpath : src/depcatalog/diagnostic/sink.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic sinks for non-fatal catalog notifications.

The catalog builder never logs directly: it reports duplicate overwrites to an
injected sink. This keeps the builder testable without capturing process-wide
output. `LoggingDiagnosticSink` is the default and forwards to the DepCatalog
logger; `depcatalog.diagnostic.model.DiagnosticLog` collects warnings instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from depcatalog.config.logging import get_logger

if TYPE_CHECKING:
    from depcatalog.config.logging import CatalogLogger


class DiagnosticSink(Protocol):
    """One-way channel receiving non-fatal warnings."""

    def warn(self, message: str) -> None:
        """Receive a warning message."""
        ...


class LoggingDiagnosticSink:
    """Sink that forwards warnings to a logger.

    Args:
        logger (CatalogLogger | None): Target logger; defaults to this module's logger.
    """

    logger: CatalogLogger

    def __init__(self, logger: CatalogLogger | None = None) -> None:
        self.logger = logger or get_logger(__name__)

    def warn(self, message: str) -> None:
        """Log ``message`` at WARNING level.

        Args:
            message (str): The warning text.
        """
        self.logger.warning("%s", message)
