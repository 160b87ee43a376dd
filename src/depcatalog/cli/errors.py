# topmark:header:start
#
#   project      : DepCatalog
#   file         : errors.py
#   file_relpath : src/depcatalog/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the DepCatalog CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from depcatalog.cli.exit_codes import ExitCode
from depcatalog.cli.keys import CtxKey


class DepCatalogCliError(click.ClickException):
    """Base class for all DepCatalog CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Notes:
            - Unlike Click's default, this method does not add color.
            - Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx: click.Context | None = click.get_current_context(silent=True)
        obj: Any = getattr(ctx, "obj", None)
        console: Any = obj.get(CtxKey.CONSOLE) if isinstance(obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))


class DepCatalogUsageError(DepCatalogCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class DepCatalogDataError(DepCatalogCliError):
    """Error for invalid catalog contents."""

    exit_code = ExitCode.DATA_ERROR


class DepCatalogFileNotFoundError(DepCatalogCliError):
    """Error when the catalog file does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class DepCatalogIOError(DepCatalogCliError):
    """Error for I/O errors reading files."""

    exit_code = ExitCode.IO_ERROR


class DepCatalogConfigError(DepCatalogCliError):
    """Error for explicitly passed settings files that cannot be used."""

    exit_code = ExitCode.CONFIG_ERROR
