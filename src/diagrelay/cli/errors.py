# topmark:header:start
#
#   project      : DiagRelay
#   file         : errors.py
#   file_relpath : src/diagrelay/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the DiagRelay CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Library-level `ConfigError` and `WarningFlagError`
    are translated into them at the command boundary.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from diagrelay.cli.keys import ArgKey
from diagrelay.cli_shared.exit_codes import ExitCode


class DiagrelayError(click.ClickException):
    """Base class for all DiagRelay CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get(ArgKey.CONSOLE)
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class DiagrelayUsageError(DiagrelayError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class DiagrelayConfigError(DiagrelayError):
    """Error for configuration errors (unreadable/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class DiagrelayUnexpectedError(DiagrelayError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR
