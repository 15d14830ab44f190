# topmark:header:start
#
#   project      : DiagRelay
#   file         : errors.py
#   file_relpath : src/diagrelay/config/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the DiagRelay configuration layer.

These are plain ``ValueError`` subclasses so library callers can handle them
without depending on Click. The CLI maps them onto its own exit-code aware
errors (see [`diagrelay.cli.errors`][diagrelay.cli.errors]).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class ConfigError(ValueError):
    """Invalid or unreadable configuration source.

    Attributes:
        path (Path | None): The offending file, if the error came from a file.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        self.path = path
        super().__init__(f"{path}: {message}" if path is not None else message)


class WarningFlagError(ValueError):
    """Malformed ``-W`` flag or unknown warning category."""
