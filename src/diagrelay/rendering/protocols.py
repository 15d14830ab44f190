# topmark:header:start
#
#   project      : DiagRelay
#   file         : protocols.py
#   file_relpath : src/diagrelay/rendering/protocols.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Collaborator protocols used by the renderer and the dispatcher.

The renderer and dispatcher depend on these structural types only; concrete
implementations ship in `diagrelay.rendering.backtrace`,
`diagrelay.rendering.formatter`, `diagrelay.rendering.stack` and
`diagrelay.cli.sink`, and tests substitute their own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import TextIO

    from diagrelay.rendering.report import ReportMetadata

    # Returns the caller's program stack as text, or "" when unavailable.
    StackCapture = Callable[[], str]


class BacktraceLike(Protocol):
    """Borrowed view of the call context a diagnostic was issued from."""

    def print_title(self, out: TextIO) -> None:
        """Write a short location suffix (e.g. ``" at file:line (command)"``)."""
        ...

    def print_call_stack(self, out: TextIO) -> None:
        """Write the multi-line call stack (possibly nothing)."""
        ...


class TextFormatter(Protocol):
    """Word-wraps free-form diagnostic text."""

    def format_indented(self, text: str, indent: str) -> str:
        """Return ``text`` wrapped and prefixed with ``indent`` on every line."""
        ...


class OutputSink(Protocol):
    """Final destination of rendered reports."""

    def emit(self, body: str, metadata: ReportMetadata) -> None:
        """Display or store one rendered report."""
        ...
