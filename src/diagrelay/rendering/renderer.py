# topmark:header:start
#
#   project      : DiagRelay
#   file         : renderer.py
#   file_relpath : src/diagrelay/rendering/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Message renderer: turns a (severity, text, backtrace) triple into a report.

The body is assembled in a fixed order into a single buffer:

1. preamble (``"<product> Warning (dev)"``, ...);
2. the backtrace title (``" at file:line (command)"``);
3. ``":\\n"`` and the text, word-wrapped and indented;
4. the backtrace call stack;
5. the suppression hint for developer diagnostics;
6. a terminating newline;
7. for internal errors only, the program stack (when a capture is configured).

Rendering has no side effects: the same inputs always give the same body.
Setting the error flag is the dispatcher's job.
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, Final

from diagrelay.constants import DEFAULT_PRODUCT_NAME, TEXT_INDENT
from diagrelay.core.severity import Severity
from diagrelay.rendering.report import RenderedReport, ReportMetadata

if TYPE_CHECKING:
    from diagrelay.rendering.protocols import BacktraceLike, StackCapture, TextFormatter

_SUPPRESSION_HINTS: Final[dict[Severity, str]] = {
    Severity.AUTHOR_WARNING: (
        "This warning is for project developers.  Use -Wno-dev to suppress it."
    ),
    Severity.AUTHOR_ERROR: (
        "This error is for project developers. Use -Wno-error=dev to suppress it."
    ),
}

_STACK_WARNING_TOKEN: Final[str] = "WARNING:"
_STACK_NOTE_TOKEN: Final[str] = "Note:"


class MessageRenderer:
    """Render diagnostics into `RenderedReport` objects.

    Args:
        formatter (TextFormatter): Word-wraps the diagnostic text.
        product_name (str): Prefix of every preamble.
        stack_capture (StackCapture | None): Returns the program stack for internal
            errors; ``None`` skips that section.
    """

    def __init__(
        self,
        formatter: TextFormatter,
        *,
        product_name: str = DEFAULT_PRODUCT_NAME,
        stack_capture: StackCapture | None = None,
    ) -> None:
        self._formatter: TextFormatter = formatter
        self._product_name: str = product_name
        self._stack_capture: StackCapture | None = stack_capture

    @property
    def product_name(self) -> str:
        """Return the preamble prefix."""
        return self._product_name

    def render(self, severity: Severity, text: str, backtrace: BacktraceLike) -> RenderedReport:
        """Render one diagnostic.

        Args:
            severity (Severity): Effective (already reclassified) severity.
            text (str): Free-form diagnostic text.
            backtrace (BacktraceLike): Call context; only read, never modified.

        Returns:
            RenderedReport: The report body and its metadata.
        """
        buf = io.StringIO()
        buf.write(severity.preamble(self._product_name))
        backtrace.print_title(buf)
        buf.write(":\n")
        buf.write(self._formatter.format_indented(text, TEXT_INDENT))
        backtrace.print_call_stack(buf)

        hint: str | None = _SUPPRESSION_HINTS.get(severity)
        if hint is not None:
            buf.write(hint)
        buf.write("\n")

        if severity is Severity.INTERNAL_ERROR:
            self._write_program_stack(buf)

        return RenderedReport(
            body=buf.getvalue(),
            metadata=ReportMetadata(title=severity.report_title, color=severity.message_color),
        )

    def _write_program_stack(self, buf: io.StringIO) -> None:
        if self._stack_capture is None:
            return
        stack: str = self._stack_capture()
        if not stack:
            return
        if stack.startswith(_STACK_WARNING_TOKEN):
            stack = _STACK_NOTE_TOKEN + stack[len(_STACK_WARNING_TOKEN) :]
        buf.write(stack)
        buf.write("\n")
