# topmark:header:start
#
#   project      : DiagRelay
#   file         : sink.py
#   file_relpath : src/diagrelay/cli/sink.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console output sink for rendered reports."""

from __future__ import annotations

from typing import TYPE_CHECKING

from diagrelay.config.logging import get_logger

if TYPE_CHECKING:
    from diagrelay.cli_shared.console_api import ConsoleLike
    from diagrelay.config.logging import DiagrelayLogger
    from diagrelay.rendering.report import ReportMetadata

logger: DiagrelayLogger = get_logger(__name__)


class ConsoleSink:
    """Write report bodies to the console's error stream.

    The body is styled with the metadata color (red, yellow or none); the console
    drops the styling when color is disabled. Bodies are already newline
    terminated, so no extra newline is written.
    """

    def __init__(self, console: ConsoleLike) -> None:
        self.console: ConsoleLike = console

    def emit(self, body: str, metadata: ReportMetadata) -> None:
        """Write one report."""
        logger.trace("Emitting %s report (%s)", metadata.title.value, metadata.color.value)
        fg: str | None = metadata.color.fg
        text: str = self.console.styled(body, fg=fg) if fg is not None else body
        self.console.report(text, nl=False)
