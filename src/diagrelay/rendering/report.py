# topmark:header:start
#
#   project      : DiagRelay
#   file         : report.py
#   file_relpath : src/diagrelay/rendering/report.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendered report model.

A `RenderedReport` is built once per dispatch, handed to an output sink and
then discarded. Its metadata is plain data so sinks can serialize it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from diagrelay.core.severity import ReportTitle
    from diagrelay.rendering.colored_enum import MessageColor


@dataclass(frozen=True, slots=True)
class ReportMetadata:
    """Presentation metadata attached to a rendered report.

    Attributes:
        title (ReportTitle): ``"Error"`` for error-class severities, else ``"Warning"``.
        color (MessageColor): Color requested for the report body.
    """

    title: ReportTitle
    color: MessageColor

    def to_dict(self) -> dict[str, str]:
        """Return a JSON-friendly mapping."""
        return {"title": self.title.value, "color": self.color.value}


@dataclass(frozen=True, slots=True)
class RenderedReport:
    """Rendered diagnostic text plus its metadata."""

    body: str
    metadata: ReportMetadata
