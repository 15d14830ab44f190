# topmark:header:start
#
#   project      : DiagRelay
#   file         : model.py
#   file_relpath : src/diagrelay/core/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic input model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from diagrelay.rendering.backtrace import Backtrace

if TYPE_CHECKING:
    from diagrelay.core.severity import Severity
    from diagrelay.rendering.protocols import BacktraceLike


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A raw diagnostic as issued by the host tool.

    Attributes:
        severity (Severity): Severity the diagnostic was issued with (before policy).
        text (str): Free-form message text.
        backtrace (BacktraceLike): Borrowed call context; read but never modified.
    """

    severity: Severity
    text: str
    backtrace: BacktraceLike = field(default_factory=Backtrace)
