# topmark:header:start
#
#   project      : DiagRelay
#   file         : dispatch.py
#   file_relpath : src/diagrelay/core/dispatch.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dispatch controller: reclassify, filter, render, flag and emit.

`Dispatcher.dispatch` is the single entry point hosts call to report a
diagnostic. For each call it:

1. reclassifies the severity with the *current* policy (passed per call, never
   cached);
2. drops the diagnostic silently when it was not forced and its effective
   severity is not visible;
3. otherwise renders it, marks the error flag for error-class severities and
   hands the report to the output sink.

A diagnostic whose severity was changed by the policy is *forced* and is
never suppressed, so ``-Werror=dev`` together with ``-Wno-dev`` still reports
developer warnings, as errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from diagrelay.config.logging import get_logger
from diagrelay.core.reclassify import reclassify
from diagrelay.core.visibility import is_visible

if TYPE_CHECKING:
    from diagrelay.config.logging import DiagrelayLogger
    from diagrelay.config.policy import PolicyStore
    from diagrelay.core.error_state import ErrorFlag
    from diagrelay.core.model import Diagnostic
    from diagrelay.core.severity import Severity
    from diagrelay.rendering.protocols import OutputSink
    from diagrelay.rendering.renderer import MessageRenderer
    from diagrelay.rendering.report import RenderedReport

logger: DiagrelayLogger = get_logger(__name__)


class Dispatcher:
    """Route diagnostics through policy, rendering and output.

    Args:
        renderer (MessageRenderer): Builds report bodies.
        sink (OutputSink): Receives every emitted report.
        error_state (ErrorFlag): Marked once per emitted error-class diagnostic.
    """

    def __init__(
        self,
        renderer: MessageRenderer,
        sink: OutputSink,
        error_state: ErrorFlag,
    ) -> None:
        self.renderer: MessageRenderer = renderer
        self.sink: OutputSink = sink
        self.error_state: ErrorFlag = error_state

    def dispatch(self, diagnostic: Diagnostic, policy: PolicyStore) -> bool:
        """Process one diagnostic.

        Args:
            diagnostic (Diagnostic): The diagnostic to report.
            policy (PolicyStore): Warning policy in effect for this call.

        Returns:
            bool: True if a report was emitted, False if it was dropped.
        """
        effective: Severity
        forced: bool
        effective, forced = reclassify(diagnostic.severity, policy)
        if forced:
            logger.trace("Reclassified %s -> %s", diagnostic.severity.name, effective.name)

        if not forced and not is_visible(effective, policy):
            logger.debug("Dropping %s diagnostic (suppressed by policy)", effective.name)
            return False

        report: RenderedReport = self.renderer.render(
            effective, diagnostic.text, diagnostic.backtrace
        )
        if effective.is_error:
            self.error_state.mark_error_occurred()
        self.sink.emit(report.body, report.metadata)
        return True
