# topmark:header:start
#
#   project      : DiagRelay
#   file         : api.py
#   file_relpath : src/diagrelay/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public API for embedding DiagRelay.

Wires the renderer, dispatcher and error state from resolved `Settings`.

Example:
    ```python
    from diagrelay.api import build_dispatcher
    from diagrelay.config import Settings
    from diagrelay.core.error_state import ErrorState
    from diagrelay.core.model import Diagnostic
    from diagrelay.core.severity import Severity

    settings = Settings()
    error_state = ErrorState()
    dispatcher = build_dispatcher(settings, sink=my_sink, error_state=error_state)
    dispatcher.dispatch(Diagnostic(Severity.AUTHOR_WARNING, "Policy not set."), settings.policy)
    exit_code = 1 if error_state.error_occurred else 0
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from diagrelay.config.logging import get_logger
from diagrelay.core.dispatch import Dispatcher
from diagrelay.rendering.formatter import DocumentationFormatter
from diagrelay.rendering.renderer import MessageRenderer
from diagrelay.rendering.stack import capture_program_stack

if TYPE_CHECKING:
    from diagrelay.config.logging import DiagrelayLogger
    from diagrelay.config.model import Settings
    from diagrelay.core.error_state import ErrorFlag
    from diagrelay.rendering.protocols import OutputSink, StackCapture

logger: DiagrelayLogger = get_logger(__name__)


def build_renderer(
    settings: Settings,
    *,
    stack_capture: StackCapture | None = capture_program_stack,
) -> MessageRenderer:
    """Create a `MessageRenderer` for the given settings.

    Args:
        settings (Settings): Resolved settings (product name, text width).
        stack_capture (StackCapture | None): Program stack provider for internal
            errors; ``None`` omits the program stack.

    Returns:
        MessageRenderer: The configured renderer.
    """
    return MessageRenderer(
        DocumentationFormatter(text_width=settings.text_width),
        product_name=settings.product_name,
        stack_capture=stack_capture,
    )


def build_dispatcher(
    settings: Settings,
    *,
    sink: OutputSink,
    error_state: ErrorFlag,
    stack_capture: StackCapture | None = capture_program_stack,
) -> Dispatcher:
    """Create a `Dispatcher` emitting to ``sink``.

    The policy is not bound here: pass the current policy to every
    `Dispatcher.dispatch` call.

    Args:
        settings (Settings): Resolved settings.
        sink (OutputSink): Destination of rendered reports.
        error_state (ErrorFlag): Error flag marked by error-class diagnostics.
        stack_capture (StackCapture | None): See `build_renderer`.

    Returns:
        Dispatcher: The wired dispatcher.
    """
    logger.debug(
        "Building dispatcher (product=%r, width=%d, stack=%s)",
        settings.product_name,
        settings.text_width,
        "on" if stack_capture is not None else "off",
    )
    return Dispatcher(
        build_renderer(settings, stack_capture=stack_capture),
        sink,
        error_state,
    )
